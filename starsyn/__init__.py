"""Scanner, string quoting, syntax-tree nodes and tree walker for the Starlark language."""

__version__ = "0.1.0"
__all__ = ["options", "quote", "tokens", "nodes", "walk", "scanner"]