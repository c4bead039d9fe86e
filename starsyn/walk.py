"""Depth-first traversal of syntax trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .nodes import (
    AssignStmt,
    BinaryExpr,
    BranchStmt,
    CallExpr,
    Comprehension,
    CondExpr,
    DefStmt,
    DictEntry,
    DictExpr,
    DotExpr,
    ExprStmt,
    File,
    ForClause,
    ForStmt,
    Ident,
    IfClause,
    IfStmt,
    IndexExpr,
    LambdaExpr,
    ListExpr,
    Literal,
    LoadStmt,
    Node,
    ParenExpr,
    ReturnStmt,
    SliceExpr,
    TupleExpr,
    UnaryExpr,
    WhileStmt,
)


def _children(node: Node) -> Iterator[Node]:
    match node:
        case File():
            yield from node.stmts
        case ExprStmt():
            yield node.x
        case BranchStmt() | Ident() | Literal():
            pass
        case IfStmt():
            yield node.cond
            yield from node.true
            yield from node.false
        case AssignStmt():
            yield node.lhs
            yield node.rhs
        case DefStmt():
            yield node.name
            yield from node.params
            yield from node.body
        case ForStmt():
            yield node.vars
            yield node.x
            yield from node.body
        case WhileStmt():
            yield node.cond
            yield from node.body
        case ReturnStmt():
            if node.result is not None:
                yield node.result
        case LoadStmt():
            yield node.module
            yield from node.from_
            yield from node.to
        case ListExpr() | TupleExpr():
            yield from node.elements
        case ParenExpr():
            yield node.x
        case CondExpr():
            yield node.cond
            yield node.true
            yield node.false
        case IndexExpr():
            yield node.x
            yield node.y
        case DictEntry():
            yield node.key
            yield node.value
        case SliceExpr():
            yield node.x
            yield from (b for b in (node.lo, node.hi, node.step) if b is not None)
        case Comprehension():
            yield node.body
            yield from node.clauses
        case IfClause():
            yield node.cond
        case ForClause():
            yield node.vars
            yield node.x
        case DictExpr():
            yield from node.entries
        case UnaryExpr():
            if node.x is not None:
                yield node.x
        case BinaryExpr():
            yield node.x
            yield node.y
        case DotExpr():
            yield node.x
            yield node.name
        case CallExpr():
            yield node.fn
            yield from node.args
        case LambdaExpr():
            yield from node.params
            yield node.body
        case _:
            raise TypeError(f"unexpected syntax node: {type(node).__name__}")


def walk(node: Node, f: Callable[[Node | None], bool]) -> None:
    """Traverse a syntax tree depth first.

    Calls ``f(node)``; if that returns true, walks each child in turn and
    then calls ``f(None)``.
    """
    if node is None:
        raise ValueError("walk: node must not be None")
    if not f(node):
        return
    for child in _children(node):
        walk(child, f)
    f(None)