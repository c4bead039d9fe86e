"""Per-file options that affect parsing, name resolution and compilation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileOptions:
    """Static options for a single file.

    The default instance, with every flag off, is the standard behaviour.
    """

    # resolver
    allow_set: bool = False  # allow references to the 'set' built-in function
    allow_while: bool = False  # allow 'while' statements
    top_level_control: bool = False  # allow if/for/while statements at top level
    global_reassign: bool = False  # allow reassignment to top-level names
    load_binds_globally: bool = False  # load creates global, not file-local, bindings

    # compiler
    recursion: bool = False  # disable the recursion check for functions in this file