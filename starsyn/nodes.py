"""Syntax tree node types and their source spans."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any

from .options import FileOptions
from .tokens import Position, Token


@dataclass(frozen=True)
class Comment:
    """A single ``#`` comment, without its trailing newline."""

    start: Position
    text: str


@dataclass
class Comments:
    """The comments associated with a node."""

    before: list[Comment] = field(default_factory=list)  # whole-line comments before
    suffix: list[Comment] = field(default_factory=list)  # end-of-line comments (up to 1)
    after: list[Comment] = field(default_factory=list)  # top-level only: whole-line after


class Node(abc.ABC):
    """A node in a syntax tree."""

    comments: Comments | None = None

    @abc.abstractmethod
    def span(self) -> tuple[Position, Position]:
        """Return the start and end positions of the node."""

    def alloc_comments(self) -> Comments:
        """Attach an empty set of comments if there is none, and return it."""
        if self.comments is None:
            self.comments = Comments()
        return self.comments


class Stmt(Node):
    """A statement."""


class Expr(Node):
    """An expression."""


def start(node: Node) -> Position:
    """Return the start position of ``node``."""
    return node.span()[0]


def end(node: Node) -> Position:
    """Return the end position of ``node``."""
    return node.span()[1]


def _body_end(body: list[Stmt]) -> Position:
    return end(body[-1])


@dataclass(eq=False)
class File(Node):
    """A source file."""

    path: str
    stmts: list[Stmt] = field(default_factory=list)
    module: Any = None  # set by the resolver
    options: FileOptions | None = None

    def span(self) -> tuple[Position, Position]:
        if not self.stmts:
            return Position(), Position()
        return start(self.stmts[0]), end(self.stmts[-1])


@dataclass(eq=False)
class AssignStmt(Stmt):
    """An assignment such as ``x = 0``, ``x, y = y, x`` or ``x += 1``."""

    op_pos: Position
    op: Token
    lhs: Expr
    rhs: Expr

    def span(self) -> tuple[Position, Position]:
        return start(self.lhs), end(self.rhs)


@dataclass(eq=False)
class DefStmt(Stmt):
    """A function definition."""

    def_pos: Position
    name: Ident
    lparen: Position
    params: list[Expr]  # ident | ident=expr | * | *ident | **ident
    rparen: Position
    body: list[Stmt]
    function: Any = None  # set by the resolver

    def span(self) -> tuple[Position, Position]:
        return self.def_pos, _body_end(self.body)


@dataclass(eq=False)
class ExprStmt(Stmt):
    """An expression evaluated for its effects."""

    x: Expr

    def span(self) -> tuple[Position, Position]:
        return self.x.span()


@dataclass(eq=False)
class IfStmt(Stmt):
    """A conditional; ``elif`` chains are nested IfStmts."""

    if_pos: Position  # IF or ELIF
    cond: Expr
    true: list[Stmt]
    else_pos: Position = field(default_factory=Position)  # ELSE or ELIF
    false: list[Stmt] = field(default_factory=list)

    def span(self) -> tuple[Position, Position]:
        return self.if_pos, _body_end(self.false or self.true)


@dataclass(eq=False)
class LoadStmt(Stmt):
    """A ``load(module, "x", y="foo")`` statement.

    ``from_`` holds the names bound in the loading file and ``to`` the
    names in the loaded module; plain strings get synthesized identifiers.
    """

    load: Position
    module: Literal
    from_: list[Ident]
    to: list[Ident]
    rparen: Position

    def span(self) -> tuple[Position, Position]:
        return self.load, self.rparen

    def module_name(self) -> str:
        """Return the name of the loaded module."""
        return self.module.value


@dataclass(eq=False)
class BranchStmt(Stmt):
    """A ``break``, ``continue`` or ``pass`` statement."""

    token: Token
    token_pos: Position

    def span(self) -> tuple[Position, Position]:
        return self.token_pos, self.token_pos.add(str(self.token))


@dataclass(eq=False)
class ReturnStmt(Stmt):
    """A return statement, with an optional result."""

    return_pos: Position
    result: Expr | None = None

    def span(self) -> tuple[Position, Position]:
        if self.result is None:
            return self.return_pos, self.return_pos.add("return")
        return self.return_pos, end(self.result)


@dataclass(eq=False)
class ForStmt(Stmt):
    """A loop: ``for vars in x: body``."""

    for_pos: Position
    vars: Expr
    x: Expr
    body: list[Stmt]

    def span(self) -> tuple[Position, Position]:
        return self.for_pos, _body_end(self.body)


@dataclass(eq=False)
class WhileStmt(Stmt):
    """A loop: ``while cond: body``."""

    while_pos: Position
    cond: Expr
    body: list[Stmt]

    def span(self) -> tuple[Position, Position]:
        return self.while_pos, _body_end(self.body)


@dataclass(eq=False)
class Ident(Expr):
    """An identifier."""

    name_pos: Position
    name: str
    binding: Any = None  # set by the resolver

    def span(self) -> tuple[Position, Position]:
        return self.name_pos, self.name_pos.add(self.name)


@dataclass(eq=False)
class Literal(Expr):
    """A string, bytes, int or float literal."""

    token: Token
    token_pos: Position
    raw: str  # uninterpreted text
    value: Any  # str | bytes | int | float

    def span(self) -> tuple[Position, Position]:
        return self.token_pos, self.token_pos.add(self.raw)


@dataclass(eq=False)
class ParenExpr(Expr):
    """A parenthesized expression ``(x)``."""

    lparen: Position
    x: Expr
    rparen: Position

    def span(self) -> tuple[Position, Position]:
        return self.lparen, self.rparen.add(")")


@dataclass(eq=False)
class CallExpr(Expr):
    """A call ``fn(args)``."""

    fn: Expr
    lparen: Position
    args: list[Expr]  # expr | ident=expr | *expr | **expr
    rparen: Position

    def span(self) -> tuple[Position, Position]:
        return start(self.fn), self.rparen.add(")")


@dataclass(eq=False)
class DotExpr(Expr):
    """A field or method selector ``x.name``."""

    x: Expr
    dot: Position
    name_pos: Position
    name: Ident

    def span(self) -> tuple[Position, Position]:
        return start(self.x), end(self.name)


@dataclass(eq=False)
class Comprehension(Expr):
    """A list or dict comprehension."""

    curly: bool  # {x: y for ...} or {x for ...}, not [x for ...]
    lbrack: Position
    body: Expr
    clauses: list[Node]  # ForClause | IfClause
    rbrack: Position

    def span(self) -> tuple[Position, Position]:
        return self.lbrack, self.rbrack.add("]")


@dataclass(eq=False)
class ForClause(Node):
    """A ``for vars in x`` clause of a comprehension."""

    for_pos: Position
    vars: Expr
    in_pos: Position
    x: Expr

    def span(self) -> tuple[Position, Position]:
        return self.for_pos, end(self.x)


@dataclass(eq=False)
class IfClause(Node):
    """An ``if cond`` clause of a comprehension."""

    if_pos: Position
    cond: Expr

    def span(self) -> tuple[Position, Position]:
        return self.if_pos, end(self.cond)


@dataclass(eq=False)
class DictExpr(Expr):
    """A dictionary literal ``{entries}``."""

    lbrace: Position
    entries: list[Expr]  # all DictEntry
    rbrace: Position

    def span(self) -> tuple[Position, Position]:
        return self.lbrace, self.rbrace.add("}")


@dataclass(eq=False)
class DictEntry(Expr):
    """A ``key: value`` entry of a dictionary literal."""

    key: Expr
    colon: Position
    value: Expr

    def span(self) -> tuple[Position, Position]:
        return start(self.key), end(self.value)


@dataclass(eq=False)
class LambdaExpr(Expr):
    """An inline function."""

    lambda_pos: Position
    params: list[Expr]  # ident | ident=expr | * | *ident | **ident
    body: Expr
    function: Any = None  # set by the resolver

    def span(self) -> tuple[Position, Position]:
        return self.lambda_pos, end(self.body)


@dataclass(eq=False)
class ListExpr(Expr):
    """A list literal ``[elements]``."""

    lbrack: Position
    elements: list[Expr]
    rbrack: Position

    def span(self) -> tuple[Position, Position]:
        return self.lbrack, self.rbrack.add("]")


@dataclass(eq=False)
class CondExpr(Expr):
    """A conditional expression ``true if cond else false``."""

    if_pos: Position
    cond: Expr
    true: Expr
    else_pos: Position
    false: Expr

    def span(self) -> tuple[Position, Position]:
        return start(self.true), end(self.false)


@dataclass(eq=False)
class TupleExpr(Expr):
    """A tuple literal; parentheses are optional unless it is empty."""

    lparen: Position
    elements: list[Expr]
    rparen: Position

    def span(self) -> tuple[Position, Position]:
        if self.lparen.is_valid():
            return self.lparen, self.rparen
        return start(self.elements[0]), end(self.elements[-1])


@dataclass(eq=False)
class UnaryExpr(Expr):
    """A unary expression ``op x``.

    With ``op`` STAR and no operand it also stands for a bare ``*`` parameter.
    """

    op_pos: Position
    op: Token
    x: Expr | None = None

    def span(self) -> tuple[Position, Position]:
        if self.x is not None:
            return self.op_pos, end(self.x)
        return self.op_pos, self.op_pos.add("*")


@dataclass(eq=False)
class BinaryExpr(Expr):
    """A binary expression ``x op y``.

    With ``op`` EQ it also stands for a named argument or a parameter default.
    """

    x: Expr
    op_pos: Position
    op: Token
    y: Expr

    def span(self) -> tuple[Position, Position]:
        return start(self.x), end(self.y)


@dataclass(eq=False)
class SliceExpr(Expr):
    """A slice ``x[lo:hi:step]``; each bound is optional."""

    x: Expr
    lbrack: Position
    lo: Expr | None
    hi: Expr | None
    step: Expr | None
    rbrack: Position

    def span(self) -> tuple[Position, Position]:
        return start(self.x), self.rbrack


@dataclass(eq=False)
class IndexExpr(Expr):
    """An index expression ``x[y]``."""

    x: Expr
    lbrack: Position
    y: Expr
    rbrack: Position

    def span(self) -> tuple[Position, Position]:
        return start(self.x), self.rbrack