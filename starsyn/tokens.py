"""Lexical tokens, source positions and the error type shared by scanner and parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Token(enum.IntEnum):
    """A lexical token kind."""

    ILLEGAL = 0
    EOF = enum.auto()

    NEWLINE = enum.auto()
    INDENT = enum.auto()
    OUTDENT = enum.auto()

    # Tokens with values
    IDENT = enum.auto()
    INT = enum.auto()
    FLOAT = enum.auto()
    STRING = enum.auto()
    BYTES = enum.auto()

    # Punctuation
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    SLASHSLASH = enum.auto()
    PERCENT = enum.auto()
    AMP = enum.auto()
    PIPE = enum.auto()
    CIRCUMFLEX = enum.auto()
    LTLT = enum.auto()
    GTGT = enum.auto()
    TILDE = enum.auto()
    DOT = enum.auto()
    COMMA = enum.auto()
    EQ = enum.auto()
    SEMI = enum.auto()
    COLON = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    LBRACK = enum.auto()
    RBRACK = enum.auto()
    LBRACE = enum.auto()
    RBRACE = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    GE = enum.auto()
    LE = enum.auto()
    EQL = enum.auto()
    NEQ = enum.auto()
    PLUS_EQ = enum.auto()  # keep order consistent with PLUS..GTGT
    MINUS_EQ = enum.auto()
    STAR_EQ = enum.auto()
    SLASH_EQ = enum.auto()
    SLASHSLASH_EQ = enum.auto()
    PERCENT_EQ = enum.auto()
    AMP_EQ = enum.auto()
    PIPE_EQ = enum.auto()
    CIRCUMFLEX_EQ = enum.auto()
    LTLT_EQ = enum.auto()
    GTGT_EQ = enum.auto()
    STARSTAR = enum.auto()

    # Keywords
    AND = enum.auto()
    BREAK = enum.auto()
    CONTINUE = enum.auto()
    DEF = enum.auto()
    ELIF = enum.auto()
    ELSE = enum.auto()
    FOR = enum.auto()
    IF = enum.auto()
    IN = enum.auto()
    LAMBDA = enum.auto()
    LOAD = enum.auto()
    NOT = enum.auto()
    NOT_IN = enum.auto()  # synthesized by the parser from NOT IN
    OR = enum.auto()
    PASS = enum.auto()
    RETURN = enum.auto()
    WHILE = enum.auto()

    def __str__(self) -> str:
        return _TOKEN_NAMES[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def quoted(self) -> str:
        """Like ``str``, but punctuation tokens are wrapped in single quotes."""
        if Token.PLUS <= self <= Token.STARSTAR:
            return f"'{_TOKEN_NAMES[self]}'"
        return _TOKEN_NAMES[self]


_TOKEN_NAMES: dict[Token, str] = {
    Token.ILLEGAL: "illegal token",
    Token.EOF: "end of file",
    Token.NEWLINE: "newline",
    Token.INDENT: "indent",
    Token.OUTDENT: "outdent",
    Token.IDENT: "identifier",
    Token.INT: "int literal",
    Token.FLOAT: "float literal",
    Token.STRING: "string literal",
    Token.BYTES: "bytes literal",
    Token.PLUS: "+",
    Token.MINUS: "-",
    Token.STAR: "*",
    Token.SLASH: "/",
    Token.SLASHSLASH: "//",
    Token.PERCENT: "%",
    Token.AMP: "&",
    Token.PIPE: "|",
    Token.CIRCUMFLEX: "^",
    Token.LTLT: "<<",
    Token.GTGT: ">>",
    Token.TILDE: "~",
    Token.DOT: ".",
    Token.COMMA: ",",
    Token.EQ: "=",
    Token.SEMI: ";",
    Token.COLON: ":",
    Token.LPAREN: "(",
    Token.RPAREN: ")",
    Token.LBRACK: "[",
    Token.RBRACK: "]",
    Token.LBRACE: "{",
    Token.RBRACE: "}",
    Token.LT: "<",
    Token.GT: ">",
    Token.GE: ">=",
    Token.LE: "<=",
    Token.EQL: "==",
    Token.NEQ: "!=",
    Token.PLUS_EQ: "+=",
    Token.MINUS_EQ: "-=",
    Token.STAR_EQ: "*=",
    Token.SLASH_EQ: "/=",
    Token.SLASHSLASH_EQ: "//=",
    Token.PERCENT_EQ: "%=",
    Token.AMP_EQ: "&=",
    Token.PIPE_EQ: "|=",
    Token.CIRCUMFLEX_EQ: "^=",
    Token.LTLT_EQ: "<<=",
    Token.GTGT_EQ: ">>=",
    Token.STARSTAR: "**",
    Token.AND: "and",
    Token.BREAK: "break",
    Token.CONTINUE: "continue",
    Token.DEF: "def",
    Token.ELIF: "elif",
    Token.ELSE: "else",
    Token.FOR: "for",
    Token.IF: "if",
    Token.IN: "in",
    Token.LAMBDA: "lambda",
    Token.LOAD: "load",
    Token.NOT: "not",
    Token.NOT_IN: "not in",
    Token.OR: "or",
    Token.PASS: "pass",
    Token.RETURN: "return",
    Token.WHILE: "while",
}

_KEYWORDS: dict[str, Token] = {
    "and": Token.AND,
    "break": Token.BREAK,
    "continue": Token.CONTINUE,
    "def": Token.DEF,
    "elif": Token.ELIF,
    "else": Token.ELSE,
    "for": Token.FOR,
    "if": Token.IF,
    "in": Token.IN,
    "lambda": Token.LAMBDA,
    "load": Token.LOAD,
    "not": Token.NOT,
    "or": Token.OR,
    "pass": Token.PASS,
    "return": Token.RETURN,
    "while": Token.WHILE,
    # reserved words ("assert" is deliberately left usable)
    "as": Token.ILLEGAL,
    "async": Token.ILLEGAL,
    "await": Token.ILLEGAL,
    "class": Token.ILLEGAL,
    "del": Token.ILLEGAL,
    "except": Token.ILLEGAL,
    "finally": Token.ILLEGAL,
    "from": Token.ILLEGAL,
    "global": Token.ILLEGAL,
    "import": Token.ILLEGAL,
    "is": Token.ILLEGAL,
    "nonlocal": Token.ILLEGAL,
    "raise": Token.ILLEGAL,
    "try": Token.ILLEGAL,
    "with": Token.ILLEGAL,
    "yield": Token.ILLEGAL,
}


def keyword_token(word: str) -> Token | None:
    """Return the keyword token for ``word``, ``ILLEGAL`` for a reserved word, else ``None``."""
    return _KEYWORDS.get(word)


@dataclass(frozen=True)
class FilePortion:
    """A portion of a file whose first line and column are not (1, 1)."""

    content: bytes | str
    first_line: int = 1
    first_col: int = 1


@dataclass(frozen=True)
class Position:
    """The location of a character of input.

    ``line`` and ``col`` are 1-based; 0 means unknown. A position with no
    file is invalid.
    """

    file: str | None = None
    line: int = 0
    col: int = 0

    def is_valid(self) -> bool:
        """Report whether the position refers to a file."""
        return self.file is not None

    @property
    def filename(self) -> str:
        return self.file if self.file is not None else "<invalid>"

    def add(self, s: str) -> Position:
        """Return the position at the end of ``s``, assuming it starts here."""
        line, col = self.line, self.col
        newlines = s.count("\n")
        if newlines:
            line += newlines
            s = s[s.rindex("\n") + 1 :]
            col = 1
        return Position(self.file, line, col + len(s))

    def is_before(self, other: Position) -> bool:
        """Report whether this position comes strictly before ``other``."""
        if self.line != other.line:
            return self.line < other.line
        return self.col < other.col

    def __str__(self) -> str:
        if self.line > 0:
            if self.col > 0:
                return f"{self.filename}:{self.line}:{self.col}"
            return f"{self.filename}:{self.line}"
        return self.filename


class ParseError(Exception):
    """A scanner or parser error at a position."""

    def __init__(self, pos: Position, msg: str) -> None:
        super().__init__(pos, msg)
        self.pos = pos
        self.msg = msg

    def __str__(self) -> str:
        return f"{self.pos}: {self.msg}"