"""A lexical scanner that turns source text into a stream of tokens."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, NoReturn

from .nodes import Comment
from .quote import QuoteError, quote, unquote
from .tokens import FilePortion, ParseError, Position, Token, keyword_token

_INT64_MAX = 2**63 - 1
_TAB_WIDTH = 8

# Operators that may be followed by '=', and the token they form with it.
_WITH_EQ = {
    "<": Token.LE,
    ">": Token.GE,
    "=": Token.EQL,
    "!": Token.NEQ,
    "+": Token.PLUS_EQ,
    "-": Token.MINUS_EQ,
    "/": Token.SLASH_EQ,
    "%": Token.PERCENT_EQ,
    "&": Token.AMP_EQ,
    "|": Token.PIPE_EQ,
    "^": Token.CIRCUMFLEX_EQ,
}

_SINGLE_OPS = {
    "=": Token.EQ,
    "+": Token.PLUS,
    "-": Token.MINUS,
    "%": Token.PERCENT,
    "&": Token.AMP,
    "|": Token.PIPE,
    "^": Token.CIRCUMFLEX,
    ":": Token.COLON,
    ";": Token.SEMI,
    "~": Token.TILDE,
}

_OPENERS = {"[": Token.LBRACK, "(": Token.LPAREN, "{": Token.LBRACE}
_CLOSERS = {"]": Token.RBRACK, ")": Token.RPAREN, "}": Token.RBRACE}


@dataclass(frozen=True)
class TokenValue:
    """A scanned token: its kind, raw text, start position and decoded value.

    ``value`` is an ``int`` or ``float`` for number literals, a ``str`` for
    string literals, ``bytes`` for bytes literals and ``None`` otherwise.
    """

    token: Token
    raw: str
    pos: Position
    value: Any = None


def _isdigit(c: str) -> bool:
    return c != "" and "0" <= c <= "9"


def _isodigit(c: str) -> bool:
    return c != "" and "0" <= c <= "7"


def _isxdigit(c: str) -> bool:
    return c != "" and ("0" <= c <= "9" or "a" <= c <= "f" or "A" <= c <= "F")


def _isbdigit(c: str) -> bool:
    return c in ("0", "1")


def is_ident_start(c: str) -> bool:
    """Report whether ``c`` may begin an identifier."""
    return c != "" and ("a" <= c <= "z" or "A" <= c <= "Z" or c == "_" or c.isalpha())


def is_ident(c: str) -> bool:
    """Report whether ``c`` may appear within an identifier."""
    return _isdigit(c) or is_ident_start(c)


def _quote_char(c: str) -> str:
    if c == "'":
        return "'\\''"
    if c == '"':
        return "'\"'"
    return "'" + quote(c)[1:-1] + "'"


def _text(data: str | bytes | bytearray) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", "replace")
    return data


def _read_source(filename: str, src: Any) -> str:
    if isinstance(src, FilePortion):
        return _text(src.content)
    if isinstance(src, (str, bytes, bytearray)):
        return _text(src)
    if src is None:
        with open(filename, "rb") as fh:
            return _text(fh.read())
    if hasattr(src, "read"):
        return _text(src.read())
    raise TypeError(f"invalid source: {type(src).__name__}")


def _parse_int(raw: str) -> int:
    prefix = raw[:2].lower()
    if len(raw) > 2 and prefix == "0o":
        value = int(raw[2:], 8)
    elif len(raw) > 2 and prefix == "0b":
        value = int(raw[2:], 2)
    else:
        if prefix == "0x":
            return int(raw[2:], 16)
        if len(raw) > 1 and raw[0] == "0":
            return int(raw[1:], 8)
        return int(raw, 10)
    if value > _INT64_MAX:
        raise ValueError("out of range")
    return value


class Scanner:
    """Scans one input file into tokens.

    ``src`` may be a ``str``, ``bytes``, a readable file object, a
    :class:`FilePortion`, ``None`` (read ``filename`` from disk) or a
    callable that returns one line of input per call (interactive use).
    """

    def __init__(
        self,
        filename: str,
        src: Any,
        keep_comments: bool = False,
    ) -> None:
        first_line = first_col = 1
        if isinstance(src, FilePortion):
            first_line, first_col = src.first_line, src.first_col
        self.filename = filename
        self.keep_comments = keep_comments
        self.line_comments: list[Comment] = []
        self.suffix_comments: list[Comment] = []

        self._line = first_line
        self._col = first_col
        self._depth = 0  # nesting of brackets
        self._indents = [0]
        self._dents = 0  # pending INDENT (>0) or OUTDENT (<0) tokens
        self._line_start = True

        self._readline: Callable[[], str | bytes] | None = None
        if callable(src):
            self._readline = src
            self._rest = ""
        else:
            self._rest = _read_source(filename, src)
        self._off = 0
        self._tok_start = 0
        self._tok_pos = self._position()

    # -- low-level input ------------------------------------------------

    def _position(self) -> Position:
        return Position(self.filename, self._line, self._col)

    def _fail(self, pos: Position, msg: str) -> NoReturn:
        raise ParseError(pos, msg)

    def _read_line(self) -> bool:
        if self._readline is None:
            return False
        try:
            line = self._readline()
        except EOFError:
            self._fail(self._position(), "EOF")
        self._rest = _text(line or "")
        self._off = 0
        return bool(self._rest)

    def _eof(self) -> bool:
        return self._off >= len(self._rest) and not self._read_line()

    def _peek(self) -> str:
        """Return the next character, with any newline form as '\\n', or '' at EOF."""
        if self._eof():
            return ""
        c = self._rest[self._off]
        return "\n" if c == "\r" else c

    def _read(self) -> str:
        if self._off >= len(self._rest) and not self._read_line():
            self._fail(self._position(), "internal scanner error: readRune at EOF")
        c = self._rest[self._off]
        self._off += 1
        if c == "\r":
            if self._rest.startswith("\n", self._off):
                self._off += 1
            c = "\n"
        if c == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return c

    def _start_token(self) -> None:
        self._tok_start = self._off
        self._tok_pos = self._position()

    def _current_raw(self) -> str:
        return self._rest[self._tok_start : self._off]

    def _finish(self, token: Token, value: Any = None, raw: str | None = None) -> TokenValue:
        if raw is None:
            raw = self._current_raw()
        return TokenValue(token, raw, self._tok_pos, value)

    # -- tokens ---------------------------------------------------------

    def tokens(self) -> Iterator[TokenValue]:
        """Yield tokens up to and including EOF."""
        while True:
            tv = self.next_token()
            yield tv
            if tv.token == Token.EOF:
                return

    def next_token(self) -> TokenValue:
        """Scan and return the next token."""
        while True:
            blank = False
            saved_line_start = self._line_start
            if self._line_start:
                self._line_start = False
                col = 0
                while True:
                    c = self._peek()
                    if c == " ":
                        col += 1
                        self._read()
                    elif c == "\t":
                        col += _TAB_WIDTH - (self._col - 1) % _TAB_WIDTH
                        self._read()
                    else:
                        break

                if c in ("#", "\n", ""):
                    blank = True

                if not blank and self._depth == 0:
                    cur = self._indents[-1]
                    if col > cur:
                        self._dents += 1
                        self._indents.append(col)
                    elif col < cur:
                        while self._indents and col < self._indents[-1]:
                            self._dents -= 1
                            self._indents.pop()
                        if col != self._indents[-1]:
                            self._fail(
                                self._position(),
                                "unindent does not match any outer indentation level",
                            )

            if self._dents:
                self._start_token()
                if self._dents < 0:
                    self._dents += 1
                    return self._finish(Token.OUTDENT, raw="")
                self._dents -= 1
                return self._finish(Token.INDENT, raw="")

            c = self._peek()
            while c in (" ", "\t"):
                self._read()
                c = self._peek()

            if c == "#":
                if self.keep_comments:
                    self._start_token()
                while c not in ("", "\n"):
                    self._read()
                    c = self._peek()
                if self.keep_comments:
                    comment = Comment(self._tok_pos, self._current_raw())
                    if blank:
                        self.line_comments.append(comment)
                    else:
                        self.suffix_comments.append(comment)

            if c == "\n":
                self._line_start = True
                if self._depth > 0:
                    # Newlines within expressions are ignored.
                    self._read()
                    continue
                if blank:
                    if self._readline is None:
                        self._read()
                        continue
                    if len(self._indents) > 1:
                        # Interactively, a blank line closes open blocks.
                        self._dents = 1 - len(self._indents)
                        del self._indents[1:]
                        continue
                self._start_token()
                self._read()
                return self._finish(Token.NEWLINE, raw="\n")

            if c == "":
                if len(self._indents) > 1:
                    if saved_line_start:
                        self._dents = 1 - len(self._indents)
                        del self._indents[1:]
                        continue
                    self._line_start = True
                    self._start_token()
                    return self._finish(Token.NEWLINE, raw="\n")
                self._start_token()
                return self._finish(Token.EOF, raw="")

            if c == "\\":
                self._read()
                if self._peek() != "\n":
                    self._fail(self._position(), "stray backslash in program")
                self._read()
                continue

            return self._scan_token(c)

    def _scan_token(self, c: str) -> TokenValue:
        self._start_token()

        if c == ",":
            self._read()
            return self._finish(Token.COMMA)

        if c in ("'", '"'):
            return self._scan_string(c)

        if is_ident_start(c):
            rest, off = self._rest, self._off
            if c in ("r", "b") and rest[off + 1 : off + 2] in ("'", '"'):
                self._read()
                return self._scan_string(self._peek())
            if c == "r" and rest[off + 1 : off + 2] == "b" and rest[off + 2 : off + 3] in ("'", '"'):
                self._read()
                self._read()
                return self._scan_string(self._peek())
            while is_ident(c):
                self._read()
                c = self._peek()
            raw = self._current_raw()
            keyword = keyword_token(raw)
            return self._finish(Token.IDENT if keyword is None else keyword, raw=raw)

        if c in _OPENERS:
            self._depth += 1
            self._read()
            return self._finish(_OPENERS[c])

        if c in _CLOSERS:
            if self._depth == 0:
                self._fail(self._position(), f"unexpected {_quote_char(c)}")
            self._depth -= 1
            self._read()
            return self._finish(_CLOSERS[c])

        if _isdigit(c) or c == ".":
            return self._scan_number(c)

        if c in _WITH_EQ:
            start = self._position()
            self._read()
            if self._peek() == "=":
                self._read()
                return self._finish(_WITH_EQ[c])
            if c in ("<", ">", "/"):
                if self._peek() == c:
                    self._read()
                    doubled = {"<": Token.LTLT, ">": Token.GTGT, "/": Token.SLASHSLASH}[c]
                    if self._peek() == "=":
                        self._read()
                        doubled = {
                            "<": Token.LTLT_EQ,
                            ">": Token.GTGT_EQ,
                            "/": Token.SLASHSLASH_EQ,
                        }[c]
                    return self._finish(doubled)
                return self._finish({"<": Token.LT, ">": Token.GT, "/": Token.SLASH}[c])
            if c == "!":
                self._fail(start, "unexpected input character '!'")
            return self._finish(_SINGLE_OPS[c])

        if c in (":", ";", "~"):
            self._read()
            return self._finish(_SINGLE_OPS[c])

        if c == "*":
            self._read()
            nxt = self._peek()
            if nxt == "*":
                self._read()
                return self._finish(Token.STARSTAR)
            if nxt == "=":
                self._read()
                return self._finish(Token.STAR_EQ)
            return self._finish(Token.STAR)

        self._fail(self._position(), f"unexpected input character {_quote_char(c)}")

    def _scan_string(self, mark: str) -> TokenValue:
        start = self._position()
        rest, off = self._rest, self._off
        triple = rest[off : off + 3] == mark * 3
        self._read()

        # The literal may span several lines of interactive input, so the
        # raw text is accumulated here rather than sliced afterwards.
        parts = [rest[self._tok_start : off + 1]]

        def read_escaped() -> None:
            if self._eof():
                self._fail(self._tok_pos, "unexpected EOF in string")
            parts.append(self._read())

        if not triple:
            while True:
                if self._eof():
                    self._fail(self._tok_pos, "unexpected EOF in string")
                c = self._read()
                parts.append(c)
                if c == mark:
                    break
                if c == "\n":
                    self._fail(self._tok_pos, "unexpected newline in string")
                if c == "\\":
                    read_escaped()
        else:
            self._read()
            self._read()
            parts.append(mark * 2)
            quotes = 0
            while True:
                if self._eof():
                    self._fail(self._tok_pos, "unexpected EOF in string")
                c = self._read()
                parts.append(c)
                if c == mark:
                    quotes += 1
                    if quotes == 3:
                        break
                else:
                    quotes = 0
                if c == "\\":
                    read_escaped()

        raw = "".join(parts)
        try:
            value, _, is_bytes = unquote(raw)
        except QuoteError as err:
            self._fail(start, str(err))
        return self._finish(Token.BYTES if is_bytes else Token.STRING, value, raw)

    def _consume_while(self, pred: Callable[[str], bool], c: str) -> str:
        while pred(c):
            self._read()
            c = self._peek()
        return c

    def _scan_number(self, c: str) -> TokenValue:
        start = self._position()
        fraction = exponent = False

        if c == ".":
            self._read()
            c = self._peek()
            if not _isdigit(c):
                return self._finish(Token.DOT)
            fraction = True
        elif c == "0":
            self._read()
            c = self._peek()
            if c == ".":
                fraction = True
            elif c in ("x", "X"):
                self._read()
                c = self._peek()
                if not _isxdigit(c):
                    self._fail(start, "invalid hex literal")
                c = self._consume_while(_isxdigit, c)
            elif c in ("o", "O"):
                self._read()
                c = self._peek()
                if not _isodigit(c):
                    self._fail(self._position(), "invalid octal literal")
                c = self._consume_while(_isodigit, c)
            elif c in ("b", "B"):
                self._read()
                c = self._peek()
                if not _isbdigit(c):
                    self._fail(self._position(), "invalid binary literal")
                c = self._consume_while(_isbdigit, c)
            else:
                # float, or the obsolete octal form "0755"
                all_zeros = octal = True
                while _isdigit(c):
                    if c != "0":
                        all_zeros = False
                    if c > "7":
                        octal = False
                    self._read()
                    c = self._peek()
                if c == ".":
                    fraction = True
                elif c in ("e", "E"):
                    exponent = True
                elif octal and not all_zeros:
                    raw = self._current_raw()
                    self._fail(
                        self._position(),
                        f"obsolete form of octal literal; use 0o{raw[1:]}",
                    )
        else:
            c = self._consume_while(_isdigit, c)
            if c == ".":
                fraction = True
            elif c in ("e", "E"):
                exponent = True

        if fraction:
            self._read()
            c = self._consume_while(_isdigit, self._peek())
            if c in ("e", "E"):
                exponent = True

        if exponent:
            self._read()
            c = self._peek()
            if c in ("+", "-"):
                self._read()
                c = self._peek()
                if not _isdigit(c):
                    self._fail(self._position(), "invalid float literal")
            self._consume_while(_isdigit, c)

        raw = self._current_raw()
        if fraction or exponent:
            try:
                value = float(raw)
            except ValueError:
                value = math.inf
            if math.isinf(value):
                self._fail(self._position(), "invalid float literal")
            return self._finish(Token.FLOAT, value, raw)

        try:
            ivalue = _parse_int(raw)
        except ValueError:
            self._fail(start, "invalid int literal")
        return self._finish(Token.INT, ivalue, raw)


def tokenize(filename: str, src: Any) -> list[TokenValue]:
    """Scan ``src`` completely and return its tokens, ending with EOF."""
    return list(Scanner(filename, src, False).tokens())