"""Quoting and unquoting of string and bytes literals."""

from __future__ import annotations

import re
import string
from collections.abc import Iterator

_MAX_RUNE = 0x10FFFF

# Single-letter characters following a backslash, mapped to their values.
_UNESC = {
    "a": 0x07,
    "b": 0x08,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
    "\\": ord("\\"),
    "'": ord("'"),
    '"': ord('"'),
}

# Characters worth escaping, mapped to the letter that follows the backslash.
_ESC = {
    "\a": "a",
    "\b": "b",
    "\f": "f",
    "\n": "n",
    "\r": "r",
    "\t": "t",
    "\v": "v",
}

_OCTAL_DIGITS = "01234567"
_HEX_DIGITS = frozenset(string.hexdigits)

_RAW_SPECIALS = re.compile(r"\r")
_COOKED_SPECIALS = re.compile(r"[\\\r]")


class QuoteError(ValueError):
    """Raised when a quoted literal is malformed."""


def _parse_hex(digits: str) -> int | None:
    if digits and all(c in _HEX_DIGITS for c in digits):
        return int(digits, 16)
    return None


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def unquote(quoted: str) -> tuple[str | bytes, bool, bool]:
    """Decode a string or bytes literal.

    Returns ``(value, triple, is_bytes)``; ``value`` is ``bytes`` for a
    bytes literal and ``str`` otherwise.
    """
    raw = False
    if quoted.startswith("r"):
        raw = True
        quoted = quoted[1:]
    is_bytes = False
    if quoted.startswith("b"):
        is_bytes = True
        quoted = quoted[1:]

    if len(quoted) < 2:
        raise QuoteError("string literal too short")

    mark = quoted[0]
    if mark not in "\"'" or mark != quoted[-1]:
        raise QuoteError("string literal has invalid quotes")

    triple = (
        len(quoted) >= 6
        and quoted[1] == mark
        and quoted[2] == mark
        and quoted[:3] == quoted[-3:]
    )
    body = quoted[3:-3] if triple else quoted[1:-1]

    specials = _RAW_SPECIALS if raw else _COOKED_SPECIALS
    out = bytearray()
    pos = 0
    size = len(body)
    while True:
        match = specials.search(body, pos)
        stop = match.start() if match else size
        out += _encode(body[pos:stop])
        pos = stop
        if pos == size:
            break

        if body[pos] == "\r":
            out += b"\n"
            pos += 2 if body.startswith("\n", pos + 1) else 1
            continue

        if pos + 1 == size:
            raise QuoteError("truncated escape sequence \\")

        esc = body[pos + 1]
        if esc == "\n":
            # An escaped line break is dropped along with the backslash.
            pos += 2
        elif esc in _UNESC:
            out.append(_UNESC[esc])
            pos += 2
        elif esc in _OCTAL_DIGITS:
            value = int(esc)
            pos += 2
            for _ in range(2):
                if pos < size and body[pos] in _OCTAL_DIGITS:
                    value = value * 8 + int(body[pos])
                    pos += 1
                else:
                    break
            if not is_bytes and value > 127:
                raise QuoteError(
                    f"non-ASCII octal escape \\{value:o} "
                    f"(use \\u{value:04X} for the UTF-8 encoding of U+{value:04X})"
                )
            if value >= 256:
                raise QuoteError(f"invalid escape sequence \\{value:03o}")
            out.append(value)
        elif esc == "x":
            if size - pos < 4:
                raise QuoteError(f"truncated escape sequence {body[pos:]}")
            value = _parse_hex(body[pos + 2 : pos + 4])
            if value is None:
                raise QuoteError(f"invalid escape sequence {body[pos:pos + 4]}")
            if not is_bytes and value > 127:
                raise QuoteError(
                    f"non-ASCII hex escape {body[pos:pos + 4]} "
                    f"(use \\u{value:04X} for the UTF-8 encoding of U+{value:04X})"
                )
            out.append(value)
            pos += 4
        elif esc in "uU":
            width = 10 if esc == "U" else 6
            if size - pos < width:
                raise QuoteError(f"truncated escape sequence {body[pos:]}")
            value = _parse_hex(body[pos + 2 : pos + width])
            if value is None:
                raise QuoteError(f"invalid escape sequence {body[pos:pos + width]}")
            if value > _MAX_RUNE:
                raise QuoteError(
                    f"code point out of range: {body[pos:pos + width]} "
                    f"(max \\U{value:08x})"
                )
            if 0xD800 <= value < 0xE000:
                raise QuoteError(f"invalid Unicode code point U+{value:04X}")
            out += chr(value).encode("utf-8")
            pos += width
        else:
            # A backslash must escape something.
            raise QuoteError(f"invalid escape sequence \\{esc}")

    data = bytes(out)
    if is_bytes:
        return data, triple, True
    return data.decode("utf-8", "surrogatepass"), triple, False


def _utf8_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield ``(char, 0)`` for each valid UTF-8 sequence, ``(None, byte)`` otherwise."""
    pos = 0
    while pos < len(data):
        width = _utf8_width(data[pos])
        if width:
            try:
                char = data[pos : pos + width].decode("utf-8")
            except UnicodeDecodeError:
                pass
            else:
                if len(char) == 1:
                    yield char, 0
                    pos += width
                    continue
        yield None, data[pos]
        pos += 1


def quote(s: str | bytes, as_bytes: bool = False) -> str:
    """Return a double-quoted literal denoting ``s``; a bytes literal if ``as_bytes``."""
    data = bytes(s) if isinstance(s, (bytes, bytearray)) else _encode(s)
    parts = ['b"' if as_bytes else '"']
    for char, byte in _runes(data):
        if char is None:
            # Invalid UTF-8: only representable with a hex escape.
            parts.append(f"\\x{byte:02x}")
        elif char in '"\\':
            parts.append("\\" + char)
        elif char.isprintable():
            parts.append(char)
        elif char in _ESC:
            parts.append("\\" + _ESC[char])
        else:
            code = ord(char)
            if code < 0x20 or code == 0x7F:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)