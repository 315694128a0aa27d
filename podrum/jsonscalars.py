"""Parsers for the scalar JSON values: strings, booleans, null and numbers.

Each parser takes the text and a position. It returns ``(value, new_position)``
when the text at that position holds a value of its kind. It returns ``None``
when it does not, and raises :class:`JsonError` when the value is malformed.
"""

from __future__ import annotations

_SIMPLE_ESCAPES = {
    "n": "\n",
    "\\": "\\",
    '"': '"',
    "/": "/",
    "b": "\b",
    "r": "\r",
    "t": "\t",
    "f": "\f",
}

# Characters that may not appear unescaped inside a string.
_FORBIDDEN_IN_STRING = frozenset("\a\b\f\n\r\t\v?")

_NUMBER_TERMINATORS = frozenset(" ,]}\n\r")

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class JsonError(ValueError):
    """Raised when JSON text is malformed."""

    def __init__(self, message: str, pos: int) -> None:
        super().__init__(f"{message} at position {pos}")
        self.pos = pos


def _read_hex4(text: str, pos: int) -> int:
    digits = text[pos:pos + 4]
    if len(digits) != 4 or not all(ch in _HEX_DIGITS for ch in digits):
        raise JsonError("Invalid hexcode", pos)
    return int(digits, 16)


def _parse_unicode_escape(text: str, pos: int) -> tuple[str, int]:
    """Decode the digits after ``\\u``; ``pos`` points at the first digit."""
    if len(text) - pos <= 3:
        raise JsonError("Unexpected EOF", pos)
    code = _read_hex4(text, pos)
    pos += 4
    if len(text) - pos > 5 and 0xD800 <= code <= 0xDBFF:
        # A high surrogate may be followed by its low half.
        backslash = text[pos]
        pos += 1
        if backslash == "\\":
            marker = text[pos]
            pos += 1
            if marker == "u":
                low = _read_hex4(text, pos)
                pos += 4
                if 0xDC00 <= low <= 0xDFFF:
                    code = 0x10000 + (((code - 0xD800) << 10) | (low - 0xDC00))
    return chr(code), pos


def parse_string(text: str, pos: int) -> tuple[str, int] | None:
    """Parse a double-quoted string starting at ``pos``."""
    if pos >= len(text) or text[pos] != '"':
        return None
    pos += 1
    parts: list[str] = []
    while True:
        if pos >= len(text):
            raise JsonError("Unexpected EOF", pos)
        ch = text[pos]
        if ch == '"':
            return "".join(parts), pos + 1
        if ch == "\\":
            pos += 1
            if pos >= len(text):
                raise JsonError("Unexpected EOF", pos)
            code = text[pos]
            if code in _SIMPLE_ESCAPES:
                parts.append(_SIMPLE_ESCAPES[code])
                pos += 1
            elif code == "u":
                decoded, pos = _parse_unicode_escape(text, pos + 1)
                parts.append(decoded)
            else:
                raise JsonError("Invalid escape code", pos)
        elif ch in _FORBIDDEN_IN_STRING:
            raise JsonError("Invalid escape code", pos)
        else:
            parts.append(ch)
            pos += 1


def parse_bool(text: str, pos: int) -> tuple[bool, int] | None:
    """Parse ``true`` or ``false`` starting at ``pos``."""
    if text.startswith("true", pos):
        return True, pos + 4
    if text.startswith("false", pos):
        return False, pos + 5
    return None


def parse_null(text: str, pos: int) -> tuple[None, int] | None:
    """Parse ``null`` starting at ``pos``."""
    if text.startswith("null", pos):
        return None, pos + 4
    return None


def parse_number(text: str, pos: int) -> tuple[int | float, int] | None:
    """Parse an integer or a decimal fraction starting at ``pos``.

    A number must be followed by a space, comma, closing bracket or brace,
    or a line break; reaching the end of the text first is an error.
    """
    if pos >= len(text):
        raise JsonError("Unexpected EOF", pos)
    first = text[pos]
    if not (first.isdigit() or first == "-"):
        return None
    start = pos
    expect_digit = first == "-"
    is_float = False
    pos += 1
    while pos < len(text):
        ch = text[pos]
        if ch.isdigit():
            expect_digit = False
            pos += 1
            continue
        if expect_digit:
            raise JsonError("Expects digit", pos)
        if ch == "." and not is_float:
            is_float = True
            expect_digit = True
            pos += 1
        elif ch in _NUMBER_TERMINATORS:
            literal = text[start:pos]
            return (float(literal) if is_float else int(literal)), pos
        else:
            raise JsonError("Unexpected character", pos)
    raise JsonError("Unexpected EOF", pos)