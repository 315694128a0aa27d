"""A small JSON parser that builds dicts, lists and scalars."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional

from podrum.jsonscalars import JsonError, parse_bool, parse_null, parse_number, parse_string

_WHITESPACE = frozenset(" \n\t\r")


class _Expect(Enum):
    KEY = auto()
    COLON = auto()
    VALUE = auto()
    SEPARATOR = auto()


class JsonParser:
    """Parses JSON text from a moving position.

    ``parse_object`` and ``parse_array`` return ``None`` without moving when
    the text at the position does not open a container of their kind.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _peek(self) -> str:
        if self.pos >= len(self.text):
            raise JsonError("Unexpected EOF", self.pos)
        return self.text[self.pos]

    def parse_value(self) -> Any:
        """Parse any value at the current position."""
        self._peek()
        for scalar in (parse_string, parse_null, parse_bool, parse_number):
            result = scalar(self.text, self.pos)
            if result is not None:
                value, self.pos = result
                return value
        nested = self.parse_object()
        if nested is not None:
            return nested
        nested = self.parse_array()
        if nested is not None:
            return nested
        raise JsonError("Invalid member", self.pos)

    def parse_array(self) -> Optional[list]:
        """Parse an array; a trailing comma before ``]`` is accepted."""
        if self.pos >= len(self.text) or self.text[self.pos] != "[":
            return None
        self.pos += 1
        items: list = []
        expect = _Expect.VALUE
        while True:
            ch = self._peek()
            if ch == "]":
                self.pos += 1
                return items
            if ch in _WHITESPACE:
                self.pos += 1
            elif expect is _Expect.VALUE:
                items.append(self.parse_value())
                expect = _Expect.SEPARATOR
            elif ch == "," and expect is _Expect.SEPARATOR:
                self.pos += 1
                expect = _Expect.VALUE
            else:
                raise JsonError("Unexpected character", self.pos)

    def parse_object(self) -> Optional[dict]:
        """Parse an object; with repeated keys the first value is kept."""
        if self.pos >= len(self.text) or self.text[self.pos] != "{":
            return None
        self.pos += 1
        members: dict = {}
        key = ""
        expect = _Expect.KEY
        while True:
            ch = self._peek()
            if ch == "}":
                if expect in (_Expect.COLON, _Expect.VALUE):
                    raise JsonError("Expected value", self.pos)
                self.pos += 1
                return members
            if ch in _WHITESPACE:
                self.pos += 1
            elif expect is _Expect.KEY:
                parsed = parse_string(self.text, self.pos)
                if parsed is None:
                    raise JsonError("Expected string", self.pos)
                key, self.pos = parsed
                expect = _Expect.COLON
            elif ch == ":" and expect is _Expect.COLON:
                self.pos += 1
                expect = _Expect.VALUE
            elif expect is _Expect.VALUE:
                members.setdefault(key, self.parse_value())
                expect = _Expect.SEPARATOR
            elif ch == "," and expect is _Expect.SEPARATOR:
                self.pos += 1
                expect = _Expect.KEY
            else:
                raise JsonError("Unexpected character", self.pos)

    def parse_root(self) -> Optional[dict | list]:
        """Parse the top-level object or array; ``None`` if there is none."""
        while self.pos < len(self.text):
            if self.text[self.pos] in _WHITESPACE:
                self.pos += 1
                continue
            nested = self.parse_object()
            if nested is not None:
                return nested
            return self.parse_array()
        return None


def parse(text: str) -> Optional[dict | list]:
    """Parse a JSON document whose root is an object or an array."""
    return JsonParser(text).parse_root()