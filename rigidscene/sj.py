"""A small streaming JSON tokenizer.

The reader walks the text lazily and yields values without building a
tree. Errors are sticky: once ``Reader.error`` is set every further read
returns an ``ERROR`` value and iteration stops.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

_WHITESPACE_AND_SEPARATORS = frozenset(" \n\r\t:,")
_NUMBER_START = frozenset("-0123456789")
_NUMBER_CONT = frozenset("0123456789eE.-+")
_LITERALS = ("null", "true", "false")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ValueType(IntEnum):
    ERROR = 0
    END = 1
    ARRAY = 2
    OBJECT = 3
    NUMBER = 4
    STRING = 5
    BOOL = 6
    NULL = 7


@dataclass(frozen=True)
class Value:
    """A token: its kind and the span of the source text it covers."""

    type: ValueType
    start: int
    end: int
    depth: int = 0
    source: str = field(default="", repr=False, compare=False)

    def text(self) -> str:
        """The raw text of the value; strings exclude the quotes."""
        return self.source[self.start:self.end]

    def number(self) -> float:
        """The leading decimal number in the value's text."""
        text = self.text()
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise ValueError(f"not a number: {text!r}")
        return float(match.group().strip())

    def key_equals(self, name: str) -> bool:
        return self.text() == name


class Reader:
    """Reads JSON tokens from a string one at a time."""

    def __init__(self, data: str) -> None:
        self.data = data
        self.pos = 0
        self.depth = 0
        self.error: str | None = None

    def _fail(self, message: str) -> None:
        self.error = message

    def read(self) -> Value:
        """Read the next value, skipping whitespace, commas and colons."""
        while True:
            if self.error is not None:
                return Value(ValueType.ERROR, self.pos, self.pos, 0, self.data)
            if self.pos == len(self.data):
                self._fail("unexpected eof")
                continue
            char = self.data[self.pos]
            if char in _WHITESPACE_AND_SEPARATORS:
                self.pos += 1
                continue
            value = self._scan(char)
            if value is not None:
                return value

    def _scan(self, char: str) -> Value | None:
        data, start = self.data, self.pos

        if char in _NUMBER_START:
            while self.pos < len(data) and data[self.pos] in _NUMBER_CONT:
                self.pos += 1
            return Value(ValueType.NUMBER, start, self.pos, 0, data)

        if char == '"':
            self.pos += 1
            start = self.pos
            while True:
                if self.pos == len(data):
                    self._fail("unclosed string")
                    return None
                if data[self.pos] == '"':
                    break
                if data[self.pos] == "\\":
                    self.pos += 1
                if self.pos != len(data):
                    self.pos += 1
            end = self.pos
            self.pos += 1
            return Value(ValueType.STRING, start, end, 0, data)

        if char in "{[":
            kind = ValueType.OBJECT if char == "{" else ValueType.ARRAY
            self.depth += 1
            self.pos += 1
            return Value(kind, start, self.pos, self.depth, data)

        if char in "}]":
            self.depth -= 1
            if self.depth < 0:
                self._fail(f"stray '{char}'")
                return None
            self.pos += 1
            return Value(ValueType.END, start, self.pos, 0, data)

        if char in "ntf":
            kind = ValueType.NULL if char == "n" else ValueType.BOOL
            for literal in _LITERALS:
                if data.startswith(literal, self.pos):
                    self.pos += len(literal)
                    return Value(kind, start, self.pos, 0, data)

        self._fail("unknown token")
        return None

    def _discard_until(self, depth: int) -> None:
        while self.depth != depth:
            if self.read().type is ValueType.ERROR:
                break

    def iter_array(self, arr: Value) -> Iterator[Value]:
        """Yield the elements of an array value, skipping nested content."""
        while True:
            self._discard_until(arr.depth)
            value = self.read()
            if value.type in (ValueType.ERROR, ValueType.END):
                return
            yield value

    def iter_object(self, obj: Value) -> Iterator[tuple[Value, Value]]:
        """Yield (key, value) pairs of an object value."""
        while True:
            self._discard_until(obj.depth)
            key = self.read()
            if key.type in (ValueType.ERROR, ValueType.END):
                return
            value = self.read()
            if value.type is ValueType.END:
                self._fail("unexpected object end")
                return
            if value.type is ValueType.ERROR:
                return
            yield key, value

    def location(self) -> tuple[int, int]:
        """Line and column of the current position, both from 1."""
        line, col = 1, 1
        for char in self.data[: self.pos]:
            if char == "\n":
                line += 1
                col = 0
            col += 1
        return line, col