"""Forward-only character cursor shared by the HTML and CSS parsers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .errors import ParseError, UnexpectedEndOfInput

_E = TypeVar("_E", bound=ParseError)

# Same set str.isspace() accepts for ASCII, without the Unicode extras.
_WHITESPACE = frozenset(" \t\n\r\f\v")


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE


class Cursor:
    """Positional reader over an immutable input string.

    ``pos`` indexes codepoints, so it always sits on a character boundary,
    and it only ever moves forward.
    """

    __slots__ = ("input", "length", "pos")

    input: str
    length: int
    pos: int

    def __init__(self, source: str) -> None:
        self.input = source
        self.length = len(source)
        self.pos = 0

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, length={self.length})"

    def at_end(self) -> bool:
        return self.pos >= self.length

    def peek(self, offset: int = 0) -> str:
        """Return the character ``offset`` positions ahead without consuming it."""
        peek_pos = self.pos + offset
        if peek_pos >= self.length:
            raise self.error(UnexpectedEndOfInput)
        return self.input[peek_pos]

    def starts_with(self, literal: str) -> bool:
        return self.input.startswith(literal, self.pos)

    def consume_if(self, literal: str) -> bool:
        """Consume ``literal`` if the remaining input starts with it."""
        if not self.starts_with(literal):
            return False
        self.pos += len(literal)
        return True

    def advance(self) -> str:
        """Return the current character and move past it."""
        ch = self.peek()
        self.pos += 1
        return ch

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while ``predicate`` holds; return them in order."""
        buffer = self.input
        length = self.length
        start = pos = self.pos
        while pos < length and predicate(buffer[pos]):
            pos += 1
        self.pos = pos
        return buffer[start:pos]

    def skip_whitespace(self) -> None:
        self.consume_while(is_whitespace)

    def error(self, error_cls: type[_E], *args: Any, **kwargs: Any) -> _E:
        """Build an ``error_cls`` located at the current position."""
        return error_cls(self.pos, *args, source=self.input, **kwargs)
