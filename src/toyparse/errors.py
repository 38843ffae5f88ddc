"""Centralized error codes, messages and exception types for both parsers.

Every failure is fatal to the parse call that raised it. Each exception
carries a kebab-case ``code``, the cursor ``position`` at failure time and,
when the source text is known, the 1-based ``line``/``column`` so that
Python's ``SyntaxError`` display can point at the offending character.
"""

from __future__ import annotations


def generate_error_message(code: str, detail: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        detail: Optional tag name, character or unit to include for context

    Returns:
        Human-readable error message string
    """
    messages = {
        # Cursor
        "unexpected-end-of-input": "Unexpected end of input",
        # HTML
        "malformed-tag": f"Malformed tag: expected {detail}" if detail else "Malformed tag",
        "tag-mismatch": f"Mismatched closing tag {detail}",
        "unexpected-end-tag": f"Unexpected {detail} end tag at top level",
        "empty-tag-name": "Tag name must not be empty",
        "nesting-too-deep": f"Elements nested deeper than {detail} levels",
        "empty-attribute-name": "Attribute name must not be empty",
        "unterminated-attribute-value": f"Attribute value is missing its closing {detail} quote",
        # CSS
        "unexpected-character-in-selector-list": f"Unexpected character {detail} in selector list",
        "empty-selector": "Expected a selector",
        "malformed-declaration": f"Malformed declaration: expected {detail}",
        "unknown-unit": f"Unknown unit {detail}",
        "missing-unit": "Length is missing its unit",
        "invalid-length": f"Length {detail} is not a finite number",
        "invalid-color-literal": "Color literal must have exactly 6 hexadecimal digits",
        "empty-identifier": "Expected an identifier",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class ParseError(SyntaxError):
    """Base class for every parse failure.

    Inherits from SyntaxError to provide Python 3.10+ enhanced error display
    with source location highlighting.
    """

    code: str = "parse-error"

    def __init__(
        self,
        position: int,
        message: str | None = None,
        *,
        source: str | None = None,
        reason: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.position = position
        self.message = message or generate_error_message(reason or self.code, detail)
        super().__init__(self.message)
        self.line: int | None = None
        self.column: int | None = None
        if source is not None:
            self._locate(source)

    def _locate(self, source: str) -> None:
        # Line = count of newlines before pos + 1
        pos = min(self.position, len(source))
        last_newline = source.rfind("\n", 0, pos)
        self.line = source.count("\n", 0, pos) + 1
        self.column = pos - last_newline
        line_end = source.find("\n", pos)
        if line_end == -1:
            line_end = len(source)

        # Copy SyntaxError attributes for enhanced display
        self.filename = "<input>"
        self.lineno = self.line
        self.offset = self.column
        self.text = source[last_newline + 1 : line_end]

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"({self.line},{self.column}): {self.code} - {self.message}"
        return f"{self.code} - {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, position={self.position})"


class UnexpectedEndOfInput(ParseError):
    """The cursor was asked to read past the end of the input."""

    code = "unexpected-end-of-input"


class MalformedTag(ParseError):
    """A literal character required by the tag grammar is absent."""

    code = "malformed-tag"


class TagMismatch(ParseError):
    """A closing tag names a different element than the one it closes."""

    code = "tag-mismatch"

    def __init__(self, position: int, expected: str, found: str, *, source: str | None = None) -> None:
        self.expected = expected
        self.found = found
        super().__init__(position, source=source, detail=f"</{found}> for <{expected}>")


class UnterminatedAttributeValue(ParseError):
    code = "unterminated-attribute-value"


class UnexpectedCharacterInSelectorList(ParseError):
    code = "unexpected-character-in-selector-list"


class MalformedDeclaration(ParseError):
    code = "malformed-declaration"


class UnknownUnit(ParseError):
    code = "unknown-unit"

    def __init__(self, position: int, unit: str, *, source: str | None = None) -> None:
        self.unit = unit
        if unit:
            super().__init__(position, source=source, detail=repr(unit))
        else:
            super().__init__(position, source=source, reason="missing-unit")


class InvalidColorLiteral(ParseError):
    code = "invalid-color-literal"


class EmptyIdentifier(ParseError):
    code = "empty-identifier"


class NestingTooDeep(ParseError):
    """Elements are nested deeper than the parser's configured limit."""

    code = "nesting-too-deep"

    def __init__(self, position: int, max_depth: int, *, source: str | None = None) -> None:
        self.max_depth = max_depth
        super().__init__(position, source=source, detail=str(max_depth))


class InvalidLength(ParseError):
    """A length's number does not fit in a finite float."""

    code = "invalid-length"
