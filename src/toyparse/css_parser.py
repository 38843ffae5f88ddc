"""Recursive-descent CSS parser.

Supports rule sets of comma-separated simple selectors followed by a block
of ``name: value;`` declarations. Values are keywords, ``px`` lengths and
``#rrggbb`` colors. At-rules, combinators, pseudo-classes and comments are
not recognized.
"""

from __future__ import annotations

import logging
import math

from .cursor import Cursor
from .errors import (
    EmptyIdentifier,
    InvalidColorLiteral,
    InvalidLength,
    MalformedDeclaration,
    UnexpectedCharacterInSelectorList,
    UnexpectedEndOfInput,
    UnknownUnit,
)
from .style import Color, Declaration, Keyword, Length, Rule, Selector, SimpleSelector, Stylesheet, Unit, Value

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_UNITS = {unit.value: unit for unit in Unit}


def valid_identifier_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "-" or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _abbreviate(number: str) -> str:
    if len(number) > 20:
        return repr(number[:8] + "..." + number[-8:])
    return repr(number)


class CSSParser:
    __slots__ = ("cursor",)

    cursor: Cursor

    def __init__(self, cursor: Cursor) -> None:
        self.cursor = cursor

    def parse(self) -> Stylesheet:
        logger.debug("Parsing stylesheet (%d characters)", self.cursor.length)
        rules = self.parse_rules()
        logger.debug("Parsed %d rules", len(rules))
        return Stylesheet(rules)

    def parse_rules(self) -> list[Rule]:
        cursor = self.cursor
        rules: list[Rule] = []
        while True:
            cursor.skip_whitespace()
            if cursor.at_end():
                break
            rules.append(self.parse_rule())
        return rules

    def parse_rule(self) -> Rule:
        """Parse a rule set: ``<selectors> { <declarations> }``."""
        selectors = self.parse_selectors()
        declarations = self.parse_declarations()
        return Rule(selectors, declarations)

    def parse_selectors(self) -> list[Selector]:
        """Parse a comma-separated list of selectors, highest specificity first."""
        cursor = self.cursor
        selectors: list[Selector] = []
        while True:
            selectors.append(self.parse_simple_selector())
            cursor.skip_whitespace()
            ch = cursor.peek()
            if ch == ",":
                cursor.advance()
                cursor.skip_whitespace()
            elif ch == "{":
                # Start of declarations
                break
            else:
                raise cursor.error(UnexpectedCharacterInSelectorList, detail=repr(ch))

        # list.sort is stable, so equal specificities keep source order
        selectors.sort(key=lambda selector: selector.specificity(), reverse=True)
        return selectors

    def parse_simple_selector(self) -> SimpleSelector:
        """Parse one simple selector, e.g. ``type#id.class1.class2``."""
        cursor = self.cursor
        start = cursor.pos
        selector = SimpleSelector()
        while not cursor.at_end():
            ch = cursor.peek()
            if ch == "#":
                cursor.advance()
                selector.id = self.parse_identifier()
            elif ch == ".":
                cursor.advance()
                selector.classes.append(self.parse_identifier())
            elif ch == "*":
                # Universal selector
                cursor.advance()
            elif valid_identifier_char(ch):
                selector.tag_name = self.parse_identifier()
            else:
                break

        if cursor.pos == start:
            if cursor.at_end():
                raise cursor.error(UnexpectedEndOfInput)
            raise cursor.error(UnexpectedCharacterInSelectorList, reason="empty-selector")
        return selector

    def parse_declarations(self) -> list[Declaration]:
        """Parse a list of declarations enclosed in ``{ ... }``."""
        cursor = self.cursor
        self._expect("{")
        declarations: list[Declaration] = []
        while True:
            cursor.skip_whitespace()
            if cursor.peek() == "}":
                cursor.advance()
                break
            declarations.append(self.parse_declaration())
        return declarations

    def parse_declaration(self) -> Declaration:
        """Parse one ``<property>: <value>;`` declaration."""
        cursor = self.cursor
        name = self.parse_identifier()
        cursor.skip_whitespace()
        self._expect(":")
        cursor.skip_whitespace()
        value = self.parse_value()
        cursor.skip_whitespace()
        self._expect(";")
        return Declaration(name, value)

    def parse_value(self) -> Value:
        cursor = self.cursor
        ch = cursor.peek()
        if self._number_starts_at(0) or (ch in "+-" and self._number_starts_at(1)):
            return self.parse_length()
        if ch == "#":
            return self.parse_color()
        return Keyword(self.parse_identifier())

    def parse_length(self) -> Length:
        cursor = self.cursor
        start = cursor.pos
        number = ""
        if cursor.peek() in "+-":
            number = cursor.advance()
        number += cursor.consume_while(_is_digit)
        if cursor.consume_if("."):
            number += "." + cursor.consume_while(_is_digit)

        unit_pos = cursor.pos
        unit_name = cursor.consume_while(valid_identifier_char)
        unit = _UNITS.get(unit_name.lower())
        if unit is None:
            raise UnknownUnit(unit_pos, unit_name, source=cursor.input)

        value = float(number)
        if not math.isfinite(value):
            raise InvalidLength(start, source=cursor.input, detail=_abbreviate(number))
        return Length(value, unit)

    def parse_color(self) -> Color:
        """Parse ``#rrggbb``; alpha is always 255."""
        cursor = self.cursor
        start = cursor.pos
        cursor.advance()
        digits = []
        for _ in range(6):
            if cursor.at_end() or cursor.peek() not in _HEX_DIGITS:
                raise InvalidColorLiteral(start, source=cursor.input)
            digits.append(cursor.advance())
        hex_value = "".join(digits)
        return Color(int(hex_value[0:2], 16), int(hex_value[2:4], 16), int(hex_value[4:6], 16), 255)

    def parse_identifier(self) -> str:
        name = self.cursor.consume_while(valid_identifier_char)
        if not name:
            raise self.cursor.error(EmptyIdentifier)
        return name

    def _number_starts_at(self, offset: int) -> bool:
        """True for a digit, or a ``.`` then a digit, ``offset`` characters ahead."""
        cursor = self.cursor
        pos = cursor.pos + offset
        if pos < cursor.length and _is_digit(cursor.peek(offset)):
            return True
        return pos + 1 < cursor.length and cursor.peek(offset) == "." and _is_digit(cursor.peek(offset + 1))

    def _expect(self, literal: str) -> None:
        cursor = self.cursor
        if cursor.consume_if(literal):
            return
        if cursor.at_end():
            raise cursor.error(UnexpectedEndOfInput)
        raise cursor.error(MalformedDeclaration, detail=repr(literal))
