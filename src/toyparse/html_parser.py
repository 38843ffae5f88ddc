"""Recursive-descent HTML parser.

Grammar, one method per production::

    nodes      := (ws* node)*            until EOF or "</"
    node       := element | text
    element    := "<" name attrs ">" nodes "</" name ">"
    attrs      := (ws* name "=" quoted)*
    text       := [^<]*

There is no error recovery: void elements, ``<br/>``, comments and CDATA
are not recognized, and the first violation aborts the parse.
"""

from __future__ import annotations

import logging

from .cursor import Cursor
from .errors import MalformedTag, NestingTooDeep, TagMismatch, UnterminatedAttributeValue
from .node import AttrMap, ElementNode, Node, element, text

logger = logging.getLogger(__name__)

_QUOTES = "\"'"

# Each level costs a few Python frames while parsing, comparing and serializing
DEFAULT_MAX_DEPTH = 200


def is_tag_name_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class HTMLParser:
    __slots__ = ("cursor", "depth", "max_depth", "root_tag_name")

    cursor: Cursor
    root_tag_name: str
    max_depth: int
    depth: int

    def __init__(self, cursor: Cursor, root_tag_name: str = "html", max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.cursor = cursor
        self.root_tag_name = root_tag_name
        self.max_depth = max_depth
        self.depth = 0

    def parse(self) -> Node:
        """Parse the whole input, wrapping multiple top-level nodes in a root element."""
        logger.debug("Parsing HTML document (%d characters)", self.cursor.length)
        nodes = self.parse_nodes()

        # parse_nodes only stops early on a closing tag nothing opened
        if not self.cursor.at_end():
            raise self.cursor.error(MalformedTag, reason="unexpected-end-tag", detail=self._peek_end_tag())

        if len(nodes) == 1:
            return nodes[0]
        logger.debug("Wrapping %d top-level nodes in <%s>", len(nodes), self.root_tag_name)
        return element(self.root_tag_name, {}, nodes)

    def parse_nodes(self) -> list[Node]:
        cursor = self.cursor
        nodes: list[Node] = []
        while True:
            cursor.skip_whitespace()
            if cursor.at_end() or cursor.starts_with("</"):
                break
            nodes.append(self.parse_node())
        return nodes

    def parse_node(self) -> Node:
        if self.cursor.peek() == "<":
            return self.parse_element()
        return self.parse_text()

    def parse_text(self) -> Node:
        return text(self.cursor.consume_while(lambda ch: ch != "<"))

    def parse_element(self) -> ElementNode:
        if self.depth >= self.max_depth:
            raise NestingTooDeep(self.cursor.pos, self.max_depth, source=self.cursor.input)

        # Opening tag
        self._expect("<")
        tag_name = self.parse_tag_name()
        if not tag_name:
            raise self.cursor.error(MalformedTag, reason="empty-tag-name")
        attrs = self.parse_attributes()
        self._expect(">")

        self.depth += 1
        children = self.parse_nodes()
        self.depth -= 1

        # Closing tag
        self._expect("</")
        close_pos = self.cursor.pos
        closing_name = self.parse_tag_name()
        if closing_name != tag_name:
            raise TagMismatch(close_pos, tag_name, closing_name, source=self.cursor.input)
        self._expect(">")

        return element(tag_name, attrs, children)

    def parse_tag_name(self) -> str:
        """Consume ASCII letters and digits. May return an empty string."""
        return self.cursor.consume_while(is_tag_name_char)

    def parse_attributes(self) -> AttrMap:
        cursor = self.cursor
        attrs: AttrMap = {}
        while True:
            cursor.skip_whitespace()
            if cursor.peek() == ">":
                break
            name, value = self.parse_attr()
            attrs[name] = value
        return attrs

    def parse_attr(self) -> tuple[str, str]:
        name = self.parse_tag_name()
        if not name:
            raise self.cursor.error(MalformedTag, reason="empty-attribute-name")
        self._expect("=")
        value = self.parse_attr_value()
        return name, value

    def parse_attr_value(self) -> str:
        cursor = self.cursor
        if cursor.at_end() or cursor.peek() not in _QUOTES:
            raise cursor.error(MalformedTag, detail="a quoted attribute value")
        quote = cursor.advance()
        value = cursor.consume_while(lambda ch: ch != quote)
        if cursor.at_end():
            raise cursor.error(UnterminatedAttributeValue, detail=quote)
        cursor.advance()
        return value

    def _expect(self, literal: str) -> None:
        if not self.cursor.consume_if(literal):
            raise self.cursor.error(MalformedTag, detail=repr(literal))

    def _peek_end_tag(self) -> str:
        cursor = self.cursor
        end = cursor.input.find(">", cursor.pos)
        if end == -1:
            return cursor.input[cursor.pos :]
        return cursor.input[cursor.pos : end + 1]
