from __future__ import annotations

from typing import Union

from .serialize import to_html

AttrMap = dict[str, str]

# Type alias for any node type
Node = Union["TextNode", "ElementNode"]


def _to_text_collect(node: Node, parts: list[str], strip: bool) -> None:
    if isinstance(node, TextNode):
        data = node.data
        if strip:
            data = data.strip()
        if data:
            parts.append(data)
        return

    for child in node.children:
        _to_text_collect(child, parts, strip=strip)


class TextNode:
    """A run of character data. Text nodes never have children."""

    __slots__ = ("data",)

    data: str

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, data: str) -> None:
        self.data = data

    def __repr__(self) -> str:
        return f"TextNode({self.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextNode):
            return NotImplemented
        return self.data == other.data

    @property
    def name(self) -> str:
        return "#text"

    @property
    def children(self) -> list[Node]:
        """Return empty list for TextNode (leaf node)."""
        return []

    def has_child_nodes(self) -> bool:
        return False

    def to_html(self, indent: int = 0, indent_size: int = 2, pretty: bool = False) -> str:
        return to_html(self, indent, indent_size, pretty=pretty)

    def to_text(self, separator: str = " ", strip: bool = True) -> str:  # noqa: ARG002
        # Parameters are accepted for API consistency; they don't affect leaf nodes.
        if strip:
            return self.data.strip()
        return self.data


class ElementNode:
    """An element with a tag name, an attribute map and ordered children."""

    __slots__ = ("attrs", "children", "name")

    name: str
    attrs: AttrMap
    children: list[Node]

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, name: str, attrs: AttrMap | None = None, children: list[Node] | None = None) -> None:
        self.name = name
        self.attrs = attrs if attrs is not None else {}
        self.children = children if children is not None else []

    def __repr__(self) -> str:
        return f"ElementNode({self.name!r}, {self.attrs!r}, {self.children!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementNode):
            return NotImplemented
        # dict equality ignores insertion order, matching attribute semantics
        return self.name == other.name and self.attrs == other.attrs and self.children == other.children

    @property
    def id(self) -> str | None:
        return self.attrs.get("id")

    def classes(self) -> set[str]:
        """Return the whitespace-separated names in the ``class`` attribute."""
        value = self.attrs.get("class")
        if not value:
            return set()
        return set(value.split())

    def has_child_nodes(self) -> bool:
        """Return True if this node has children."""
        return bool(self.children)

    def to_html(self, indent: int = 0, indent_size: int = 2, pretty: bool = False) -> str:
        """Convert node to HTML string."""
        return to_html(self, indent, indent_size, pretty=pretty)

    def to_text(self, separator: str = " ", strip: bool = True) -> str:
        """Return the concatenated text of this node's descendants.

        - `separator` controls how text nodes are joined (default: a single space).
        - `strip=True` strips each text node and drops empty segments.
        """
        parts: list[str] = []
        _to_text_collect(self, parts, strip=strip)
        if not parts:
            return ""
        return separator.join(parts)


def text(data: str) -> TextNode:
    """Build a text node."""
    return TextNode(data)


def element(name: str, attrs: AttrMap, children: list[Node]) -> ElementNode:
    """Build an element node. No validation is performed."""
    return ElementNode(name, attrs, children)
