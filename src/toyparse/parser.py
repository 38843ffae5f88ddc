"""Parser entry points for HTML documents and CSS stylesheets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .css_parser import CSSParser
from .cursor import Cursor
from .html_parser import DEFAULT_MAX_DEPTH, HTMLParser

if TYPE_CHECKING:
    from .node import Node
    from .style import Stylesheet


class ParserOpts:
    """Options shared by both entry points.

    ``max_depth`` caps element nesting in HTML documents; deeper input raises
    ``NestingTooDeep`` instead of exhausting the interpreter's recursion limit.
    """

    __slots__ = ("discard_bom", "max_depth", "root_tag_name")

    discard_bom: bool
    root_tag_name: str
    max_depth: int

    def __init__(
        self,
        discard_bom: bool = True,
        root_tag_name: str = "html",
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.discard_bom = bool(discard_bom)
        self.root_tag_name = root_tag_name
        self.max_depth = int(max_depth)


def _make_cursor(source: str, opts: ParserOpts) -> Cursor:
    if source and source[0] == "\ufeff" and opts.discard_bom:
        source = source[1:]
    return Cursor(source)


def parse_html(source: str, *, opts: ParserOpts | None = None) -> Node:
    """Parse an HTML document into a single rooted node tree.

    Raises:
        ParseError: on the first structural violation in ``source``
    """
    opts = opts or ParserOpts()
    parser = HTMLParser(
        _make_cursor(source, opts),
        root_tag_name=opts.root_tag_name,
        max_depth=opts.max_depth,
    )
    return parser.parse()


def parse_css(source: str, *, opts: ParserOpts | None = None) -> Stylesheet:
    """Parse a stylesheet. Rules keep source order; selectors come highest specificity first.

    Raises:
        ParseError: on the first grammar violation in ``source``
    """
    opts = opts or ParserOpts()
    parser = CSSParser(_make_cursor(source, opts))
    return parser.parse()
