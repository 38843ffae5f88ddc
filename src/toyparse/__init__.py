from .cursor import Cursor
from .errors import (
    EmptyIdentifier,
    InvalidColorLiteral,
    InvalidLength,
    MalformedDeclaration,
    MalformedTag,
    NestingTooDeep,
    ParseError,
    TagMismatch,
    UnexpectedCharacterInSelectorList,
    UnexpectedEndOfInput,
    UnknownUnit,
    UnterminatedAttributeValue,
)
from .node import AttrMap, ElementNode, Node, TextNode
from .parser import ParserOpts, parse_css, parse_html
from .serialize import to_css, to_html
from .style import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Specificity,
    Stylesheet,
    Unit,
    Value,
)

__all__ = [
    "AttrMap",
    "Color",
    "Cursor",
    "Declaration",
    "ElementNode",
    "EmptyIdentifier",
    "InvalidColorLiteral",
    "InvalidLength",
    "Keyword",
    "Length",
    "MalformedDeclaration",
    "MalformedTag",
    "NestingTooDeep",
    "Node",
    "ParseError",
    "ParserOpts",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Specificity",
    "Stylesheet",
    "TagMismatch",
    "TextNode",
    "UnexpectedCharacterInSelectorList",
    "UnexpectedEndOfInput",
    "Unit",
    "UnknownUnit",
    "UnterminatedAttributeValue",
    "Value",
    "parse_css",
    "parse_html",
    "to_css",
    "to_html",
]
