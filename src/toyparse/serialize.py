"""Serialization of node trees back to markup and stylesheets back to CSS.

Compact output (``pretty=False``) re-parses to an equal value. Text and
attribute values are written verbatim: the parser never decodes character
references, so escaping them would not survive a round trip.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .style import Color, Keyword, Length

if TYPE_CHECKING:
    from .style import Declaration, Rule, Selector, Stylesheet, Value


def _choose_attr_quote(value: str) -> str:
    if '"' in value:
        if "'" in value:
            raise ValueError(f"Attribute value cannot be quoted: {value!r}")
        return "'"
    return '"'


def serialize_start_tag(name: str, attrs: dict[str, str] | None) -> str:
    attrs = attrs or {}
    parts: list[str] = ["<", name]
    for key, value in attrs.items():
        quote = _choose_attr_quote(value)
        parts.extend([" ", key, "=", quote, value, quote])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def to_html(node: Any, indent: int = 0, indent_size: int = 2, *, pretty: bool = False) -> str:
    """Convert node to HTML string."""
    prefix = " " * (indent * indent_size) if pretty else ""
    newline = "\n" if pretty else ""
    name: str = node.name

    # Text node
    if name == "#text":
        data: str = node.data
        if pretty:
            data = data.strip()
            return f"{prefix}{data}" if data else ""
        return data

    open_tag = serialize_start_tag(name, node.attrs)
    children: list[Any] = node.children
    if not children:
        return f"{prefix}{open_tag}{serialize_end_tag(name)}"

    # Text-only children render inline
    if pretty and all(child.name == "#text" for child in children):
        return f"{prefix}{open_tag}{node.to_text(separator='', strip=False)}{serialize_end_tag(name)}"

    # Render with child indentation
    parts = [f"{prefix}{open_tag}"]
    for child in children:
        child_html = to_html(child, indent + 1, indent_size, pretty=pretty)
        if child_html:
            parts.append(child_html)
    parts.append(f"{prefix}{serialize_end_tag(name)}")
    return newline.join(parts)


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    # The length grammar has no exponent form
    if "e" in text:
        text = f"{value:.20f}".rstrip("0").rstrip(".")
    return text


def serialize_value(value: Value) -> str:
    if isinstance(value, Keyword):
        return value.value
    if isinstance(value, Length):
        return f"{_format_number(value.value)}{value.unit.value}"
    if isinstance(value, Color):
        return value.to_hex()
    raise TypeError(f"Unknown value type: {type(value).__name__}")


def serialize_selector(selector: Selector) -> str:
    if selector.is_universal():
        return "*"
    parts: list[str] = []
    if selector.tag_name is not None:
        parts.append(selector.tag_name)
    if selector.id is not None:
        parts.append(f"#{selector.id}")
    for class_name in selector.classes:
        parts.append(f".{class_name}")
    return "".join(parts)


def serialize_declaration(declaration: Declaration) -> str:
    return f"{declaration.name}: {serialize_value(declaration.value)};"


def serialize_rule(rule: Rule, *, pretty: bool = False, indent_size: int = 2) -> str:
    selectors = ", ".join(serialize_selector(selector) for selector in rule.selectors)
    if not rule.declarations:
        return f"{selectors} {{}}"
    if pretty:
        prefix = " " * indent_size
        body = "\n".join(f"{prefix}{serialize_declaration(d)}" for d in rule.declarations)
        return f"{selectors} {{\n{body}\n}}"
    body = " ".join(serialize_declaration(d) for d in rule.declarations)
    return f"{selectors} {{ {body} }}"


def to_css(stylesheet: Stylesheet, *, pretty: bool = False, indent_size: int = 2) -> str:
    """Convert a stylesheet to CSS text, one rule per line (blank-line separated when pretty)."""
    separator = "\n\n" if pretty else "\n"
    return separator.join(serialize_rule(rule, pretty=pretty, indent_size=indent_size) for rule in stylesheet.rules)
