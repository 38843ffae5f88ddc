"""Stylesheet model: selectors, declarations, values, rules and stylesheets.

Specificity is the priority a later cascade step uses to decide which rule
wins a conflict. It is reduced here to three counts::

    *             /* (0, 0, 0) */
    li            /* (0, 0, 1) */
    li.red.level  /* (0, 2, 1) */
    #x34y         /* (1, 0, 0) */

Tuples compare lexicographically, so ids dominate classes, which dominate
tag names.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Union

# (id_count, class_count, tag_count)
Specificity = tuple[int, int, int]


class SimpleSelector:
    """A selector without combinators, e.g. ``type#id.class1.class2``."""

    __slots__ = ("classes", "id", "tag_name")

    tag_name: str | None
    id: str | None
    classes: list[str]

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, tag_name: str | None = None, id: str | None = None, classes: list[str] | None = None) -> None:  # noqa: A002
        self.tag_name = tag_name
        self.id = id
        self.classes = classes or []

    def __repr__(self) -> str:
        parts = ["SimpleSelector("]
        fields = []
        if self.tag_name is not None:
            fields.append(f"tag_name={self.tag_name!r}")
        if self.id is not None:
            fields.append(f"id={self.id!r}")
        if self.classes:
            fields.append(f"classes={self.classes!r}")
        parts.append(", ".join(fields))
        parts.append(")")
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return self.tag_name == other.tag_name and self.id == other.id and self.classes == other.classes

    def specificity(self) -> Specificity:
        a = 1 if self.id is not None else 0
        b = len(self.classes)
        c = 1 if self.tag_name is not None else 0
        return (a, b, c)

    def is_universal(self) -> bool:
        return self.tag_name is None and self.id is None and not self.classes


# Only simple selectors exist; kept as an alias so consumers name the union.
Selector = SimpleSelector


class Unit(enum.Enum):
    PX = "px"


class Keyword:
    __slots__ = ("value",)

    value: str

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: str) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Keyword({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keyword):
            return NotImplemented
        return self.value == other.value


class Length:
    __slots__ = ("unit", "value")

    value: float
    unit: Unit

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: float, unit: Unit = Unit.PX) -> None:
        self.value = float(value)
        self.unit = unit

    def __repr__(self) -> str:
        return f"Length({self.value!r}, {self.unit.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.value == other.value and self.unit is other.unit


class Color:
    """An RGBA color, each channel in ``0..255``."""

    __slots__ = ("a", "b", "g", "r")

    r: int
    g: int
    b: int
    a: int

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, r: int, g: int, b: int, a: int = 255) -> None:
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Value = Union[Keyword, Length, Color]


class Declaration:
    """A name/value pair such as ``margin: 20px;``."""

    __slots__ = ("name", "value")

    name: str
    value: Value

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str, value: Value) -> None:
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return f"Declaration({self.name!r}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.name == other.name and self.value == other.value


class Rule:
    """A selector list paired with a declaration block.

    ``selectors`` are ordered highest specificity first; ``declarations``
    keep source order, duplicates included.
    """

    __slots__ = ("declarations", "selectors")

    selectors: list[Selector]
    declarations: list[Declaration]

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, selectors: list[Selector], declarations: list[Declaration]) -> None:
        self.selectors = selectors
        self.declarations = declarations

    def __repr__(self) -> str:
        return f"Rule({self.selectors!r}, {self.declarations!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self.selectors == other.selectors and self.declarations == other.declarations


class Stylesheet:
    __slots__ = ("rules",)

    rules: list[Rule]

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rules: list[Rule] | None = None) -> None:
        self.rules = rules or []

    def __repr__(self) -> str:
        return f"Stylesheet({self.rules!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stylesheet):
            return NotImplemented
        return self.rules == other.rules

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)
