from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union


@dataclass(frozen=True, slots=True)
class TermNode:
    """Quoted, escaped word or phrase.

    ``text`` may contain ``str.format_map`` placeholders such as
    ``{user[name]}`` that are filled from the template data at compile time.
    """

    text: str


@dataclass(frozen=True, slots=True)
class RawNode:
    """Fragment passed through as-is (after placeholder rendering)."""

    text: str


@dataclass(frozen=True, slots=True)
class FieldNode:
    name: str
    query: QueryNode


@dataclass(frozen=True, slots=True)
class BooleanNode:
    """Children joined by one of AND / OR / NOT."""

    operator: str
    children: tuple[QueryNode, ...]


@dataclass(frozen=True, slots=True)
class GroupNode:
    children: tuple[QueryNode, ...]


@dataclass(frozen=True, slots=True)
class RangeNode:
    start: str
    end: str
    include_left: bool = False
    include_right: bool = False


@dataclass(frozen=True, slots=True)
class FuzzyNode:
    query: QueryNode
    similarity: int | float | None = None


@dataclass(frozen=True, slots=True)
class ProximityNode:
    first: str
    second: str
    distance: int | float


@dataclass(frozen=True, slots=True)
class BoostNode:
    query: QueryNode
    factor: int | float


@dataclass(frozen=True, slots=True)
class RequiredNode:
    query: QueryNode


QueryNode = Union[
    TermNode,
    RawNode,
    FieldNode,
    BooleanNode,
    GroupNode,
    RangeNode,
    FuzzyNode,
    ProximityNode,
    BoostNode,
    RequiredNode,
]


@dataclass(frozen=True, slots=True)
class QueryTemplate:
    """Named, declarative query definition.

    Attributes:
        name: Optional query name for display.
        root: Root node of the query tree.
        data: Template data merged under the data passed at compile time.
    """

    name: str | None
    root: QueryNode
    data: Mapping[str, Any] = field(default_factory=dict)
