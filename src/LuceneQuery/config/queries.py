"""Query template configuration and node DSL parsing.

A query node is either a bare string (shorthand for a term) or a mapping with
exactly one kind key:

    term / phrase / raw          text
    field                        name, plus ``query: <node>``
    and / or / not / group       list of nodes
    range                        {start, end, include_left?, include_right?}
    fuzzy                        node, plus optional ``similarity``
    proximity                    {first, second, distance}
    boost                        node, plus ``factor``
    required                     node
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from LuceneQuery.config.common import (
    expect_bool,
    expect_list,
    expect_mapping,
    expect_number,
    expect_str,
    get_required_value,
    get_section,
)
from LuceneQuery.core.template import (
    BooleanNode,
    BoostNode,
    FieldNode,
    FuzzyNode,
    GroupNode,
    ProximityNode,
    QueryNode,
    QueryTemplate,
    RangeNode,
    RawNode,
    RequiredNode,
    TermNode,
)

# kind -> extra keys allowed next to it
_NODE_KINDS: dict[str, frozenset[str]] = {
    "term": frozenset(),
    "phrase": frozenset(),
    "raw": frozenset(),
    "field": frozenset({"query"}),
    "and": frozenset(),
    "or": frozenset(),
    "not": frozenset(),
    "group": frozenset(),
    "range": frozenset(),
    "fuzzy": frozenset({"similarity"}),
    "proximity": frozenset(),
    "boost": frozenset({"factor"}),
    "required": frozenset(),
}
_QUERY_KEYS = {"NAME", "QUERY", "DATA"}


@dataclass(frozen=True, slots=True)
class QueriesConfig:
    """Store validated template data and query templates."""

    data: Mapping[str, Any]
    queries: tuple[QueryTemplate, ...]


def load_queries(raw: Mapping[str, Any]) -> QueriesConfig:
    """Load ``data`` and ``queries`` from the root mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or nodes are malformed.
    """
    data = dict(get_section(raw, "data", required=False))

    queries_obj = raw.get("queries")
    if queries_obj is None:
        raise ValueError("Missing required config: queries")
    items = expect_list(queries_obj, "queries")
    queries = tuple(parse_query_template(item, f"queries[{idx}]") for idx, item in enumerate(items))
    return QueriesConfig(data=data, queries=queries)


def check_queries(config: QueriesConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If no query is configured or names repeat.
    """
    if not config.queries:
        raise ValueError("queries must include at least one query")
    seen: set[str] = set()
    for query in config.queries:
        if query.name is None:
            continue
        if query.name in seen:
            raise ValueError(f"queries has duplicate NAME: {query.name}")
        seen.add(query.name)


def parse_query_template(value: Any, config_key: str) -> QueryTemplate:
    """Parse one ``{NAME?, QUERY, DATA?}`` entry."""
    mapping = expect_mapping(value, config_key)
    unknown = set(mapping) - _QUERY_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    name = None
    if "NAME" in mapping:
        name = expect_str(mapping["NAME"], f"{config_key}.NAME").strip() or None

    data: Mapping[str, Any] = {}
    if "DATA" in mapping:
        data = dict(expect_mapping(mapping["DATA"], f"{config_key}.DATA"))

    root = parse_query_node(get_required_value(mapping, "QUERY", f"{config_key}.QUERY"), f"{config_key}.QUERY")
    return QueryTemplate(name=name, root=root, data=data)


def parse_query_node(value: Any, config_key: str) -> QueryNode:
    """Parse a query node.

    Args:
        value: Bare string or single-kind mapping.
        config_key: Full key path used in error messages.

    Returns:
        Parsed node tree.

    Raises:
        TypeError: If node shape/types are invalid.
        ValueError: If the node kind is missing, ambiguous or unknown.
    """
    if isinstance(value, str):
        return TermNode(text=value)
    mapping = expect_mapping(value, config_key)

    kinds = [key for key in mapping if key in _NODE_KINDS]
    if len(kinds) != 1:
        raise ValueError(f"{config_key} must have exactly one of {sorted(_NODE_KINDS)}")
    kind = kinds[0]
    unknown = set(mapping) - {kind} - _NODE_KINDS[kind]
    if unknown:
        raise ValueError(f"{config_key} has unknown keys for {kind}: {sorted(unknown)}")

    body = mapping[kind]
    key = f"{config_key}.{kind}"

    if kind in ("term", "phrase"):
        return TermNode(text=expect_str(body, key))
    if kind == "raw":
        return RawNode(text=expect_str(body, key))
    if kind == "field":
        query_key = f"{config_key}.query"
        return FieldNode(
            name=expect_str(body, key),
            query=parse_query_node(get_required_value(mapping, "query", query_key), query_key),
        )
    if kind in ("and", "or", "not"):
        return BooleanNode(operator=kind.upper(), children=_parse_children(body, key))
    if kind == "group":
        return GroupNode(children=_parse_children(body, key))
    if kind == "range":
        return _parse_range(body, key)
    if kind == "fuzzy":
        similarity = mapping.get("similarity")
        if similarity is not None:
            similarity = expect_number(similarity, f"{config_key}.similarity")
        return FuzzyNode(query=parse_query_node(body, key), similarity=similarity)
    if kind == "proximity":
        section = expect_mapping(body, key)
        return ProximityNode(
            first=expect_str(get_required_value(section, "first", f"{key}.first"), f"{key}.first"),
            second=expect_str(get_required_value(section, "second", f"{key}.second"), f"{key}.second"),
            distance=expect_number(get_required_value(section, "distance", f"{key}.distance"), f"{key}.distance"),
        )
    if kind == "boost":
        factor_key = f"{config_key}.factor"
        return BoostNode(
            query=parse_query_node(body, key),
            factor=expect_number(get_required_value(mapping, "factor", factor_key), factor_key),
        )
    return RequiredNode(query=parse_query_node(body, key))


def _parse_children(value: Any, config_key: str) -> tuple[QueryNode, ...]:
    items = expect_list(value, config_key)
    return tuple(parse_query_node(item, f"{config_key}[{idx}]") for idx, item in enumerate(items))


def _parse_range(value: Any, config_key: str) -> RangeNode:
    section = expect_mapping(value, config_key)
    unknown = set(section) - {"start", "end", "include_left", "include_right"}
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")
    return RangeNode(
        start=expect_str(get_required_value(section, "start", f"{config_key}.start"), f"{config_key}.start"),
        end=expect_str(get_required_value(section, "end", f"{config_key}.end"), f"{config_key}.end"),
        include_left=expect_bool(section.get("include_left", False), f"{config_key}.include_left"),
        include_right=expect_bool(section.get("include_right", False), f"{config_key}.include_right"),
    )
