"""Query template compiler.

Compiles a `QueryTemplate` node tree into a Lucene query string by calling the
primitives in `LuceneQuery.core`. Text values are rendered against the
template data first, so escaping and argument validation always apply to the
final values.

Rules
- TermNode      -> terms(text)
- RawNode       -> text, unchanged
- FieldNode     -> field(name, query)
- BooleanNode   -> and_ / or_ / not_ over children
- GroupNode     -> group(children)
- RangeNode     -> range_(start, end, include_left, include_right)
- FuzzyNode     -> fuzzy(query, similarity)
- ProximityNode -> proximity(first, second, distance)
- BoostNode     -> boost(query, factor)
- RequiredNode  -> required(query)
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from LuceneQuery.config.app import merge_config_dicts
from LuceneQuery.core.builders import (
    boost,
    builder,
    field,
    fuzzy,
    proximity,
    range_,
    required,
    terms,
)
from LuceneQuery.core.combinators import Surrounded, and_, group, not_, or_
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
from LuceneQuery.utils.log import log

_OPERATORS: dict[str, Surrounded] = {
    "AND": and_,
    "OR": or_,
    "NOT": not_,
}


def render_text(text: str, data: Mapping[str, Any]) -> str:
    """Fill ``str.format_map`` placeholders in ``text`` from ``data``.

    Raises:
        ValueError: If a placeholder names a key missing from ``data``, indexes
            a value of the wrong shape, or the text is not a valid format string.
    """
    try:
        return text.format_map(data)
    except (KeyError, IndexError, AttributeError) as e:
        raise ValueError(f"Missing template data for placeholder {e} in {text!r}") from e
    except TypeError as e:
        raise ValueError(f"Template data does not fit placeholder in {text!r}: {e}") from e
    except ValueError as e:
        raise ValueError(f"Invalid template text {text!r}: {e}") from e


def compile_node(node: QueryNode, data: Mapping[str, Any]) -> str:
    """Compile one node (and its subtree) into a query fragment."""
    if isinstance(node, TermNode):
        return terms(render_text(node.text, data))
    if isinstance(node, RawNode):
        return render_text(node.text, data)
    if isinstance(node, FieldNode):
        return field(render_text(node.name, data), compile_node(node.query, data))
    if isinstance(node, BooleanNode):
        operator = _OPERATORS.get(node.operator.upper())
        if operator is None:
            raise ValueError(f"Unsupported boolean operator: {node.operator}")
        return operator.join([compile_node(child, data) for child in node.children])
    if isinstance(node, GroupNode):
        return group.join([compile_node(child, data) for child in node.children])
    if isinstance(node, RangeNode):
        return range_(
            render_text(node.start, data),
            render_text(node.end, data),
            node.include_left,
            node.include_right,
        )
    if isinstance(node, FuzzyNode):
        return fuzzy(compile_node(node.query, data), node.similarity)
    if isinstance(node, ProximityNode):
        return proximity(render_text(node.first, data), render_text(node.second, data), node.distance)
    if isinstance(node, BoostNode):
        return boost(compile_node(node.query, data), node.factor)
    if isinstance(node, RequiredNode):
        return required(compile_node(node.query, data))
    raise TypeError(f"Unsupported query node: {type(node).__name__}")


def compile_template(template: QueryTemplate) -> Callable[[Mapping[str, Any] | None], str]:
    """Turn a template into a query builder.

    Args:
        template: Parsed query template.

    Returns:
        Callable taking template data (merged over ``template.data``) and
        returning the compiled query string.
    """

    def build(data: Mapping[str, Any] | None) -> str:
        merged = merge_config_dicts(template.data, data or {})
        query = compile_node(template.root, merged)
        log.debug("Compiled query name=%s query=%s", template.name, query)
        return query

    return builder(build)
