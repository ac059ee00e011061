"""Lucene query primitives.

Query syntax reference:
https://lucene.apache.org/core/2_9_4/queryparsersyntax.html

Every function here validates its arguments first, then formats. Nothing is
cached or logged; the same inputs always yield the same string.
"""

from __future__ import annotations

import math
from typing import Any, Callable, TypeVar

from LuceneQuery.core.combinators import Surrounder
from LuceneQuery.core.escape import escape_special_characters
from LuceneQuery.core.validation import assert_function, assert_range, assert_string

T = TypeVar("T")


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def terms(words: str) -> str:
    """Quote a word or phrase, escaping Lucene reserved characters.

    Example:
        >>> terms("hello (world)")
        '"hello \\\\(world\\\\)"'
    """
    assert_string(words, "words", 1)
    return f'"{escape_special_characters(words)}"'


term = terms
phrase = terms


def field(name: str, query: str) -> str:
    """Scope a query fragment to a field: ``<name>: <query>``.

    Example:
        >>> field("eye-color", terms("brown"))
        'eye-color: "brown"'
    """
    assert_string(name, "name", 1)
    assert_string(query, "query", 2)
    return f"{name}: {query}"


def range_(start: str, end: str, include_left: bool = False, include_right: bool = False) -> str:
    """Build a range query between two bounds.

    Square brackets include a bound, curly braces exclude it. Both bounds are
    exclusive unless the matching flag is truthy.

    Args:
        start: Lower bound.
        end: Upper bound.
        include_left: Include ``start``.
        include_right: Include ``end``.

    Returns:
        Range fragment such as ``[ a TO b }``.
    """
    assert_string(start, "start", 1)
    assert_string(end, "end", 2)
    surround = Surrounder("[" if include_left else "{", "]" if include_right else "}")
    return surround(f"{start} TO {end}")


def fuzzy(query: str, similarity: int | float | None = None) -> str:
    """Mark a term for fuzzy matching.

    Similarity lies between 0 and 1; values closer to 1 only match terms with
    a higher similarity. Fuzzy search applies to a single term.

    Args:
        query: Term fragment.
        similarity: Optional similarity. ``None`` leaves the suffix bare.

    Returns:
        ``<query>~`` or ``<query>~<similarity>``.

    Raises:
        TypeError: If query is not a string or similarity is not a number.
        ValueError: If similarity is outside [0, 1].
    """
    assert_string(query, "query", 1)
    if similarity is None:
        return f"{query}~"
    assert_range(0, 1, similarity, "similarity", 2)
    return f"{query}~{_format_number(similarity)}"


def proximity(first: str, second: str, distance: int | float) -> str:
    """Match two words within ``distance`` positions of each other.

    Raises:
        TypeError: If a word is not a string or distance is not a number.
        ValueError: If distance is negative or not finite.
    """
    assert_string(first, "first", 1)
    assert_string(second, "second", 2)
    assert_range(0, math.inf, distance, "distance", 3)
    return f'"{first} {second}"~{_format_number(distance)}'


def boost(query: str, factor: int | float) -> str:
    """Raise the relevance of a term: ``<query>^<factor>``, factor >= 1."""
    assert_string(query, "query", 1)
    assert_range(1, math.inf, factor, "factor", 2)
    return f"{query}^{_format_number(factor)}"


def required(query: str) -> str:
    assert_string(query, "query", 1)
    return f"+{query}"


def builder(fn: Callable[[Any], T]) -> Callable[[Any], T]:
    """Declare a query template parameterized over arbitrary data.

    Example:
        >>> user_query = builder(lambda data: field("user-name", term(data["name"])))
        >>> user_query({"name": "Dolly"})
        'user-name: "Dolly"'
    """
    assert_function(fn, "fn", 1)

    def build(data: Any) -> T:
        return fn(data)

    return build
