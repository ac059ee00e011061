"""LuceneQuery: composable builders for Lucene query strings.

Every primitive returns a plain string fragment; fragments compose upward
into a single query.

Example:
    >>> import LuceneQuery as lq
    >>> lq.and_(lq.field("title", lq.term("neural network")), lq.range_("2019", "2024", True, True))
    'title: "neural network" AND [ 2019 TO 2024 ]'
"""

from __future__ import annotations

from LuceneQuery.core.builders import (
    boost,
    builder,
    field,
    fuzzy,
    phrase,
    proximity,
    range_,
    required,
    term,
    terms,
)
from LuceneQuery.core.combinators import Surrounded, Surrounder, and_, group, not_, or_
from LuceneQuery.core.escape import escape_special_characters
from LuceneQuery.core.validation import MAX_SAFE_INTEGER, assert_function, assert_range, assert_string

__all__ = [
    "terms",
    "term",
    "phrase",
    "field",
    "or_",
    "and_",
    "not_",
    "group",
    "range_",
    "fuzzy",
    "proximity",
    "boost",
    "required",
    "builder",
    "escape_special_characters",
    "assert_string",
    "assert_range",
    "assert_function",
    "MAX_SAFE_INTEGER",
    "Surrounded",
    "Surrounder",
]
