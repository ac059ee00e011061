"""Combinators that join already-built query fragments.

Two shapes:

- ``Surrounded``: fragments joined by an operator keyword,
  e.g. ``"a" OR "b" OR "c"``.
- ``Surrounder``: fragments space-joined between a delimiter pair,
  e.g. ``( "a" "b" )``.

Neither adds parentheses on its own; nest with ``group`` when precedence
matters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from LuceneQuery.core.validation import assert_string


def _check_fragments(fragments: Sequence[str]) -> None:
    for idx, fragment in enumerate(fragments):
        assert_string(fragment, f"fragments[{idx}]")


@dataclass(frozen=True, slots=True)
class Surrounded:
    """Join fragments with `` <operator> `` between each adjacent pair.

    Example:
        >>> Surrounded("OR")('"hello"', '"world"')
        '"hello" OR "world"'
    """

    operator: str

    def join(self, fragments: Sequence[str]) -> str:
        _check_fragments(fragments)
        return f" {self.operator} ".join(fragments)

    def __call__(self, *fragments: str) -> str:
        return self.join(fragments)


@dataclass(frozen=True, slots=True)
class Surrounder:
    """Space-join fragments and wrap them in ``open`` / ``close``.

    Example:
        >>> Surrounder("(", ")")("a", "b")
        '( a b )'
    """

    open: str
    close: str

    def join(self, fragments: Sequence[str]) -> str:
        _check_fragments(fragments)
        middle = " ".join(fragments)
        return f"{self.open} {middle} {self.close}"

    def __call__(self, *fragments: str) -> str:
        return self.join(fragments)


or_ = Surrounded("OR")
and_ = Surrounded("AND")
not_ = Surrounded("NOT")

group = Surrounder("(", ")")
