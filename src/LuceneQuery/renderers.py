"""Output renderers for compiled queries.

Text output prints one ``name: query`` line per query (just the query when the
template is unnamed). JSON output is a list of ``{"name", "query"}`` objects.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from LuceneQuery.cli.commands import CompiledQuery


def render_text(queries: Iterable[CompiledQuery]) -> str:
    lines: list[str] = []
    for compiled in queries:
        if compiled.name:
            lines.append(f"{compiled.name}: {compiled.query}")
        else:
            lines.append(compiled.query)
    return "\n".join(lines)


def render_json(queries: Iterable[CompiledQuery]) -> str:
    payload = [{"name": compiled.name, "query": compiled.query} for compiled in queries]
    return json.dumps(payload, ensure_ascii=False, indent=2)
