"""Command implementations for the LuceneQuery CLI.

Encapsulates the compile logic for the render command, separated from CLI
parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from LuceneQuery.compiler import compile_template
from LuceneQuery.config import AppConfig, merge_config_dicts
from LuceneQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class CompiledQuery:
    name: str | None
    query: str


@dataclass(slots=True)
class RenderCommand:
    """Compile configured query templates against config + CLI data."""

    config: AppConfig
    data: Mapping[str, Any]
    name: str | None = None

    def execute(self) -> list[CompiledQuery]:
        """Compile every selected query.

        Returns:
            Compiled queries in configured order.

        Raises:
            ValueError: If ``name`` matches no configured query, or a template
                fails to compile.
            TypeError: If template values have the wrong type.
        """
        templates = self.config.queries.queries
        if self.name is not None:
            templates = tuple(t for t in templates if t.name == self.name)
            if not templates:
                raise ValueError(f"No query named {self.name!r}")

        results: list[CompiledQuery] = []
        for idx, template in enumerate(templates, start=1):
            log.debug("Compiling query %d/%d name=%s", idx, len(templates), template.name)
            # config data < template DATA < command-line data
            data = merge_config_dicts(merge_config_dicts(self.config.queries.data, template.data), self.data)
            query = compile_template(template)(data)
            results.append(CompiledQuery(name=template.name, query=query))
        log.info("Compiled %d queries", len(results))
        return results
