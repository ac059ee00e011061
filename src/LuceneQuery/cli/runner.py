"""Command runner for coordinating CLI execution.

Manages logging configuration and error handling for command execution.
"""

from __future__ import annotations

from typing import Any, Mapping

import click

from LuceneQuery.cli.commands import RenderCommand
from LuceneQuery.config import AppConfig
from LuceneQuery.renderers import render_json, render_text
from LuceneQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with logging and error handling."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_render(
        self,
        action: str,
        *,
        data: Mapping[str, Any],
        name: str | None = None,
        output_format: str = "text",
    ) -> str:
        """Compile configured queries and render them for output.

        Args:
            action: The CLI command name (e.g., 'render').
            data: Template data given on the command line.
            name: Only compile the query with this NAME.
            output_format: ``text`` or ``json``.

        Returns:
            Rendered output ready to print.

        Raises:
            click.Abort: When compiling fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            compiled = RenderCommand(config=self.config, data=data, name=name).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Render failed: %s", e)
            raise click.Abort from e

        if output_format == "json":
            return render_json(compiled)
        return render_text(compiled)
