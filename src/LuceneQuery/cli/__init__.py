"""CLI package for LuceneQuery command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from LuceneQuery.cli.runner import CommandRunner
from LuceneQuery.cli.ui import cli


def main() -> None:
    """Run LuceneQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
