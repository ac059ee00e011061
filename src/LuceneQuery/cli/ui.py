"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to their
respective runners.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
import yaml

from LuceneQuery.cli.runner import CommandRunner
from LuceneQuery.config import load_config, merge_config_dicts
from LuceneQuery.core.builders import terms
from LuceneQuery.core.escape import escape_special_characters


def parse_data_options(values: tuple[str, ...]) -> dict[str, Any]:
    """Parse ``KEY=VALUE`` pairs into template data.

    Dotted keys nest: ``user.name=Dolly`` becomes ``{"user": {"name": "Dolly"}}``.

    Raises:
        click.BadParameter: If a pair has no ``=`` or an empty key.
    """
    data: dict[str, Any] = {}
    for item in values:
        key, sep, value = item.partition("=")
        path = [part for part in key.strip().split(".") if part]
        if not sep or not path:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--data")
        nested: Any = value
        for part in reversed(path):
            nested = {part: nested}
        data = merge_config_dicts(data, nested)
    return data


@click.group(help="LuceneQuery: build Lucene query strings from YAML templates.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/queries.yml"),
    show_default=True,
    help="Path to YAML query config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    The config file is only read by commands that need it.
    """
    ctx.obj = config_path


@cli.command("render")
@click.option("--name", default=None, help="Only render the query with this NAME.")
@click.option("--data", "data_items", multiple=True, metavar="KEY=VALUE", help="Template data (repeatable).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def render_cmd(ctx: click.Context, name: str | None, data_items: tuple[str, ...], output_format: str) -> None:
    """Compile configured query templates and print them.

    Raises:
        click.ClickException: When the config cannot be loaded.
        click.Abort: When compiling fails.
    """
    data = parse_data_options(data_items)
    try:
        cfg = load_config(ctx.obj)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid config {ctx.obj}: {e}") from e

    runner = CommandRunner(cfg)
    output = runner.run_render(ctx.command.name, data=data, name=name, output_format=output_format)
    click.echo(output)


@cli.command("escape")
@click.argument("text")
def escape_cmd(text: str) -> None:
    """Print TEXT with Lucene reserved characters escaped."""
    click.echo(escape_special_characters(text))


@cli.command("term")
@click.argument("text")
def term_cmd(text: str) -> None:
    """Print TEXT as a quoted, escaped term."""
    click.echo(terms(text))
