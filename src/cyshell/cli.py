"""
Click-based CLI for cyshell.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .commands import split_command
from .config import ShellSettings, load_settings
from .domain.errors import SettingsError

console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format="%(message)s")


@click.group()
@click.version_option(version=__version__, prog_name="cyshell")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cyshell - split shell input into meta-commands and statements"""
    try:
        settings = load_settings()
    except SettingsError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        sys.exit(1)

    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.command()
@click.argument("script", type=click.Path(allow_dash=True), required=False, default="-")
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail if the script ends inside a statement, quote or comment",
)
@click.option(
    "--highlight/--no-highlight",
    default=None,
    help="Syntax-highlight script statements",
)
@click.pass_obj
def split(
    settings: ShellSettings,
    script: str,
    json_output: bool,
    strict: Optional[bool],
    highlight: Optional[bool],
) -> None:
    """Split SCRIPT (default: stdin) into statements

    Example:

        cyshell split queries.cypher
        cat queries.cypher | cyshell split --json
    """
    overrides = {
        name: value
        for name, value in (("strict", strict), ("highlight", highlight))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    status = split_command(script, settings, json_output)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    cli()
