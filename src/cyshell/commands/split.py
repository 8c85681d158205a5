"""
Split Command

Reads a script and reports the statements a shell would run from it.
"""

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.text import Text

from cyshell.application.services import SplitService
from cyshell.config import ShellSettings
from cyshell.domain.errors import ScriptReadError
from cyshell.domain.results import CommandResult

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

STDIN = "-"


def read_script(source: str) -> str:
    """Read script text from a path, or from stdin when ``source`` is ``-``."""
    try:
        with click.open_file(source, encoding="utf-8") as stream:
            return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        name = "from stdin" if source == STDIN else source
        raise ScriptReadError(
            message=f"Cannot read script {name}: {e}",
            code="script_read_failed",
        ) from e


def _print_statements(result: CommandResult, settings: ShellSettings) -> None:
    rows = result.data["statements"]
    for row in rows:
        console.print(f"[dim]-- statement {row['index']} ({row['kind']})[/dim]")
        text = row["text"].rstrip()
        if settings.highlight and row["kind"] == "script":
            console.print(Syntax(text, settings.lexer, theme=settings.theme))
        else:
            console.print(Text(text))

    remainder = result.data["remainder"]
    if remainder.strip():
        console.print("[yellow]⚠ Unterminated text at end of script:[/yellow]")
        console.print(Text(remainder.rstrip()))


def split_command(source: str, settings: ShellSettings, json_output: bool) -> int:
    """Run the split workflow and print its outcome. Returns the exit status."""
    try:
        text = read_script(source)
    except ScriptReadError as e:
        if json_output:
            failure = CommandResult(success=False, code=e.code, message=e.message)
            click.echo(json.dumps(failure.as_json_dict()))
        else:
            err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1

    logger.info("Splitting %d characters from %s", len(text), "stdin" if source == STDIN else source)
    result = SplitService().run(text=text, strict=settings.strict)

    if json_output:
        click.echo(json.dumps(result.as_json_dict()))
        return 0 if result.success else 1

    _print_statements(result, settings)
    if result.success:
        console.print(f"[green]✓[/green] {escape(result.message)}")
        return 0
    err_console.print(f"[red]✗ Split failed:[/red] {escape(result.message)}")
    return 1
