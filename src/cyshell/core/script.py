"""
Script utilities - whole-script and streaming helpers over the statement parser.

Single source of truth for turning a script file (or any line iterable) into
the statements a shell would see when the same text is typed line by line.
Lines end at ``\\n`` only, as they do for a shell reading a terminal or file.
"""

import io
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal

from cyshell.domain.errors import IncompleteStatementError

from .statement_parser import (
    BLOCK_COMMENT_END,
    LINE_COMMENT_END,
    ShellStatementParser,
    is_meta_command,
)

StatementKind = Literal["meta", "script"]


@dataclass(slots=True)
class ScriptSplit:
    """Statements found in a script plus any unterminated trailing text."""

    statements: list[str] = field(default_factory=list)
    kinds: list[StatementKind] = field(default_factory=list)
    remainder: str = ""

    @property
    def complete(self) -> bool:
        return not self.remainder.strip()


def _iter_classified(
    parser: ShellStatementParser, lines: Iterable[str]
) -> Iterator[tuple[StatementKind, str]]:
    for line in lines:
        # Same test the parser applies before taking its meta-command fast path
        meta = not parser.has_open_text() and is_meta_command(line)
        parser.ingest(line)
        kind: StatementKind = "meta" if meta else "script"
        for statement in parser.take_pending():
            yield kind, statement


def iter_statements(lines: Iterable[str]) -> Iterator[str]:
    """Yield statements as soon as the lines fed so far complete them.

    Args:
        lines: Text chunks in original order, e.g. an open file or stdin.
            Lines are expected to keep their trailing newline.
    """
    for _kind, statement in _iter_classified(ShellStatementParser(), lines):
        yield statement


def _describe_open_text(parser: ShellStatementParser) -> str:
    awaited = parser.awaited_delimiter
    if awaited == LINE_COMMENT_END:
        return "line comment is not terminated by a newline"
    if awaited == BLOCK_COMMENT_END:
        return "block comment is not closed with '*/'"
    if awaited is not None:
        return f"quote is not closed with {awaited}"
    return "statement is not terminated with ';'"


def split_script(text: str, *, strict: bool = False) -> ScriptSplit:
    """Split a whole script into statements, one line at a time.

    Args:
        text: Raw script content (e.g. read from a file).
        strict: Raise instead of returning leftover text when the script
            ends inside a statement, quote or comment.

    Returns:
        ScriptSplit with completed statements and their kinds in order,
        plus the remainder.

    Raises:
        IncompleteStatementError: If ``strict`` and non-blank text is left open.
    """
    parser = ShellStatementParser()
    split = ScriptSplit()
    for kind, statement in _iter_classified(parser, io.StringIO(text)):
        split.kinds.append(kind)
        split.statements.append(statement)

    if not parser.has_open_text():
        return split

    split.remainder = parser.buffered_text
    if strict:
        raise IncompleteStatementError(
            message=f"Script ends with open text: {_describe_open_text(parser)}",
            code="incomplete_statement",
            statements=split.statements,
            kinds=list(split.kinds),
            remainder=split.remainder,
        )
    return split
