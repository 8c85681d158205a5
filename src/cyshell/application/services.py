"""Application service layer over the core splitting helpers.

This module provides a stable orchestration surface for CLI and SDK callers:
services take plain inputs and always answer with a CommandResult.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cyshell.core.script import split_script
from cyshell.domain.errors import IncompleteStatementError
from cyshell.domain.results import CommandResult, StatementRow

logger = logging.getLogger(__name__)


def _statement_rows(statements: Sequence[str], kinds: Sequence[str]) -> list[StatementRow]:
    return [
        StatementRow(index=index, kind=kind, text=text)
        for index, (kind, text) in enumerate(zip(kinds, statements), start=1)
    ]


@dataclass(slots=True)
class SplitService:
    """Split a script into shell statements."""

    def run(self, *, text: str, strict: bool = False) -> CommandResult:
        try:
            split = split_script(text, strict=strict)
        except IncompleteStatementError as e:
            logger.info("Strict split failed after %d statements", len(e.statements))
            return CommandResult.for_statements(
                success=False,
                code=e.code,
                message=e.message,
                rows=_statement_rows(e.statements, e.kinds),
                remainder=e.remainder,
            )

        count = len(split.statements)
        message = f"Found {count} statement{'s' if count != 1 else ''}"
        if not split.complete:
            message += " (script ends with unterminated text)"
        return CommandResult.for_statements(
            success=True,
            code="split",
            message=message,
            rows=_statement_rows(split.statements, split.kinds),
            remainder=split.remainder,
        )
