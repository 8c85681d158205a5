"""Domain-level types shared by the CLI and SDK entrypoints."""

from .errors import CyShellError, IncompleteStatementError, ScriptReadError, SettingsError
from .results import CommandResult, StatementRow

__all__ = [
    "CommandResult",
    "CyShellError",
    "IncompleteStatementError",
    "ScriptReadError",
    "SettingsError",
    "StatementRow",
]
