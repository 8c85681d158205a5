"""
cyshell

Incremental statement splitting for Cypher-style shells: meta-commands and
semicolon-terminated statements from line-by-line input.
"""

__version__ = "0.1.0"

from .core import (
    ScriptSplit,
    ShellStatementParser,
    StatementParser,
    is_meta_command,
    iter_statements,
    split_script,
)
from .domain import CommandResult, CyShellError, IncompleteStatementError

__all__ = [
    "__version__",
    "ShellStatementParser",
    "StatementParser",
    "is_meta_command",
    "ScriptSplit",
    "iter_statements",
    "split_script",
    "CommandResult",
    "CyShellError",
    "IncompleteStatementError",
]
