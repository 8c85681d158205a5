"""
Core splitting logic with no CLI or terminal dependencies.
"""

from .script import ScriptSplit, StatementKind, iter_statements, split_script
from .statement_parser import ShellStatementParser, StatementParser, is_meta_command

__all__ = [
    "ShellStatementParser",
    "StatementParser",
    "is_meta_command",
    "ScriptSplit",
    "iter_statements",
    "split_script",
    "StatementKind",
]
