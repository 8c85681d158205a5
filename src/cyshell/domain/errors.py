"""Unified domain error taxonomy for splitting workflows."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class CyShellError(Exception):
    """Base class for application/domain-level failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class IncompleteStatementError(CyShellError):
    """Raised when a script ends inside a statement, quote or comment."""

    statements: list[str] = field(default_factory=list)
    kinds: list[str] = field(default_factory=list)
    remainder: str = ""


class ScriptReadError(CyShellError):
    """Raised when the input script cannot be read."""


class SettingsError(CyShellError):
    """Raised when configuration values fail validation."""
