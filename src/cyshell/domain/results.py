"""Typed result envelopes used by CLI and SDK entrypoints."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(slots=True)
class StatementRow:
    """One statement of a split report, numbered from 1."""

    index: int
    kind: str  # "meta" or "script"
    text: str


@dataclass(slots=True)
class CommandResult:
    """Common command/service response payload."""

    success: bool
    code: str = "ok"
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_statements(
        cls,
        *,
        success: bool,
        code: str,
        message: str,
        rows: list[StatementRow],
        remainder: str,
    ) -> "CommandResult":
        """Build a split report carrying statement rows and leftover text."""
        return cls(
            success=success,
            code=code,
            message=message,
            data={"statements": [asdict(row) for row in rows], "remainder": remainder},
        )

    def as_json_dict(self) -> dict[str, Any]:
        """Return a stable machine-readable structure."""
        return {
            "success": self.success,
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
