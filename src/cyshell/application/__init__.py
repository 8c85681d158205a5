"""Application services for cyshell."""

from .services import SplitService

__all__ = ["SplitService"]
