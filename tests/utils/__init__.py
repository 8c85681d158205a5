"""Shared test helpers."""

from .cli_helpers import invoke_cli

__all__ = ["invoke_cli"]
