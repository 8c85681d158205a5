"""
Pydantic settings for cyshell.

Values come from ``CYSHELL_*`` environment variables; command-line options
override them.
"""

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ValidationError

from .domain.errors import SettingsError

ENV_PREFIX = "CYSHELL_"


class ShellSettings(BaseModel):
    """Output and strictness settings for splitting commands"""

    strict: bool = False  # Fail when the script ends with open text
    highlight: bool = True
    theme: str = "monokai"  # rich/pygments syntax theme
    lexer: str = "cypher"  # pygments lexer name
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> ShellSettings:
    """Build settings from ``CYSHELL_*`` variables.

    Args:
        environ: Variables to read (default: ``os.environ``)

    Raises:
        SettingsError: If a variable holds a value pydantic rejects
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for name in ShellSettings.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in env:
            values[name] = env[key]
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()

    try:
        return ShellSettings.model_validate(values)
    except ValidationError as e:
        raise SettingsError(
            message=f"Invalid {ENV_PREFIX}* settings: {e}",
            code="invalid_settings",
        ) from e
