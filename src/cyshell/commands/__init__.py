"""
cyshell CLI Commands

Command implementations for the cyshell CLI. The CLI layer (cli.py) acts as
a thin routing layer over these modules.
"""

from .split import read_script, split_command

__all__ = [
    "read_script",
    "split_command",
]
