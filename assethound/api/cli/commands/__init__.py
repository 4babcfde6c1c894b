"""CLI command implementations."""

from .rename import rename_command

__all__ = ["rename_command"]
