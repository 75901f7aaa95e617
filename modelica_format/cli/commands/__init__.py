"""Subcommands of the modelica-format CLI."""

from .format import format_command
from .sync_metadata import sync_metadata_command

__all__ = ["format_command", "sync_metadata_command"]
