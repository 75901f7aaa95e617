"""
modelica-format CLI entry point.

The group dispatches to the focused command modules under
:mod:`modelica_format.cli.commands`.
"""

import click

from modelica_format import __version__

from .commands import format_command, sync_metadata_command


@click.group(name="modelica-format")
@click.version_option(__version__, prog_name="modelica-format")
def main() -> None:
    """Format Modelica source files."""


main.add_command(format_command)
main.add_command(sync_metadata_command)


__all__ = ["main"]
