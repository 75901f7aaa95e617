"""
Console and logging setup shared by the CLI commands.

Status messages go to stderr through a rich :class:`Console` so formatted
source written to stdout stays clean for piping.
"""

import logging

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, highlight=False)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Route library debug logging to stderr when ``--verbose`` is given."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT)
        logging.getLogger("modelica_format").setLevel(logging.DEBUG)


def print_status(message: str, *, style: str = "") -> None:
    """Print one status line without wrapping or markup interpretation."""
    text = escape(message)
    if style:
        text = f"[{style}]{text}[/{style}]"
    console.print(text, soft_wrap=True)


__all__ = ["console", "configure_logging", "print_status"]
