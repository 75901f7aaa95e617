"""
modelica-format sync-metadata - copy package metadata into the grammar manifest.

Copies ``version``, ``license`` and ``description`` from ``package.json``
into the ``metadata`` object of ``tree-sitter.json`` so both manifests
publish the same values.
"""

from pathlib import Path

import click

from modelica_format.errors import FormatterError
from modelica_format.metadata_sync import DEFAULT_SOURCE, DEFAULT_TARGET, sync_metadata

from ..errors import handle_cli_exception
from ..output import configure_logging, print_status


@click.command(name="sync-metadata")
@click.option(
    "--source",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_SOURCE,
    show_default=True,
    help="Manifest the values are read from",
)
@click.option(
    "--target",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_TARGET,
    show_default=True,
    help="Manifest whose metadata object is updated",
)
@click.option("--dry-run", is_flag=True, help="Report changes without writing the target")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def sync_metadata_command(source: Path, target: Path, dry_run: bool, verbose: bool) -> None:
    """Synchronize manifest metadata."""
    configure_logging(verbose)
    try:
        changes = sync_metadata(source, target, dry_run=dry_run)
    except FormatterError as exc:
        handle_cli_exception(exc, verbose=verbose)
        return

    if not changes:
        print_status(f"✓ {target.name} metadata is already in sync with {source.name}", style="green")
        return
    action = "Would update" if dry_run else "Updated"
    print_status(f"✓ {action} {target.name} metadata:", style="green")
    for change in changes:
        print_status(f"  - {change.describe()}")


__all__ = ["sync_metadata_command"]
