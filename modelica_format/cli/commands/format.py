"""
modelica-format format - reformat Modelica sources.

Paths may be files or directories; directories are searched recursively for
files with a configured extension. ``-`` (or no path at all) reads standard
input and writes the result to standard output.

Examples:
    modelica-format format Buildings/ --check
    modelica-format format Plant.mo --diff
    cat Plant.mo | modelica-format format - --tab-width 4
"""

import difflib
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import click

from modelica_format.config import WorkspaceConfig, discover_source_files, load_workspace_config
from modelica_format.errors import FormatterError
from modelica_format.formatting import FormattedResult, ModelicaFormatter
from modelica_format.observability.logging import get_logger

from ..errors import CLIError, CLIFileNotFoundError, CLIValidationError, handle_cli_exception
from ..output import configure_logging, print_status

logger = get_logger(__name__)

STDIN_PATH = "-"
STDIN_LABEL = "<stdin>"


def unified_diff(result: FormattedResult, original: str) -> str:
    label = result.path or STDIN_LABEL
    lines = difflib.unified_diff(
        original.splitlines(keepends=True),
        result.formatted_text.splitlines(keepends=True),
        fromfile=f"{label} (original)",
        tofile=f"{label} (formatted)",
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


def _read_source(path: Path) -> str:
    # newline="" keeps CR/LF endings so their repair counts as a change.
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_source(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def _split_targets(paths: Sequence[Path]) -> Tuple[bool, List[Path]]:
    use_stdin = not paths or any(str(path) == STDIN_PATH for path in paths)
    files = [path for path in paths if str(path) != STDIN_PATH]
    for path in files:
        if not path.exists():
            raise CLIFileNotFoundError(
                f"Path does not exist: {path}",
                hint="Pass Modelica files, directories, or '-' for standard input",
                context={"path": str(path)},
            )
    return use_stdin, files


def _emit(result: FormattedResult, original: str, *, check: bool, diff: bool, write: bool) -> None:
    if diff and result.is_changed:
        click.echo(unified_diff(result, original), nl=False)
    if check:
        if result.is_changed:
            print_status(f"Would reformat {result.path or STDIN_LABEL}", style="yellow")
        return
    if write:
        if result.is_changed and result.path is not None:
            _write_source(Path(result.path), result.formatted_text)
            print_status(f"Reformatted {result.path}", style="green")
        return
    if not diff:
        click.echo(result.formatted_text, nl=False)


def run_format(
    paths: Sequence[Path],
    workspace: WorkspaceConfig,
    *,
    check: bool = False,
    diff: bool = False,
    write: bool = False,
) -> int:
    """Format every target and return the process exit code."""
    if check and write:
        raise CLIValidationError("--check and --write cannot be used together")
    use_stdin, files = _split_targets(paths)
    if use_stdin and write:
        raise CLIValidationError(
            "--write cannot be used with standard input",
            hint="Redirect stdout instead, or pass file paths",
        )

    formatter = ModelicaFormatter(workspace.options)
    changed: List[FormattedResult] = []

    if use_stdin:
        original = sys.stdin.read()
        result = formatter.format_document(original)
        _emit(result, original, check=check, diff=diff, write=write)
        if result.is_changed:
            changed.append(result)

    sources = discover_source_files(workspace, files)
    for path in sources:
        original = _read_source(path)
        result = formatter.format_document(original, path=str(path))
        logger.debug("Formatted %s (changed=%s)", path, result.is_changed)
        _emit(result, original, check=check, diff=diff, write=write)
        if result.is_changed:
            changed.append(result)

    if check or write:
        total = len(sources) + (1 if use_stdin else 0)
        verb = "would be reformatted" if check else "reformatted"
        print_status(f"{len(changed)} of {total} file(s) {verb}", style="bold")
    return 1 if check and changed else 0


@click.command(name="format")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path, allow_dash=True))
@click.option("--check", is_flag=True, help="Report files that would change and exit 1 if any")
@click.option("--diff", is_flag=True, help="Print a unified diff instead of the formatted text")
@click.option("--write", "-w", is_flag=True, help="Rewrite changed files in place")
@click.option("--tab-width", type=int, default=None, help="Spaces per indentation level")
@click.option("--print-width", type=int, default=None, help="Target line length (not enforced)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Configuration file to use instead of discovery",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def format_command(
    ctx: click.Context,
    paths: Tuple[Path, ...],
    check: bool,
    diff: bool,
    write: bool,
    tab_width: Optional[int],
    print_width: Optional[int],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Format Modelica source files."""
    configure_logging(verbose)
    try:
        workspace = load_workspace_config(Path.cwd(), config_path)
        workspace = workspace.with_overrides(tab_width=tab_width, print_width=print_width)
        exit_code = run_format(paths, workspace, check=check, diff=diff, write=write)
    except (CLIError, FormatterError, OSError, UnicodeDecodeError) as exc:
        handle_cli_exception(exc, verbose=verbose)
        return
    ctx.exit(exit_code)


__all__ = ["format_command", "run_format", "unified_diff"]
