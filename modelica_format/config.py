"""Workspace configuration support for the modelica-format CLI."""

from __future__ import annotations

import fnmatch
import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import ConfigError, FormatOptionsError
from .formatting.core import FormatOptions
from .host import registered_extensions

CONFIG_CANDIDATES: Tuple[str, ...] = ("modelica-format.toml", ".modelicaformatrc", "pyproject.toml")
PYPROJECT_TABLE = "modelica-format"

# Both spellings are accepted; validation runs on the host names.
_OPTION_KEYS = {
    "tabWidth": "tabWidth",
    "tab_width": "tabWidth",
    "printWidth": "printWidth",
    "print_width": "printWidth",
}


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    options: FormatOptions = field(default_factory=FormatOptions)
    extensions: List[str] = field(default_factory=lambda: list(registered_extensions()))
    exclude: List[str] = field(default_factory=list)
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def is_excluded(self, path: Path) -> bool:
        try:
            relative = path.resolve().relative_to(self.root).as_posix()
        except ValueError:
            relative = path.as_posix()
        return any(
            fnmatch.fnmatch(relative, pattern) or fnmatch.fnmatch(path.name, pattern)
            for pattern in self.exclude
        )

    def with_overrides(self, **overrides: Optional[int]) -> "WorkspaceConfig":
        """Return a copy whose options take every non-``None`` override."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        merged = {**self.options.model_dump(), **values}
        return WorkspaceConfig(
            root=self.root,
            options=FormatOptions.coerce(merged),
            extensions=list(self.extensions),
            exclude=list(self.exclude),
            source=self.source,
            raw=dict(self.raw),
        )


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _pyproject_section(path: Path) -> Optional[Dict[str, Any]]:
    try:
        data = _read_toml_config(path)
    except (OSError, tomllib.TOMLDecodeError):
        return None
    section = data.get("tool", {}).get(PYPROJECT_TABLE)
    return section if isinstance(section, dict) else None


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_CANDIDATES:
        path = root / candidate
        if not path.exists():
            continue
        # A pyproject.toml only counts when it carries our table.
        if candidate == "pyproject.toml" and _pyproject_section(path) is None:
            continue
        return path
    return None


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        if path.name == "pyproject.toml":
            data = _read_toml_config(path).get("tool", {}).get(PYPROJECT_TABLE, {})
        elif path.suffix == ".toml":
            data = _read_toml_config(path)
        else:
            data = _read_json_config(path)
    except (OSError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(
            f"Could not read configuration: {exc}",
            path=str(path),
            hint="Configuration must be valid TOML (or JSON for .modelicaformatrc)",
        ) from exc
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a table of settings", path=str(path))
    return data


def _string_list(value: Any, key: str, path: Path) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ConfigError(f"'{key}' must be a string or a list of strings", path=str(path))


def _parse_options(data: Dict[str, Any], path: Path) -> FormatOptions:
    values = {_OPTION_KEYS[key]: value for key, value in data.items() if key in _OPTION_KEYS}
    try:
        return FormatOptions.coerce(values)
    except FormatOptionsError as exc:
        raise ConfigError(exc.message, path=str(path), hint=exc.hint) from exc


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    root = root.resolve()
    if explicit is not None and not explicit.exists():
        raise ConfigError("Configuration file not found", path=str(explicit))
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return WorkspaceConfig(root=root)

    data = _read_config(config_path)
    extensions = registered_extensions()
    if "extensions" in data:
        extensions = tuple(_string_list(data["extensions"], "extensions", config_path))
    exclude = _string_list(data.get("exclude") or [], "exclude", config_path)

    return WorkspaceConfig(
        root=root,
        options=_parse_options(data, config_path),
        extensions=[ext if ext.startswith(".") else f".{ext}" for ext in extensions],
        exclude=exclude,
        source=config_path,
        raw=data,
    )


def discover_source_files(workspace: WorkspaceConfig, paths: Sequence[Path]) -> List[Path]:
    """Expand ``paths`` into the source files the formatter should visit.

    Explicit files are always kept; directories are walked recursively for
    files with a configured extension that are not excluded.
    """
    found: List[Path] = []
    seen = set()

    def _add(candidates: Iterable[Path]) -> None:
        for candidate in candidates:
            key = candidate.resolve()
            if key not in seen:
                seen.add(key)
                found.append(candidate)

    for path in paths:
        if path.is_dir():
            _add(
                sorted(
                    candidate
                    for candidate in path.rglob("*")
                    if candidate.is_file()
                    and candidate.suffix.lower() in workspace.extensions
                    and not workspace.is_excluded(candidate)
                )
            )
        else:
            _add([path])
    return found


__all__ = [
    "CONFIG_CANDIDATES",
    "WorkspaceConfig",
    "locate_config_file",
    "load_workspace_config",
    "discover_source_files",
]
