"""Keep the grammar manifest's metadata in step with the package manifest."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import MetadataSyncError
from .observability.logging import get_logger

logger = get_logger(__name__)

SYNCED_FIELDS: Tuple[str, ...] = ("version", "license", "description")
DEFAULT_SOURCE = Path("package.json")
DEFAULT_TARGET = Path("tree-sitter.json")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class MetadataChange:
    """One metadata field copied from the source manifest."""

    field: str
    old: Optional[Any]
    new: Optional[Any]

    def describe(self) -> str:
        old = "(none)" if self.old in (None, "") else self.old
        new = "(none)" if self.new is None else self.new
        return f"{self.field}: {old} → {new}"


def _load_manifest(path: Path) -> Dict[str, Any]:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise MetadataSyncError("Manifest not found", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise MetadataSyncError(
            f"Manifest is not valid JSON: {exc.msg} at line {exc.lineno}",
            path=str(path),
        ) from exc
    if not isinstance(document, dict):
        raise MetadataSyncError("Manifest must contain a JSON object", path=str(path))
    return document


def sync_metadata(
    source: PathLike = DEFAULT_SOURCE,
    target: PathLike = DEFAULT_TARGET,
    dry_run: bool = False,
) -> List[MetadataChange]:
    """Copy ``version``, ``license`` and ``description`` into ``target["metadata"]``.

    The target file is rewritten only when at least one field differs and
    ``dry_run`` is false.

    Raises:
        MetadataSyncError: If either manifest is missing or malformed.
    """
    source_path = Path(source)
    target_path = Path(target)
    package = _load_manifest(source_path)
    manifest = _load_manifest(target_path)

    metadata = manifest.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}
        manifest["metadata"] = metadata

    changes: List[MetadataChange] = []
    for name in SYNCED_FIELDS:
        current = metadata.get(name)
        wanted = package.get(name)
        if current == wanted:
            continue
        changes.append(MetadataChange(field=name, old=current, new=wanted))
        if wanted is None:
            metadata.pop(name, None)
        else:
            metadata[name] = wanted

    if changes and not dry_run:
        target_path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        logger.debug("Wrote %d metadata change(s) to %s", len(changes), target_path)
    return changes


__all__ = [
    "SYNCED_FIELDS",
    "DEFAULT_SOURCE",
    "DEFAULT_TARGET",
    "MetadataChange",
    "sync_metadata",
]
