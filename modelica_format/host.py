"""
Host-facing surface of the formatter.

A pretty-printing host registers the language below, asks :func:`parse` for
a document and hands that document back to :func:`print_document`. The
document is a pass-through wrapper around the raw text; no structural parse
happens.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .formatting.core import FormatOptions, format_text

PARSER_NAME = "modelica"
AST_FORMAT = "modelica-ast"


@dataclass(frozen=True)
class LanguageDefinition:
    """Language registration entry understood by the host."""

    name: str
    extensions: Tuple[str, ...]
    parsers: Tuple[str, ...]
    type: str = "programming"
    vscode_language_ids: Tuple[str, ...] = ()


LANGUAGES: Tuple[LanguageDefinition, ...] = (
    LanguageDefinition(
        name="Modelica",
        extensions=(".mo",),
        parsers=(PARSER_NAME,),
        vscode_language_ids=("modelica",),
    ),
)


@dataclass(frozen=True)
class SourceDocument:
    """Opaque single-node document carrying the original text."""

    content: str
    ast_format: str = AST_FORMAT

    @property
    def loc_start(self) -> int:
        return 0

    @property
    def loc_end(self) -> int:
        return len(self.content)


def parse(text: str) -> SourceDocument:
    return SourceDocument(content=text)


def print_document(
    document: SourceDocument,
    options: Union[FormatOptions, Mapping[str, Any], None] = None,
) -> str:
    return format_text(document.content, options)


def _build_option_schema() -> Dict[str, Dict[str, Any]]:
    schema: Dict[str, Dict[str, Any]] = {}
    for name, field in FormatOptions.model_fields.items():
        schema[field.alias or name] = {
            "type": "int",
            "category": "Global",
            "default": field.default,
            "description": field.description,
        }
    return schema


OPTION_SCHEMA: Dict[str, Dict[str, Any]] = _build_option_schema()
DEFAULT_OPTIONS: Dict[str, Any] = {key: entry["default"] for key, entry in OPTION_SCHEMA.items()}


def registered_extensions() -> Tuple[str, ...]:
    return tuple(ext for language in LANGUAGES for ext in language.extensions)


def is_modelica_file(path: Union[str, Path], extensions: Optional[Tuple[str, ...]] = None) -> bool:
    suffix = Path(path).suffix.lower()
    return suffix in (extensions or registered_extensions())


__all__ = [
    "PARSER_NAME",
    "AST_FORMAT",
    "LanguageDefinition",
    "LANGUAGES",
    "SourceDocument",
    "parse",
    "print_document",
    "OPTION_SCHEMA",
    "DEFAULT_OPTIONS",
    "registered_extensions",
    "is_modelica_file",
]
