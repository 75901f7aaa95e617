"""Unified error model for modelica-format."""

from __future__ import annotations

from typing import Optional


class FormatterError(Exception):
    """Base class for all errors surfaced to users of the formatter."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        if self.path:
            meta_parts.append(self.path)
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class FormatOptionsError(FormatterError):
    """Raised when formatting options fail validation."""

    code = "MF_OPTIONS"


class ConfigError(FormatterError):
    """Raised when a workspace configuration file cannot be read."""

    code = "MF_CONFIG"


class MetadataSyncError(FormatterError):
    """Raised when a manifest document is missing or malformed."""

    code = "MF_METADATA"


__all__ = [
    "FormatterError",
    "FormatOptionsError",
    "ConfigError",
    "MetadataSyncError",
]
