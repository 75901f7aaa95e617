"""Core formatting pipeline for Modelica source text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modelica_format.errors import FormatOptionsError
from modelica_format.observability.logging import get_logger, log_stage_event

from .cleanup import final_cleanup
from .corrective import reindent_control_lines
from .indentation import indent_text
from .preprocess import preprocess
from .rules import normalize_tokens

logger = get_logger(__name__)


class FormatOptions(BaseModel):
    """Options recognized by the formatter.

    Field aliases follow the host option names (``tabWidth``, ``printWidth``);
    unknown keys are ignored so a host can pass its whole option bag.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    tab_width: int = Field(
        2,
        ge=1,
        alias="tabWidth",
        description="Number of spaces per indentation level",
    )
    print_width: int = Field(
        80,
        ge=1,
        alias="printWidth",
        description="The line length where the formatter would wrap (not enforced)",
    )

    @property
    def indent_unit(self) -> str:
        return " " * self.tab_width

    @classmethod
    def coerce(cls, value: Union["FormatOptions", Mapping[str, Any], None]) -> "FormatOptions":
        """Build options from ``None``, a mapping, or an existing instance.

        Raises:
            FormatOptionsError: If a recognized option has an invalid value.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise FormatOptionsError(
                f"Invalid formatting options: {problems}",
                hint="tabWidth and printWidth must be positive integers",
            ) from exc


@dataclass
class FormattedResult:
    """Result of formatting one document."""

    formatted_text: str
    is_changed: bool
    path: Optional[str] = None


Stage = Callable[[str, FormatOptions], str]

STAGES: List[Tuple[str, Stage]] = [
    ("preprocess", lambda text, options: preprocess(text)),
    ("indent", lambda text, options: indent_text(text, options.tab_width)),
    ("normalize", lambda text, options: normalize_tokens(text)),
    ("reindent", lambda text, options: reindent_control_lines(text, options.tab_width)),
    ("cleanup", lambda text, options: final_cleanup(text)),
]


class ModelicaFormatter:
    """
    Line-oriented formatter for Modelica (``.mo``) files.

    The formatter:
    1. Repairs line endings, comment markers and known identifier spellings
    2. Re-indents every line with a forward state machine
    3. Normalizes operator, sign, range and blank-line spacing
    4. Pins control keyword lines to one level below their section header
    5. Re-applies sign and identifier fixes disturbed by steps 3 and 4

    ``print_width`` is accepted for host compatibility but no line is ever
    wrapped.
    """

    def __init__(self, options: Union[FormatOptions, Mapping[str, Any], None] = None):
        self.options = FormatOptions.coerce(options)

    def format(self, source_text: str) -> str:
        """Return the formatted version of ``source_text``."""
        text = source_text
        for name, stage in STAGES:
            updated = stage(text, self.options)
            log_stage_event(
                stage=name,
                changed=updated != text,
                line_count=updated.count("\n") + 1,
                logger=logger,
            )
            text = updated
        return text

    def format_document(self, source_text: str, path: Optional[str] = None) -> FormattedResult:
        """
        Format a complete Modelica document.

        Args:
            source_text: The source code to format
            path: Path of the document, recorded on the result

        Returns:
            FormattedResult with formatted text and change status
        """
        formatted_text = self.format(source_text)
        return FormattedResult(
            formatted_text=formatted_text,
            is_changed=formatted_text != source_text,
            path=path,
        )


def format_text(text: str, options: Union[FormatOptions, Mapping[str, Any], None] = None) -> str:
    """Format ``text`` with ``options`` (``tabWidth`` 2 and ``printWidth`` 80 by default)."""
    return ModelicaFormatter(options).format(text)


__all__ = [
    "FormatOptions",
    "FormattedResult",
    "ModelicaFormatter",
    "STAGES",
    "format_text",
]
