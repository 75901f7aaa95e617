"""
Line-oriented formatter for Modelica source files.

This package provides the formatting pipeline:
1. ``preprocess`` repairs line endings, comment markers and identifier spellings
2. ``indentation`` re-indents lines with an explicit scan state
3. ``rules`` applies the ordered spacing and blank-line substitutions
4. ``corrective`` pins control keyword lines to their section
5. ``cleanup`` re-applies the fixes disturbed by steps 3 and 4
"""

from __future__ import annotations

__all__ = [
    "FormatOptions",
    "FormattedResult",
    "ModelicaFormatter",
    "format_text",
    "IndentContext",
    "ControlBlockFrame",
    "SectionKind",
    "SourceLine",
    "indent_line",
    "indent_text",
    "normalize_tokens",
    "reindent_control_lines",
    "preprocess",
    "final_cleanup",
]

from .cleanup import final_cleanup
from .core import FormatOptions, FormattedResult, ModelicaFormatter, format_text
from .corrective import reindent_control_lines
from .indentation import ControlBlockFrame, IndentContext, indent_line, indent_text
from .lines import SectionKind, SourceLine
from .preprocess import preprocess
from .rules import normalize_tokens
