"""Text fixes applied before the source is split into lines."""

from __future__ import annotations

import re
from typing import List, Tuple

# Identifiers whose integer offsets are written without spaces, e.g. ``nUniShc-1``.
TIGHT_IDENTIFIERS: Tuple[str, ...] = ("nUniShc", "nUniHea", "nUniCoo")

_LINE_ENDING = re.compile(r"\r\n?")
_SPLIT_COMMENT = re.compile(r"/[ \t]+/")

IDENTIFIER_TIGHTENINGS: List[Tuple[re.Pattern, str]] = [
    (
        re.compile(r"\b(" + "|".join(TIGHT_IDENTIFIERS) + r")[ \t]*-[ \t]*(\d+)"),
        r"\1-\2",
    ),
    (re.compile(r"\([ \t]*1[ \t]*-[ \t]*ratCycShc[ \t]*\)"), "(1-ratCycShc)"),
    (
        re.compile(r"\([ \t]*(nUniShc-\d+)[ \t]*\+[ \t]*ratCycShc[ \t]*\)"),
        r"(\1 + ratCycShc)",
    ),
]


def normalize_line_endings(text: str) -> str:
    return _LINE_ENDING.sub("\n", text)


def repair_comment_markers(text: str) -> str:
    """Collapse ``/ /`` back into a ``//`` line comment marker."""
    return _SPLIT_COMMENT.sub("//", text)


def apply_identifier_tightenings(text: str) -> str:
    for pattern, replacement in IDENTIFIER_TIGHTENINGS:
        text = pattern.sub(replacement, text)
    return text


def preprocess(text: str) -> str:
    """Prepare raw file text for the indentation pass.

    General minus-sign spacing is left to the token normalizer; only the
    fixed identifier table is applied here.
    """
    text = normalize_line_endings(text)
    text = repair_comment_markers(text)
    return apply_identifier_tightenings(text)


__all__ = [
    "TIGHT_IDENTIFIERS",
    "IDENTIFIER_TIGHTENINGS",
    "normalize_line_endings",
    "repair_comment_markers",
    "apply_identifier_tightenings",
    "preprocess",
]
