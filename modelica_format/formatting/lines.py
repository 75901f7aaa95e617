"""Physical line model and the keyword classifiers shared by the line passes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class SectionKind(Enum):
    """Part of a class body that is currently being scanned."""

    NONE = "none"
    EQUATION = "equation"
    ALGORITHM = "algorithm"
    INITIAL_EQUATION = "initial equation"
    INITIAL_ALGORITHM = "initial algorithm"

    @property
    def is_active(self) -> bool:
        return self is not SectionKind.NONE


SECTION_KEYWORDS: Dict[str, SectionKind] = {
    "equation": SectionKind.EQUATION,
    "initial equation": SectionKind.INITIAL_EQUATION,
    "algorithm": SectionKind.ALGORITHM,
    "initial algorithm": SectionKind.INITIAL_ALGORITHM,
}

CLASS_END_KEYWORDS = frozenset({"end", "end;"})
VISIBILITY_KEYWORDS = frozenset({"public", "protected"})

CLASS_KEYWORDS: Tuple[str, ...] = (
    "model",
    "block",
    "package",
    "function",
    "record",
    "connector",
    "class",
    "type",
)
CLASS_PREFIXES: Tuple[str, ...] = (
    "partial",
    "encapsulated",
    "expandable",
    "operator",
    "pure",
    "impure",
)
CONTROL_KINDS: Tuple[str, ...] = ("if", "when", "for", "while")

_CLASS_START = re.compile(
    r"^(?:(?:" + "|".join(CLASS_PREFIXES) + r")\s+)*"
    r"(?:" + "|".join(CLASS_KEYWORDS) + r") "
)
# ``model B = A(k=2);`` declares a class without opening a body.
_SHORT_CLASS = re.compile(r"^[^=;]*?\b(?:" + "|".join(CLASS_KEYWORDS) + r")\s+\w+\s*=")
_CONTROL_END = re.compile(r"^end (" + "|".join(CONTROL_KINDS) + r")\b")


@dataclass(frozen=True)
class SourceLine:
    """One physical line split into its trimmed content and original indent."""

    content: str
    leading: str = ""

    @classmethod
    def parse(cls, raw: str) -> "SourceLine":
        stripped = raw.lstrip()
        return cls(content=stripped.rstrip(), leading=raw[: len(raw) - len(stripped)])

    @property
    def is_blank(self) -> bool:
        return not self.content

    @property
    def is_comment(self) -> bool:
        return self.content.startswith("//")

    def continues_statement(self) -> bool:
        """True when the next physical line belongs to this line's statement."""
        return self.content.endswith(("(", ","))


def split_lines(text: str) -> List[SourceLine]:
    return [SourceLine.parse(raw) for raw in text.split("\n")]


def section_kind_of(content: str) -> Optional[SectionKind]:
    return SECTION_KEYWORDS.get(content)


def is_class_start(content: str) -> bool:
    return bool(_CLASS_START.match(content)) and not _SHORT_CLASS.match(content)


def control_end_kind(content: str) -> Optional[str]:
    match = _CONTROL_END.match(content)
    return match.group(1) if match else None


def is_class_terminator(content: str) -> bool:
    return content.startswith("end ") and control_end_kind(content) is None


def control_opener_kind(content: str) -> Optional[str]:
    """Return the block kind when ``content`` opens an if/when/for/while block."""
    if content.startswith(("if ", "when ")) and content.endswith("then"):
        return content.split(" ", 1)[0]
    if content.startswith(("for ", "while ")) and content.endswith("loop"):
        return content.split(" ", 1)[0]
    return None


def is_branch_line(content: str) -> bool:
    return content == "else" or content.startswith(("elseif ", "elsewhen "))


def is_control_keyword_line(content: str) -> bool:
    """Lines whose indentation the corrective pass pins to the section."""
    if content.startswith(("if ", "when ")) and content.endswith("then"):
        return True
    return is_branch_line(content) or control_end_kind(content) is not None


def ends_section(content: str) -> bool:
    return (
        content in CLASS_END_KEYWORDS
        or content in VISIBILITY_KEYWORDS
        or is_class_terminator(content)
    )


__all__ = [
    "SectionKind",
    "SourceLine",
    "SECTION_KEYWORDS",
    "CLASS_END_KEYWORDS",
    "VISIBILITY_KEYWORDS",
    "CLASS_KEYWORDS",
    "CLASS_PREFIXES",
    "CONTROL_KINDS",
    "split_lines",
    "section_kind_of",
    "is_class_start",
    "is_class_terminator",
    "control_opener_kind",
    "control_end_kind",
    "is_branch_line",
    "is_control_keyword_line",
    "ends_section",
]
