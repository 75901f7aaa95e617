"""Second indentation pass over normalized text.

Control keyword lines inside an equation or algorithm section are pinned to
exactly one level below the section header, whatever their nesting depth.
Blocks nested more than one level deep therefore end up sharing a single
indent level; the forward pass's body indentation is left as it was.
"""

from __future__ import annotations

from typing import List

from .lines import SourceLine, ends_section, is_control_keyword_line, section_kind_of


def section_level(header: SourceLine, tab_width: int) -> int:
    """Indent level of a section header, measured from its own whitespace."""
    return len(header.leading) // tab_width


def reindent_control_lines(text: str, tab_width: int = 2) -> str:
    raw_lines = text.split("\n")
    result: List[str] = list(raw_lines)
    in_section = False
    header_level = 0

    for index, raw in enumerate(raw_lines):
        line = SourceLine.parse(raw)
        content = line.content
        if section_kind_of(content) is not None:
            in_section = True
            header_level = section_level(line, tab_width)
            continue
        if not in_section:
            continue
        if ends_section(content):
            in_section = False
            continue
        if is_control_keyword_line(content):
            result[index] = " " * ((header_level + 1) * tab_width) + content

    return "\n".join(result)


__all__ = ["section_level", "reindent_control_lines"]
