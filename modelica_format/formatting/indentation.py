"""Forward indentation pass.

The pass walks the physical lines once. All scan state lives in an immutable
:class:`IndentContext` that :func:`indent_line` receives and returns, so a
single step can be exercised on its own::

    ctx, text = indent_line(IndentContext(), SourceLine.parse("model A"), None, "  ")

Control-block frames only exist while an equation or algorithm section is
active; every transition out of a section empties the stack.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from modelica_format.observability.logging import get_logger

from .lines import (
    CLASS_END_KEYWORDS,
    VISIBILITY_KEYWORDS,
    SectionKind,
    SourceLine,
    control_end_kind,
    control_opener_kind,
    is_branch_line,
    is_class_start,
    is_class_terminator,
    section_kind_of,
    split_lines,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ControlBlockFrame:
    """An open if/when/for/while block and the level its opener was emitted at."""

    kind: str
    level: int


@dataclass(frozen=True)
class IndentContext:
    """Scan state threaded through the indentation pass."""

    level: int = 0
    section: SectionKind = SectionKind.NONE
    frames: Tuple[ControlBlockFrame, ...] = ()

    @property
    def top(self) -> Optional[ControlBlockFrame]:
        return self.frames[-1] if self.frames else None

    def dedent(self) -> "IndentContext":
        return replace(self, level=max(0, self.level - 1))

    def enter_section(self, section: SectionKind) -> "IndentContext":
        return replace(self, section=section, frames=())

    def leave_section(self) -> "IndentContext":
        return replace(self, section=SectionKind.NONE, frames=())

    def push(self, kind: str) -> "IndentContext":
        frame = ControlBlockFrame(kind=kind, level=self.level + 1)
        return replace(self, level=self.level + 1, frames=self.frames + (frame,))

    def pop(self) -> "IndentContext":
        return replace(self, level=max(0, self.level - 1), frames=self.frames[:-1])


def _emit(indent_unit: str, level: int, content: str) -> str:
    return indent_unit * level + content


def indent_line(
    context: IndentContext,
    line: SourceLine,
    previous: Optional[SourceLine],
    indent_unit: str,
) -> Tuple[IndentContext, str]:
    """Compute the output for one line and the state for the next one."""
    content = line.content
    if line.is_blank:
        return context, ""

    section = section_kind_of(content)
    if section is not None:
        return context.enter_section(section), _emit(indent_unit, context.level, content)

    if content in CLASS_END_KEYWORDS or content in VISIBILITY_KEYWORDS:
        if content in CLASS_END_KEYWORDS:
            context = context.dedent()
        context = context.leave_section()
        return context, _emit(indent_unit, context.level, content)

    if is_class_start(content):
        emitted = _emit(indent_unit, context.level, content)
        context = replace(context.leave_section(), level=context.level + 1)
        return context, emitted

    if is_class_terminator(content):
        context = context.dedent().leave_section()
        return context, _emit(indent_unit, context.level, content)

    if not context.section.is_active:
        return context, _emit(indent_unit, context.level, content)

    if line.is_comment:
        return context, _emit(indent_unit, context.level + 1, content)

    kind = control_opener_kind(content)
    if kind is not None:
        context = context.push(kind)
        return context, _emit(indent_unit, context.level, content)

    if is_branch_line(content):
        top = context.top
        if top is None:
            logger.debug("Branch line %r has no open control block; keeping level %d", content, context.level)
        else:
            context = replace(context, level=top.level)
        return context, _emit(indent_unit, context.level, content)

    if control_end_kind(content) is not None:
        if context.frames:
            context = context.pop()
        else:
            logger.debug("Block terminator %r has no open control block", content)
        return context, _emit(indent_unit, context.level, content)

    if previous is not None and previous.continues_statement():
        return context, _emit(indent_unit, context.level + 2, content)

    return context, _emit(indent_unit, context.level + 1, content)


def indent_text(text: str, tab_width: int = 2) -> str:
    """Re-indent every line of ``text`` with ``tab_width`` spaces per level."""
    indent_unit = " " * tab_width
    context = IndentContext()
    previous: Optional[SourceLine] = None
    result: List[str] = []
    for line in split_lines(text):
        context, emitted = indent_line(context, line, previous, indent_unit)
        result.append(emitted)
        previous = line
    return "\n".join(result)


__all__ = ["ControlBlockFrame", "IndentContext", "indent_line", "indent_text"]
