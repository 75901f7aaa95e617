"""Tests for the forward indentation pass."""

import logging

import pytest

from modelica_format.formatting.indentation import (
    ControlBlockFrame,
    IndentContext,
    indent_line,
    indent_text,
)
from modelica_format.formatting.lines import SectionKind, SourceLine

UNIT = "  "


def step(context, content, previous=None):
    prev = SourceLine.parse(previous) if previous is not None else None
    return indent_line(context, SourceLine.parse(content), prev, UNIT)


class TestIndentLine:
    """Single transitions of the scan state."""

    def test_blank_line_keeps_state(self):
        context = IndentContext(level=3)
        new_context, text = step(context, "   ")
        assert text == ""
        assert new_context is context

    def test_class_start_opens_level(self):
        context, text = step(IndentContext(), "model A")
        assert text == "model A"
        assert context.level == 1

    def test_class_prefixes_are_recognised(self):
        context, text = step(IndentContext(), "partial model A")
        assert context.level == 1
        context, text = step(IndentContext(), "encapsulated package P")
        assert context.level == 1

    def test_short_class_is_a_declaration(self):
        context, text = step(IndentContext(level=1), "type Angle = Real(unit=\"rad\");")
        assert text == '  type Angle = Real(unit="rad");'
        assert context.level == 1

    def test_section_keyword(self):
        context, text = step(IndentContext(level=1), "equation")
        assert text == "  equation"
        assert context.section is SectionKind.EQUATION
        assert context.level == 1

    def test_initial_section_keyword(self):
        context, _ = step(IndentContext(level=1), "initial algorithm")
        assert context.section is SectionKind.INITIAL_ALGORITHM

    def test_statement_in_section_is_indented_one_extra_level(self):
        context = IndentContext(level=1, section=SectionKind.EQUATION)
        _, text = step(context, "x = 1;")
        assert text == "    x = 1;"

    def test_declaration_outside_section(self):
        _, text = step(IndentContext(level=1), "Real x;")
        assert text == "  Real x;"

    def test_comment_in_section(self):
        context = IndentContext(level=1, section=SectionKind.EQUATION)
        _, text = step(context, "// note")
        assert text == "    // note"

    def test_opener_pushes_frame(self):
        context = IndentContext(level=1, section=SectionKind.ALGORITHM)
        context, text = step(context, "while x < 3 loop")
        assert text == "    while x < 3 loop"
        assert context.level == 2
        assert context.frames == (ControlBlockFrame(kind="while", level=2),)

    def test_branch_returns_to_opener_level(self):
        context = IndentContext(level=1, section=SectionKind.EQUATION)
        context, _ = step(context, "if a then")
        context, text = step(context, "elseif b then")
        assert text == "    elseif b then"
        assert context.level == 2

    def test_block_end_pops_frame(self):
        context = IndentContext(level=1, section=SectionKind.EQUATION)
        context, _ = step(context, "when a then")
        context, text = step(context, "end when;")
        assert context.frames == ()
        assert context.level == 1
        assert text == "  end when;"

    def test_block_end_with_empty_stack_is_logged(self, caplog):
        context = IndentContext(level=1, section=SectionKind.EQUATION)
        with caplog.at_level(logging.DEBUG, logger="modelica_format"):
            new_context, text = step(context, "end for;")
        assert new_context == context
        assert text == "  end for;"
        assert "no open control block" in caplog.text

    def test_else_with_empty_stack_keeps_level(self):
        context = IndentContext(level=1, section=SectionKind.EQUATION)
        new_context, text = step(context, "else")
        assert new_context.level == 1
        assert text == "  else"

    def test_continuation_line(self):
        context = IndentContext(level=1, section=SectionKind.EQUATION)
        _, text = step(context, "b);", previous="a,")
        assert text == "      b);"

    def test_class_terminator_leaves_section(self):
        context = IndentContext(
            level=2,
            section=SectionKind.EQUATION,
            frames=(ControlBlockFrame(kind="if", level=2),),
        )
        context, text = step(context, "end A;")
        assert text == "  end A;"
        assert context == IndentContext(level=1)

    @pytest.mark.parametrize("keyword", ["public", "protected"])
    def test_visibility_leaves_section(self, keyword):
        context = IndentContext(level=1, section=SectionKind.ALGORITHM)
        context, text = step(context, keyword)
        assert text == f"  {keyword}"
        assert context == IndentContext(level=1)

    def test_bare_end_dedents(self):
        context, text = step(IndentContext(level=1, section=SectionKind.EQUATION), "end;")
        assert text == "end;"
        assert context == IndentContext(level=0)

    def test_level_never_goes_negative(self):
        context, text = step(IndentContext(), "end A;")
        assert context.level == 0
        assert text == "end A;"


def test_indent_text_preserves_line_count():
    source = "model A\n\nequation\n  x=1;\n\nend A;"
    result = indent_text(source)
    assert result.split("\n") == ["model A", "", "  equation", "    x=1;", "", "end A;"]


def test_indent_text_tab_width():
    assert indent_text("model A\nReal x;\nend A;", tab_width=4) == "model A\n    Real x;\nend A;"
