"""Tests for the final cleanup pass."""

import pytest

from modelica_format.formatting.cleanup import final_cleanup, strip_trailing_whitespace


@pytest.mark.parametrize(
    "source, expected",
    [
        ("x = f( - 1)", "x = f(-1)"),
        ("x = a[ - 2]", "x = a[-2]"),
        ("x = g(a,  -  3)", "x = g(a, -3)"),
        ("x =  - 4", "x = -4"),
        ("x = 1e - 5", "x = 1e-5"),
        ("x = 1E + 5", "x = 1E+5"),
        ("x = 3 - 2", "x = 3 - 2"),
        ("x = nUniShc - 1", "x = nUniShc-1"),
        ("y = (1 - ratCycShc)", "y = (1-ratCycShc)"),
        ("z = (nUniShc - 2 + ratCycShc)", "z = (nUniShc-2 + ratCycShc)"),
        ("x = 1; / / done", "x = 1; // done"),
    ],
)
def test_final_cleanup(source, expected):
    assert final_cleanup(source) == expected


def test_comments_are_not_rewritten():
    assert final_cleanup("// f( - 1)") == "// f( - 1)"


def test_trailing_whitespace():
    assert strip_trailing_whitespace("a  \nb\t\n  \n") == "a\nb\n\n"
