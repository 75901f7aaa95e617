"""Test configuration and fixtures for formatting tests."""

import pytest

from modelica_format.formatting import FormatOptions, ModelicaFormatter


# Sample sources paired with their expected output at tab width 2
SIMPLE_MODEL = "model A\nequation\nx = 1;\nend A;\n"
SIMPLE_MODEL_FORMATTED = "model A\n  equation\n\n    x = 1;\nend A;\n"

IF_ELSE_MODEL = """model A
equation
if x > 0 then
y = 1;
else
y = -1;
end if;
end A;
"""
IF_ELSE_MODEL_FORMATTED = """model A
  equation

    if x > 0 then
      y = 1;
    else
      y = -1;
    end if;
end A;
"""

NESTED_IF_MODEL = """model A
equation
if a then
if b then
x = 1;
end if;
end if;
end A;
"""
NESTED_IF_MODEL_FORMATTED = """model A
  equation

    if a then
    if b then
        x = 1;
    end if;
    end if;
end A;
"""

FOR_LOOP_MODEL = """model A
algorithm
for i in 1:3 loop
x := x + i;
end for;
end A;
"""
FOR_LOOP_MODEL_FORMATTED = """model A
  algorithm

    for i in 1:3 loop
      x := x + i;
    end for;
end A;
"""

DECLARATIONS_MODEL = """model A
parameter Real k=2;
Real x(start=0);
equation
der(x) = -k*x;
end A;
"""
DECLARATIONS_MODEL_FORMATTED = """model A
  parameter Real k = 2;
  Real x(start = 0);
  equation

    der(x) = -k * x;
end A;
"""

WITHIN_MODEL = "within Modelica.Blocks;\nmodel A\nend A;\n"
WITHIN_MODEL_FORMATTED = "within Modelica.Blocks;\n\nmodel A\nend A;\n"

FORMATTED_SAMPLES = [
    pytest.param(SIMPLE_MODEL, SIMPLE_MODEL_FORMATTED, id="simple"),
    pytest.param(IF_ELSE_MODEL, IF_ELSE_MODEL_FORMATTED, id="if-else"),
    pytest.param(NESTED_IF_MODEL, NESTED_IF_MODEL_FORMATTED, id="nested-if"),
    pytest.param(FOR_LOOP_MODEL, FOR_LOOP_MODEL_FORMATTED, id="for-loop"),
    pytest.param(DECLARATIONS_MODEL, DECLARATIONS_MODEL_FORMATTED, id="declarations"),
    pytest.param(WITHIN_MODEL, WITHIN_MODEL_FORMATTED, id="within"),
]

# Vocabulary for randomized documents; control keywords are deliberately
# left unbalanced.
FUZZ_LINES = [
    "model M",
    "block B",
    "end M;",
    "end;",
    "equation",
    "algorithm",
    "initial equation",
    "public",
    "protected",
    "parameter Real k=2;",
    "Real x(start=0);",
    "if x > 0 then",
    "elseif y<1 then",
    "else",
    "end if;",
    "when time>1 then",
    "elsewhen y then",
    "end when;",
    "for i in 1 : n loop",
    "end for;",
    "while z<3 loop",
    "end while;",
    "x = -1;",
    "y := a*b+c;",
    "y=2*+k;",
    "+b;",
    "z = f(",
    "a,",
    "b);",
    "v = 1e-5 - w;",
    "// comment with a - b",
    'annotation (Documentation(info="<html>a-b</html>"));',
    "",
    "   ",
]


@pytest.fixture
def formatter():
    """Formatter with default options."""
    return ModelicaFormatter(FormatOptions())


@pytest.fixture
def wide_formatter():
    """Formatter indenting four spaces per level."""
    return ModelicaFormatter({"tabWidth": 4})
