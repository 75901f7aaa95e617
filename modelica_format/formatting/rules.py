"""Ordered whole-text substitution rules applied after indentation.

Rule order is significant: later rules re-tighten spacing that earlier rules
introduce (``1e-5`` is split by the subtraction rule and rejoined by the
exponent rule). All spacing patterns match horizontal whitespace only, so a
rule never joins two physical lines. String literals and comments are masked
while the rules run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple, Union

Replacement = Union[str, Callable[["re.Match[str]"], str]]

_SECTION_HEADER = (
    r"(?:initial[ \t]+)?(?:equation|algorithm)|public|protected"
)


@dataclass(frozen=True)
class SubstitutionRule:
    """A named regular-expression rewrite over the full text."""

    name: str
    pattern: "re.Pattern[str]"
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


def regex_rule(name: str, pattern: str, replacement: Replacement, flags: int = 0) -> SubstitutionRule:
    return SubstitutionRule(name=name, pattern=re.compile(pattern, flags), replacement=replacement)


WITHIN_RULES: List[SubstitutionRule] = [
    regex_rule("within-spacing", r"^([ \t]*)within[ \t]+([^;\n]*?)[ \t]*;", r"\1within \2;", re.MULTILINE),
    regex_rule(
        "within-blank-line",
        r"^([ \t]*within\b[^;\n]*;)[ \t]*\n(?:[ \t]*\n)*(?=[ \t]*\S)",
        "\\1\n\n",
        re.MULTILINE,
    ),
]

SPACING_RULES: List[SubstitutionRule] = [
    regex_rule("comma-space", r",(?=\S)", ", "),
    # ``//``, ``/*`` and ``*/`` are comment markers, not operators. A lone
    # ``=`` or ``>`` never matches the tail of a compound operator.
    regex_rule(
        "operator-spacing",
        r"(?<=\S)[ \t]*(:=|==|<=|>=|<>|(?<![/*])/(?![/*])|(?<!/)\*(?!/)|\+|<|(?<![:=<>])=|(?<!<)>)[ \t]*",
        r" \1 ",
    ),
    # Continuation lines may open with a binary operator; the indent stays.
    regex_rule(
        "leading-operator-spacing",
        r"^([ \t]*)(:=|==|<=|>=|<>|[+*/=<>])[ \t]*(?=\S)",
        r"\1\2 ",
        re.MULTILINE,
    ),
    # Adjacent operators (``x=+1``) each receive padding; keep one space.
    regex_rule("operator-run-spacing", r"(?<=[+*/=<>])[ \t]{2,}(?=[+*/=<>])", " "),
]

SUBTRACTION_RULE = regex_rule("minus-subtraction", r"(?<=[\w)\]}])[ \t]*-[ \t]*", " - ")

SIGN_RULES: List[SubstitutionRule] = [
    regex_rule("minus-literal-sign", r"(^|[,(\[{=])([ \t]*)-[ \t]+(?=\d)", r"\1\2-", re.MULTILINE),
    regex_rule("minus-negation", r"([*/+<>])([ \t]*)-[ \t]+(?=\d)", r"\1\2-"),
    regex_rule("minus-exponent", r"\b(\d+(?:\.\d*)?[eE])[ \t]*-[ \t]*(?=\d)", r"\1-"),
]

MINUS_RULES: List[SubstitutionRule] = [SUBTRACTION_RULE, *SIGN_RULES]

ANNOTATION_RULES: List[SubstitutionRule] = [
    regex_rule("annotation-paren", r"\bannotation[ \t]*\([ \t]*", "annotation("),
]

RANGE_RULES: List[SubstitutionRule] = [
    regex_rule("range-bare-colon", r"\[[ \t]*:[ \t]*\]", "[:]"),
    regex_rule(
        "range-index",
        r"(\w+)[ \t]*\[[ \t]*(\d+)[ \t]*:[ \t]*(\d+)[ \t]*\]",
        r"\1[\2:\3]",
    ),
    regex_rule("range-all", r"(\w+)[ \t]*\[:\]", r"\1[:]"),
    regex_rule(
        "range-for-header",
        r"\bfor[ \t]+(\w+)[ \t]+in[ \t]+(\d+)[ \t]*:[ \t]*(\d+)",
        r"for \1 in \2:\3",
    ),
    regex_rule("range-colon", r"(?<=[\w)])[ \t]*:[ \t]*(?=[\w(])", ":"),
    regex_rule("bracket-negative", r"([\[{])[ \t]*-[ \t]*(?=\d)", r"\1-"),
]

KEYWORD_RULES: List[SubstitutionRule] = [
    regex_rule("prefix-keyword-space", r"\b(parameter|input|output|constant)\b[ \t]*(?=\w)", r"\1 "),
]

BLANK_LINE_RULES: List[SubstitutionRule] = [
    regex_rule("collapse-blank-lines", r"\n(?:[ \t]*\n){2,}", "\n\n"),
    regex_rule(
        "section-header-blank-line",
        r"^([ \t]*(?:" + _SECTION_HEADER + r"))[ \t]*\n(?:[ \t]*\n)*(?=[ \t]*\S)",
        "\\1\n\n",
        re.MULTILINE,
    ),
]

NORMALIZATION_RULES: List[SubstitutionRule] = [
    *WITHIN_RULES,
    *SPACING_RULES,
    *MINUS_RULES,
    *ANNOTATION_RULES,
    *RANGE_RULES,
    *KEYWORD_RULES,
    *BLANK_LINE_RULES,
]


_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"|//[^\n]*|/\*.*?\*/', re.DOTALL)
_PLACEHOLDER = re.compile("\ue000(\\d+)\ue001")


def mask_literals(text: str) -> Tuple[str, List[str]]:
    """Swap string literals and comments for inert placeholders.

    Placeholders contain no word characters at their edges, so no rule can
    match across or inside them.
    """
    literals: List[str] = []

    def _stash(match: "re.Match[str]") -> str:
        literals.append(match.group(0))
        return f"\ue000{len(literals) - 1}\ue001"

    return _LITERAL.sub(_stash, text), literals


def unmask_literals(text: str, literals: Sequence[str]) -> str:
    if not literals:
        return text
    return _PLACEHOLDER.sub(lambda match: literals[int(match.group(1))], text)


def apply_rules(text: str, rules: Sequence[SubstitutionRule], *, protect_literals: bool = True) -> str:
    """Apply ``rules`` in order, leaving strings and comments untouched by default."""
    literals: List[str] = []
    if protect_literals:
        text, literals = mask_literals(text)
    for rule in rules:
        text = rule.apply(text)
    return unmask_literals(text, literals)


def normalize_tokens(text: str) -> str:
    """Run the full normalization table over indented text."""
    return apply_rules(text, NORMALIZATION_RULES)


__all__ = [
    "SubstitutionRule",
    "regex_rule",
    "WITHIN_RULES",
    "SPACING_RULES",
    "SUBTRACTION_RULE",
    "SIGN_RULES",
    "MINUS_RULES",
    "ANNOTATION_RULES",
    "RANGE_RULES",
    "KEYWORD_RULES",
    "BLANK_LINE_RULES",
    "NORMALIZATION_RULES",
    "mask_literals",
    "unmask_literals",
    "apply_rules",
    "normalize_tokens",
]
