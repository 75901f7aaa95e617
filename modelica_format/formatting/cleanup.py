"""Final pass that repairs artifacts left by normalization and re-indentation."""

from __future__ import annotations

import re
from typing import List

from .preprocess import apply_identifier_tightenings, repair_comment_markers
from .rules import SIGN_RULES, SubstitutionRule, regex_rule, apply_rules

SIGN_CLEANUP_RULES: List[SubstitutionRule] = [
    *SIGN_RULES,
    regex_rule("sign-single-space", r"(?<=\S)[ \t]+-(?=\d)", " -"),
    regex_rule("sign-after-paren", r"\([ \t]*-[ \t]*(?=\d)", "(-"),
    regex_rule("sign-after-bracket", r"\[[ \t]*-[ \t]*(?=\d)", "[-"),
    regex_rule("sign-after-comma", r",[ \t]*-[ \t]*(?=\d)", ", -"),
    regex_rule("sign-after-equals", r"=[ \t]*-[ \t]*(?=\d)", "= -"),
    regex_rule("exponent-sign", r"\b(\d+(?:\.\d*)?[eE])[ \t]*([-+])[ \t]*(?=\d)", r"\1\2"),
]

_TRAILING_WHITESPACE = re.compile(r"[ \t]+$", re.MULTILINE)


def strip_trailing_whitespace(text: str) -> str:
    return _TRAILING_WHITESPACE.sub("", text)


def final_cleanup(text: str) -> str:
    text = repair_comment_markers(text)
    text = apply_rules(text, SIGN_CLEANUP_RULES)
    text = apply_identifier_tightenings(text)
    return strip_trailing_whitespace(text)


__all__ = ["SIGN_CLEANUP_RULES", "strip_trailing_whitespace", "final_cleanup"]
