# services/quizbank/aiken/lines.py
"""
Line normalization and classification.

Every line is turned into exactly one of four kinds:

    Blank            -> nothing on the line
    OptionLine       -> "B. Paris", "b) Paris", "C: Berlin", "D- Rome"
    AnswerDirective  -> "ANSWER: B", "ans = A, C", "Correct answer: Paris"
    TextLine         -> stem text or a wrapped continuation

Option and directive patterns are tried before falling back to text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Union

from .models import Line

BOM = "\ufeff"

_OPTION_RE = re.compile(r"^([A-Za-z])[.):-]\s*(.+)$")
_DIRECTIVE_RE = re.compile(
    r"^(ANS|ANSWER|CORRECT ANSWER|ANSWER KEY)\s*[:=]\s*(.+)$", re.IGNORECASE
)
_NUMBER_PREFIX_RE = re.compile(r"^\d+\s*[).:-]\s+")


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class OptionLine:
    label: str
    content: str


@dataclass(frozen=True)
class AnswerDirective:
    raw: str


@dataclass(frozen=True)
class TextLine:
    content: str


LineKind = Union[Blank, OptionLine, AnswerDirective, TextLine]


def normalize_lines(text: str) -> List[Line]:
    if text.startswith(BOM):
        text = text[len(BOM) :]
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    lines: List[Line] = []
    for idx, raw in enumerate(text.split("\n"), 1):
        trimmed = raw.strip()
        indented = bool(trimmed) and raw[:1].isspace()
        lines.append(Line(number=idx, raw=raw, trimmed=trimmed, has_leading_indent=indented))
    return lines


def classify(line: Line) -> LineKind:
    s = line.trimmed
    if not s:
        return Blank()

    m = _OPTION_RE.match(s)
    if m:
        return OptionLine(label=m.group(1).upper(), content=m.group(2).strip())

    m = _DIRECTIVE_RE.match(s)
    if m:
        return AnswerDirective(raw=m.group(2))

    return TextLine(content=s)


def strip_number_prefix(text: str) -> str:
    """Drop a leading "1)" / "2." / "3 -" question number."""
    return _NUMBER_PREFIX_RE.sub("", text, count=1)
