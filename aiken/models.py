# services/quizbank/aiken/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

# ---------- In-progress (owned by a single parse call) ----------


@dataclass(frozen=True)
class Line:
    number: int
    raw: str
    trimmed: str
    has_leading_indent: bool


@dataclass
class RawOption:
    label: str
    content: str
    is_correct: bool = False
    line_number: Optional[int] = None


@dataclass
class RawBlock:
    stem: str
    start_line: int
    last_line: int
    options: List[RawOption] = field(default_factory=list)
    issues: List["Issue"] = field(default_factory=list)

    def add_issue(self, message: str, line_number: Optional[int] = None) -> None:
        self.issues.append(Issue(message=message, line_number=line_number))


# ---------- Finalized ----------


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Issue(_Frozen):
    message: str
    line_number: Optional[int] = None


class Option(_Frozen):
    label: str
    content: str
    is_correct: bool
    order: int


class Question(_Frozen):
    stem: str
    options: List[Option]

    @property
    def correct_labels(self) -> List[str]:
        return [o.label for o in self.options if o.is_correct]


class OptionLine(_Frozen):
    label: str
    line_number: int


class SkippedQuestion(_Frozen):
    stem_snippet: str
    start_line: int
    end_line: int
    option_lines: List[OptionLine] = []
    issues: List[Issue] = []


class QuestionSpan(_Frozen):
    question_index: int
    start_line: int
    end_line: int
    option_lines: List[OptionLine] = []


class ParseOutcome(_Frozen):
    questions: List[Question]
    skipped: List[SkippedQuestion] = []
    global_issues: List[Issue] = []


class PreviewOutcome(ParseOutcome):
    # one span per entry of `questions`, same order
    diagnostics: List[QuestionSpan] = []
