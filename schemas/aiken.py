# services/quizbank/schemas/aiken.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from aiken.models import Issue, Question, QuestionSpan, SkippedQuestion

# ---------- Request ----------


class AikenTextRequest(BaseModel):
    text: str


# ---------- Import ----------


class ParseResponse(BaseModel):
    ok: bool
    # empty_input | no_valid_questions | too_large, only set when ok is False
    error: Optional[str] = None
    message: Optional[str] = None
    questions: List[Question] = []
    skipped: List[SkippedQuestion] = []
    global_issues: List[Issue] = []


# ---------- Preview ----------


class PreviewResponse(ParseResponse):
    diagnostics: List[QuestionSpan] = []
