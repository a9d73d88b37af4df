from __future__ import annotations

from typing import List, Optional

from .models import Issue, SkippedQuestion


class AikenParseError(Exception):
    """Whole-call failure. Per-question problems are reported as data, not raised."""

    code = "parse_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInput(AikenParseError):
    code = "empty_input"

    def __init__(self, message: str = "The uploaded text is empty."):
        super().__init__(message)


class NoValidQuestions(AikenParseError):
    code = "no_valid_questions"

    def __init__(
        self,
        skipped: Optional[List[SkippedQuestion]] = None,
        global_issues: Optional[List[Issue]] = None,
        message: str = "No valid questions were found in the uploaded text.",
    ):
        super().__init__(message)
        self.skipped = list(skipped or [])
        self.global_issues = list(global_issues or [])
