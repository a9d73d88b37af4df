from .errors import AikenParseError, EmptyInput, NoValidQuestions
from .models import (
    Issue,
    Option,
    OptionLine,
    ParseOutcome,
    PreviewOutcome,
    Question,
    QuestionSpan,
    SkippedQuestion,
)
from .parser import extract_segment, parse_aiken, preview_aiken

__all__ = [
    "AikenParseError",
    "EmptyInput",
    "NoValidQuestions",
    "Issue",
    "Option",
    "OptionLine",
    "ParseOutcome",
    "PreviewOutcome",
    "Question",
    "QuestionSpan",
    "SkippedQuestion",
    "extract_segment",
    "parse_aiken",
    "preview_aiken",
]
