# services/quizbank/aiken/parser.py
from __future__ import annotations

import logging

from .accumulator import Accumulation, accumulate
from .errors import EmptyInput, NoValidQuestions
from .lines import BOM, normalize_lines
from .models import ParseOutcome, PreviewOutcome

logger = logging.getLogger(__name__)


def _run(text: str) -> Accumulation:
    body = text or ""
    if body.startswith(BOM):
        body = body[len(BOM) :]
    if not body.strip():
        raise EmptyInput()

    acc = accumulate(normalize_lines(text))
    logger.info(
        "Aiken parse: %d accepted, %d skipped, %d global issue(s)",
        len(acc.questions),
        len(acc.skipped),
        len(acc.global_issues),
    )
    if not acc.questions:
        raise NoValidQuestions(skipped=acc.skipped, global_issues=acc.global_issues)
    return acc


def parse_aiken(text: str) -> ParseOutcome:
    """
    Import mode. Returns the accepted questions together with everything that
    was skipped; raises EmptyInput / NoValidQuestions when nothing is usable.
    """
    acc = _run(text)
    return ParseOutcome(
        questions=acc.questions,
        skipped=acc.skipped,
        global_issues=acc.global_issues,
    )


def preview_aiken(text: str) -> PreviewOutcome:
    """Like parse_aiken, plus the source line span of every accepted question."""
    acc = _run(text)
    return PreviewOutcome(
        questions=acc.questions,
        skipped=acc.skipped,
        global_issues=acc.global_issues,
        diagnostics=acc.spans,
    )


def extract_segment(text: str, start_line: int, end_line: int) -> str:
    """
    Cut lines start_line..end_line (1-based, inclusive) out of `text`, using the
    same numbering the parser reports, so one question can be handed back for
    editing on its own.
    """
    if start_line < 1 or end_line < start_line:
        raise ValueError(f"invalid line span {start_line}-{end_line}")
    lines = normalize_lines(text or "")
    return "\n".join(line.raw for line in lines[start_line - 1 : end_line])
