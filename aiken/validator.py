from __future__ import annotations

import logging
from typing import List, Union

from .models import Issue, Option, OptionLine, Question, RawBlock, SkippedQuestion

logger = logging.getLogger(__name__)

MSG_BLANK_OPTION = "Option {label} is blank."
MSG_EMPTY_STEM = "Question text is empty."
MSG_TOO_FEW_OPTIONS = "Each question must include at least two options."
MSG_NO_CORRECT = "Each question must specify a correct answer via the ANSWER directive."

MIN_OPTIONS = 2


def option_lines(block: RawBlock) -> List[OptionLine]:
    return [
        OptionLine(label=o.label, line_number=o.line_number)
        for o in block.options
        if o.line_number is not None
    ]


def finalize_block(block: RawBlock) -> Union[Question, SkippedQuestion]:
    """
    Turn a closed block into a Question, or a SkippedQuestion when the block
    collected any issue (during accumulation or here). Every check runs so
    the caller sees all problems at once.
    """
    issues: List[Issue] = list(block.issues)
    stem = block.stem.strip()

    resolved = []
    for opt in block.options:
        content = opt.content.strip()
        if not content:
            issues.append(
                Issue(message=MSG_BLANK_OPTION.format(label=opt.label), line_number=opt.line_number)
            )
            continue
        resolved.append((opt, content))

    if not stem:
        issues.append(Issue(message=MSG_EMPTY_STEM, line_number=block.start_line))
    if len(resolved) < MIN_OPTIONS:
        issues.append(Issue(message=MSG_TOO_FEW_OPTIONS, line_number=block.start_line))
    if not any(opt.is_correct for opt, _ in resolved):
        issues.append(Issue(message=MSG_NO_CORRECT, line_number=block.last_line))

    if issues:
        logger.debug(
            "Skipping question at lines %d-%d: %s",
            block.start_line,
            block.last_line,
            "; ".join(i.message for i in issues),
        )
        return SkippedQuestion(
            stem_snippet=stem,
            start_line=block.start_line,
            end_line=block.last_line,
            option_lines=option_lines(block),
            issues=issues,
        )

    return Question(
        stem=stem,
        options=[
            Option(label=opt.label, content=content, is_correct=opt.is_correct, order=idx)
            for idx, (opt, content) in enumerate(resolved)
        ],
    )
