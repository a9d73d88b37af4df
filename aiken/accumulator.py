# services/quizbank/aiken/accumulator.py
"""
Question accumulator: folds classified lines into question blocks.

There are two states. `NO_BLOCK` sits between questions; `InBlock` owns the
one block currently being built. `step()` consumes one line and returns the
next state. Finished blocks go through the validator and land in the sink,
so a broken question never stops the lines after it from being parsed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Union

from .lines import AnswerDirective, Blank, OptionLine, TextLine, classify, strip_number_prefix
from .models import Issue, Line, Question, QuestionSpan, RawBlock, RawOption, SkippedQuestion
from .resolver import resolve_answer
from .validator import finalize_block, option_lines

logger = logging.getLogger(__name__)

MSG_ANSWER_BEFORE_QUESTION = "ANSWER directive appeared before any question."
MSG_OPTION_BEFORE_QUESTION = "Option encountered before the question text."
MSG_ANSWER_BEFORE_OPTIONS = "ANSWER directive appeared before any options were defined."
MSG_UNKNOWN_OPTION = "ANSWER references option {label} which was not provided."
MSG_MISSING_LETTERS = "ANSWER directive is missing option letters."
MSG_MISSING_OPTIONS = "A question is missing answer options."


class NoBlock:
    def __repr__(self) -> str:
        return "NO_BLOCK"


NO_BLOCK = NoBlock()


@dataclass
class InBlock:
    block: RawBlock


State = Union[NoBlock, InBlock]


@dataclass
class Accumulation:
    questions: List[Question] = field(default_factory=list)
    spans: List[QuestionSpan] = field(default_factory=list)
    skipped: List[SkippedQuestion] = field(default_factory=list)
    global_issues: List[Issue] = field(default_factory=list)

    def close(self, block: RawBlock) -> None:
        result = finalize_block(block)
        if isinstance(result, Question):
            self.spans.append(
                QuestionSpan(
                    question_index=len(self.questions),
                    start_line=block.start_line,
                    end_line=block.last_line,
                    option_lines=option_lines(block),
                )
            )
            self.questions.append(result)
        else:
            self.skipped.append(result)


def _start_block(line: Line, content: str) -> InBlock:
    return InBlock(
        RawBlock(stem=strip_number_prefix(content), start_line=line.number, last_line=line.number)
    )


def _add_option(block: RawBlock, line: Line, kind: OptionLine) -> None:
    opt = RawOption(label=kind.label, content=kind.content, line_number=line.number)
    for idx, existing in enumerate(block.options):
        if existing.label == kind.label:
            # duplicate label: the later line replaces the earlier one in place
            logger.debug(
                "Option %s redefined on line %d (first seen on line %s)",
                kind.label,
                line.number,
                existing.line_number,
            )
            block.options[idx] = opt
            return
    block.options.append(opt)


def _apply_answer(block: RawBlock, line: Line, raw: str) -> None:
    labels = resolve_answer(raw, block.options)
    if not labels:
        block.add_issue(MSG_MISSING_LETTERS, line.number)
        return
    by_label = {o.label: o for o in block.options}
    for label in labels:
        opt = by_label.get(label)
        if opt is None:
            block.add_issue(MSG_UNKNOWN_OPTION.format(label=label), line.number)
            continue
        opt.is_correct = True


def step(state: State, line: Line, sink: Accumulation) -> State:
    kind = classify(line)

    if isinstance(kind, Blank):
        if isinstance(state, InBlock):
            block = state.block
            if block.options:
                block.options[-1].content += "\n"
            else:
                block.stem += "\n"
        return state

    if isinstance(kind, AnswerDirective):
        if not isinstance(state, InBlock):
            sink.global_issues.append(Issue(message=MSG_ANSWER_BEFORE_QUESTION, line_number=line.number))
            return NO_BLOCK
        block = state.block
        block.last_line = line.number
        if not block.options:
            block.add_issue(MSG_ANSWER_BEFORE_OPTIONS, line.number)
        else:
            _apply_answer(block, line, kind.raw)
        sink.close(block)
        return NO_BLOCK

    if isinstance(kind, OptionLine):
        if not isinstance(state, InBlock):
            sink.global_issues.append(Issue(message=MSG_OPTION_BEFORE_QUESTION, line_number=line.number))
            return NO_BLOCK
        state.block.last_line = line.number
        _add_option(state.block, line, kind)
        return state

    if isinstance(kind, TextLine):
        if not isinstance(state, InBlock):
            return _start_block(line, kind.content)
        block = state.block
        if not block.options:
            block.stem += "\n" + kind.content
        elif line.has_leading_indent:
            block.options[-1].content += "\n" + kind.content
        else:
            # unindented text after options opens the next question
            sink.close(block)
            return _start_block(line, kind.content)
        block.last_line = line.number
        return state

    raise TypeError(f"unhandled line kind: {kind!r}")


def accumulate(lines: Iterable[Line]) -> Accumulation:
    sink = Accumulation()
    state: State = NO_BLOCK
    for line in lines:
        state = step(state, line, sink)

    if isinstance(state, InBlock):
        block = state.block
        if not block.options:
            block.add_issue(MSG_MISSING_OPTIONS, block.last_line)
        sink.close(block)
    return sink
