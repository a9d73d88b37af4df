import pytest

from aiken import EmptyInput, NoValidQuestions, parse_aiken

CAPITALS = """1) What is the capital of France?
A. London
B. Paris
C. Berlin
ANSWER: B
"""


def _messages(skipped_question):
    return [i.message for i in skipped_question.issues]


def test_capital_of_france():
    out = parse_aiken(CAPITALS)
    assert len(out.questions) == 1
    q = out.questions[0]
    assert q.stem == "What is the capital of France?"
    assert [o.label for o in q.options] == ["A", "B", "C"]
    assert [o.order for o in q.options] == [0, 1, 2]
    assert q.correct_labels == ["B"]
    assert out.skipped == [] and out.global_issues == []


def test_single_answer_marks_exactly_one():
    text = "Pick one\nA) w\nB) x\nC) y\nD) z\nE) v\nANS: D\n"
    q = parse_aiken(text).questions[0]
    assert len(q.options) == 5
    assert sum(o.is_correct for o in q.options) == 1


def test_multi_answer_directive():
    text = "Which are prime?\nA. 2\nB. 4\nC. 3\nD. 8\nANSWER: A and C\n"
    q = parse_aiken(text).questions[0]
    assert {o.label: o.is_correct for o in q.options} == {
        "A": True,
        "B": False,
        "C": True,
        "D": False,
    }
    assert [o.content for o in q.options] == ["2", "4", "3", "8"]


def test_content_match_answer():
    text = "Largest planet?\nA. Mars\nB. Jupiter\nC. Venus\nANSWER: Jupiter\n"
    q = parse_aiken(text).questions[0]
    assert q.correct_labels == ["B"]


def test_isolation_of_broken_question():
    text = (
        "First?\n"  # 1
        "A. one\n"  # 2
        "B. two\n"  # 3
        "ANSWER: A\n"  # 4
        "\n"  # 5
        "Second?\n"  # 6
        "A. one\n"  # 7
        "B. two\n"  # 8
        "\n"  # 9
        "Third?\n"  # 10
        "A. one\n"  # 11
        "B. two\n"  # 12
        "ANSWER: B\n"  # 13
    )
    out = parse_aiken(text)
    assert [q.stem for q in out.questions] == ["First?", "Third?"]
    assert out.questions[1].correct_labels == ["B"]
    assert len(out.skipped) == 1
    sq = out.skipped[0]
    assert (sq.start_line, sq.end_line) == (6, 8)
    assert sq.stem_snippet == "Second?"
    assert [(ol.label, ol.line_number) for ol in sq.option_lines] == [("A", 7), ("B", 8)]
    assert _messages(sq) == [
        "Each question must specify a correct answer via the ANSWER directive."
    ]


def test_ambiguous_content_is_skipped():
    text = (
        "Capital of France?\nA. Paris\nB. paris.\nC. Lyon\nANSWER: Paris\n"
        "Ok?\nA. yes\nB. no\nANSWER: A\n"
    )
    out = parse_aiken(text)
    assert len(out.questions) == 1
    assert "ANSWER directive is missing option letters." in _messages(out.skipped[0])


def test_unknown_label_skips_question():
    text = "Q\nA. x\nB. y\nANSWER: A, E\nOk?\nA. yes\nB. no\nANSWER: A\n"
    out = parse_aiken(text)
    assert len(out.questions) == 1
    sq = out.skipped[0]
    assert sq.issues[0].message == "ANSWER references option E which was not provided."
    assert sq.issues[0].line_number == 4


def test_global_issues_for_stray_lines():
    text = "ANSWER: A\nA. orphan\nReal?\nA. yes\nB. no\nANSWER: B\n"
    out = parse_aiken(text)
    assert len(out.questions) == 1
    assert [(i.message, i.line_number) for i in out.global_issues] == [
        ("ANSWER directive appeared before any question.", 1),
        ("Option encountered before the question text.", 2),
    ]


def test_answer_before_options():
    text = "Lonely?\nANSWER: A\nOk?\nA. yes\nB. no\nANSWER: A\n"
    out = parse_aiken(text)
    sq = out.skipped[0]
    assert (sq.start_line, sq.end_line) == (1, 2)
    assert _messages(sq)[0] == "ANSWER directive appeared before any options were defined."


def test_trailing_question_without_options():
    text = "Ok?\nA. yes\nB. no\nANSWER: A\nDangling stem"
    out = parse_aiken(text)
    sq = out.skipped[0]
    assert sq.start_line == 5
    assert _messages(sq) == [
        "A question is missing answer options.",
        "Each question must include at least two options.",
        "Each question must specify a correct answer via the ANSWER directive.",
    ]


def test_unindented_text_after_options_starts_next_question():
    text = "2. First?\nA. a\nB. b\n3. Second?\nA. c\nB. d\nANSWER: B\n"
    out = parse_aiken(text)
    assert [q.stem for q in out.questions] == ["Second?"]
    assert out.skipped[0].stem_snippet == "First?"
    assert (out.skipped[0].start_line, out.skipped[0].end_line) == (1, 3)


def test_multiline_stem_and_wrapped_option():
    text = (
        "Read the passage.\n"
        "\n"
        "Which word fits?\n"
        "A. a very long option\n"
        "   that wraps\n"
        "B. short\n"
        "ANSWER: A\n"
    )
    q = parse_aiken(text).questions[0]
    assert q.stem == "Read the passage.\n\nWhich word fits?"
    assert q.options[0].content == "a very long option\nthat wraps"


def test_duplicate_label_last_write_wins():
    text = "Q?\nA. first\nB. other\nA. second\nANSWER: A\n"
    q = parse_aiken(text).questions[0]
    assert [(o.label, o.content) for o in q.options] == [("A", "second"), ("B", "other")]


def test_too_few_options():
    text = "Q?\nA. only\nANSWER: A\nOk?\nA. yes\nB. no\nANSWER: A\n"
    out = parse_aiken(text)
    assert _messages(out.skipped[0]) == ["Each question must include at least two options."]


def test_deterministic():
    text = CAPITALS + "\nBroken\nA. x\n"
    assert parse_aiken(text) == parse_aiken(text)


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n", "\ufeff  \r\n"])
def test_empty_input(text):
    with pytest.raises(EmptyInput):
        parse_aiken(text)


def test_no_valid_questions_carries_context():
    text = "A. stray\nQ?\nA. x\nB. y\n"
    with pytest.raises(NoValidQuestions) as exc:
        parse_aiken(text)
    err = exc.value
    assert err.code == "no_valid_questions"
    assert len(err.skipped) == 1 and err.skipped[0].start_line == 2
    assert err.global_issues[0].line_number == 1


def test_blank_line_inside_option_is_kept():
    text = "Q?\nA. line one\n\n   line two\nB. b\nANSWER: A\n"
    q = parse_aiken(text).questions[0]
    assert q.options[0].content == "line one\n\nline two"
    assert q.options[1].content == "b"


def test_only_one_leading_bom_is_stripped():
    # the second BOM is content, so this is a stem with no options, not empty input
    with pytest.raises(NoValidQuestions) as exc:
        parse_aiken("\ufeff\ufeff")
    assert exc.value.skipped[0].start_line == 1
