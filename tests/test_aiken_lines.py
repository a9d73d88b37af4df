from aiken.lines import (
    AnswerDirective,
    Blank,
    OptionLine,
    TextLine,
    classify,
    normalize_lines,
    strip_number_prefix,
)


def _kind(raw: str):
    return classify(normalize_lines(raw)[0])


def test_normalize_strips_bom_and_line_endings():
    lines = normalize_lines("\ufeffQ1\r\nA. x\rB. y\n")
    assert [l.raw for l in lines] == ["Q1", "A. x", "B. y", ""]
    assert [l.number for l in lines] == [1, 2, 3, 4]


def test_normalize_marks_indentation():
    lines = normalize_lines("stem\n   wrapped\n\t tab\n   ")
    assert [l.has_leading_indent for l in lines] == [False, True, True, False]
    assert lines[1].trimmed == "wrapped"


def test_classify_blank():
    assert isinstance(_kind("   "), Blank)


def test_classify_option_variants():
    assert _kind("A. London") == OptionLine("A", "London")
    assert _kind("b) Paris") == OptionLine("B", "Paris")
    assert _kind("C: Berlin") == OptionLine("C", "Berlin")
    assert _kind("d-  Rome ") == OptionLine("D", "Rome")


def test_classify_answer_directives():
    assert _kind("ANSWER: B") == AnswerDirective("B")
    assert _kind("ans = a, c") == AnswerDirective("a, c")
    assert _kind("Correct Answer: Paris") == AnswerDirective("Paris")
    assert _kind("ANSWER KEY: D") == AnswerDirective("D")


def test_classify_text():
    assert _kind("1) What is the capital of France?") == TextLine(
        "1) What is the capital of France?"
    )
    # no remainder after the colon: not a directive
    assert isinstance(_kind("ANSWER:"), TextLine)


def test_strip_number_prefix():
    assert strip_number_prefix("1) What?") == "What?"
    assert strip_number_prefix("12.  Why?") == "Why?"
    assert strip_number_prefix("3 - How?") == "How?"
    # needs whitespace after the marker
    assert strip_number_prefix("1.5 is a number") == "1.5 is a number"
