import io

import pytest

from aflscore.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_write_goes_to_output():
    console, out = make("")
    console.write("hello")
    assert out.getvalue() == "hello"


def test_read_word_shows_prompt_and_returns_word():
    console, out = make("Kangaroos Eagles\n")
    assert console.read_word("name: ") == "Kangaroos"
    assert console.read_word("name: ") == "Eagles"
    assert out.getvalue() == "name: name: "


def test_read_whole_number_simple():
    console, out = make("10\n")
    assert console.read_whole_number("goals: ") == 10
    assert out.getvalue() == "goals: "


def test_negative_number_is_accepted():
    console, _ = make("-3\n")
    assert console.read_whole_number("goals: ") == -3


def test_number_after_blank_lines():
    console, _ = make("\n\n   42\n")
    assert console.read_whole_number("goals: ") == 42


def test_invalid_number_reprompts():
    console, out = make("abc\n7\n")
    assert console.read_whole_number("goals: ") == 7
    text = out.getvalue()
    assert text.count("goals: ") == 2
    assert text.count("Please enter a whole number\n") == 1


def test_failure_discards_rest_of_line():
    console, _ = make("x 9\n4\n")
    assert console.read_whole_number("goals: ") == 4


def test_number_followed_by_text_leaves_text():
    console, _ = make("12abc\n")
    assert console.read_whole_number("goals: ") == 12
    assert console.read_word() == "abc"


def test_out_of_range_number_rejected():
    console, out = make("99999999999\n5\n")
    assert console.read_whole_number("goals: ") == 5
    assert "Please enter a whole number" in out.getvalue()


def test_numbers_on_one_line():
    console, _ = make("3 4\n")
    assert console.read_whole_number() == 3
    assert console.read_whole_number() == 4


def test_end_of_input_raises():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_whole_number("goals: ")


def test_end_of_input_after_bad_number_raises():
    console, _ = make("abc\n")
    with pytest.raises(EOFError):
        console.read_whole_number("goals: ")


@pytest.mark.parametrize("answer,expected", [("y", True), ("Y", True), ("n", False), ("N", False)])
def test_yes_no_answers(answer, expected):
    console, _ = make(answer + "\n")
    assert console.read_yes_no("sure? ") is expected


def test_yes_no_reprompts_on_other_input():
    console, out = make("maybe\nyes\nY\n")
    assert console.read_yes_no("sure? ") is True
    text = out.getvalue()
    assert text.count("Please enter y or n\n") == 2
    assert text.count("sure? ") == 3