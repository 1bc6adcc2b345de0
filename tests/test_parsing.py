import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    ParseError,
    atoi,
    check_number,
    overflows_int,
    parse_arguments,
    split_words,
)


@pytest.mark.parametrize("text", ["42", "-42", "+7", "1 2 3", ""])
def test_check_number_accepts(text):
    assert check_number(text) is True


@pytest.mark.parametrize("text", ["--1", "+-3", "4-2", "abc", "1.5", "7+"])
def test_check_number_rejects(text):
    assert check_number(text) is False


def test_check_number_passes_over_character_after_sign():
    assert check_number("-a") is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", False),
        ("2147483648", True),
        ("-2147483648", False),
        ("-2147483649", True),
        ("  +12", False),
        ("9" * 6000, True),
    ],
)
def test_overflows_int(text, expected):
    assert overflows_int(text) is expected


def test_atoi_reads_leading_number():
    assert atoi("  -42abc") == -42
    assert atoi("+15 9") == 15
    assert atoi("x1") == 0


def test_atoi_int_min():
    assert atoi("-2147483648") == -2147483648


@given(st.integers(min_value=-2147483648, max_value=2147483647))
def test_atoi_round_trip(number):
    assert atoi(str(number)) == number
    assert overflows_int(str(number)) is False


def test_split_words_drops_empty():
    assert split_words("  a  bc d ", " ") == ["a", "bc", "d"]
    assert split_words("", " ") == []


def test_parse_separate_arguments():
    assert parse_arguments(["3", "2", "1"]) == [0, 3, 2, 1]


def test_parse_single_argument_is_split():
    assert parse_arguments(["3 2 1"]) == [0, 3, 2, 1]


def test_parse_only_spaces_gives_base():
    assert parse_arguments(["   "]) == [0]


@pytest.mark.parametrize(
    "args",
    [
        [],
        [""],
        ["1", "1"],
        ["0"],
        ["5", "0"],
        ["2147483648"],
        ["1", "x"],
        ["1 --2"],
        ["1", "-2147483649"],
    ],
)
def test_parse_errors(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_error_message():
    with pytest.raises(ParseError, match="^Error$"):
        parse_arguments([])


@given(
    st.lists(
        st.integers(min_value=-2147483648, max_value=2147483647).filter(bool),
        min_size=2,
        unique=True,
    )
)
def test_parse_round_trip(numbers):
    args = [str(n) for n in numbers]
    assert parse_arguments(args) == [0, *numbers]
    assert parse_arguments([" ".join(args)]) == [0, *numbers]