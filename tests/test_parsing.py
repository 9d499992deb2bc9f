import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    InputError,
    has_duplicates,
    is_allowed_args,
    is_allowed_token,
    parse_arguments,
    parse_long,
    split_words,
)


@pytest.mark.parametrize("number", [0, 1, -1, 42, -2147483648, 2147483647, 123456789012])
def test_parse_long_round_trip(number):
    assert parse_long(str(number)) == number


def test_parse_long_skips_whitespace_and_sign():
    assert parse_long(" \t\n-42") == -42
    assert parse_long("+7") == 7


def test_parse_long_stops_at_non_digit():
    assert parse_long("13abc") == 13
    assert parse_long("-") == 0


def test_parse_long_limits():
    assert parse_long(str(LONG_MAX)) == LONG_MAX
    assert parse_long(str(LONG_MIN)) == LONG_MIN


def test_parse_long_clamps_on_overflow():
    assert parse_long(str(LONG_MAX) + "0") == LONG_MAX
    assert parse_long(str(LONG_MAX + 1)) == LONG_MAX
    assert parse_long(str(LONG_MIN - 1)) == LONG_MIN


@pytest.mark.parametrize("text", ["1", "-1", "+5", "1 2 3", "-3 +4 5", "0012"])
def test_allowed_tokens(text):
    assert is_allowed_token(text) is True


@pytest.mark.parametrize(
    "text", ["", " ", "-", "+-1", "1-2", " 1", "1 ", "1  2", "a", "1\t2", "--1"]
)
def test_rejected_tokens(text):
    assert is_allowed_token(text) is False


def test_is_allowed_args():
    assert is_allowed_args(["1", "2 3"]) is True
    assert is_allowed_args(["1", "x"]) is False
    assert is_allowed_args([]) is True


def test_split_words_drops_empty_pieces():
    assert split_words("  1 2  3 ", " ") == ["1", "2", "3"]
    assert split_words("   ", " ") == []
    assert split_words("a,b", ",") == ["a", "b"]


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3 2", "1", "-5"]) == [3, 2, 1, -5]


def test_parse_arguments_int_bounds():
    assert parse_arguments([str(INT_MAX), str(INT_MIN)]) == [INT_MAX, INT_MIN]
    with pytest.raises(InputError):
        parse_arguments([str(INT_MAX + 1)])
    with pytest.raises(InputError):
        parse_arguments([str(INT_MIN - 1)])


@pytest.mark.parametrize("args", [[""], ["   "], ["1", ""]])
def test_parse_arguments_rejects_empty(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["99999999999"])


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False