import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    parse_args,
    parse_number,
    split_arguments,
)


def test_split_arguments_mixes_quoted_and_separate():
    assert split_arguments(["3 1", "2"]) == ["3", "1", "2"]


def test_split_arguments_collapses_repeated_spaces():
    assert split_arguments(["  4   5 ", "6"]) == ["4", "5", "6"]


def test_split_arguments_only_splits_on_space():
    assert split_arguments(["1\t2"]) == ["1\t2"]


@pytest.mark.parametrize("bad", ["", " ", "     "])
def test_split_arguments_rejects_empty_or_blank(bad):
    with pytest.raises(InputError):
        split_arguments(["1", bad])


@pytest.mark.parametrize(
    "token, expected",
    [("42", 42), ("-7", -7), ("+9", 9), ("-0", 0), ("0007", 7)],
)
def test_parse_number_accepts_signed_decimals(token, expected):
    assert parse_number(token) == expected


def test_parse_number_limits():
    assert parse_number(str(INT_MAX)) == INT_MAX
    assert parse_number(str(INT_MIN)) == INT_MIN


@pytest.mark.parametrize(
    "token",
    [str(INT_MAX + 1), str(INT_MIN - 1), "99999999999999999999999"],
)
def test_parse_number_rejects_out_of_range(token):
    with pytest.raises(InputError):
        parse_number(token)


@pytest.mark.parametrize(
    "token", ["abc", "+", "-", "1-", "--1", "+-1", "1a", "1.5", "\u0663", "1\t2"]
)
def test_parse_number_rejects_non_numbers(token):
    with pytest.raises(InputError):
        parse_number(token)


def test_parse_number_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_number("x")


def test_parse_args_keeps_order():
    assert parse_args(["5 -3", "12", "0"]) == [5, -3, 12, 0]


def test_parse_args_with_no_arguments():
    assert parse_args([]) == []


@pytest.mark.parametrize("args", [["1", "2", "1"], ["1 01"], ["0", "-0"], ["+4 4"]])
def test_parse_args_rejects_duplicates(args):
    with pytest.raises(InputError):
        parse_args(args)


def test_parse_args_rejects_bad_word():
    with pytest.raises(InputError):
        parse_args(["1 2", "three"])


def test_parse_args_result_is_distinct_and_round_trips():
    args = ["10 -4 7", "2147483647", "-2147483648"]
    values = parse_args(args)
    assert len(set(values)) == len(values)
    assert parse_args([" ".join(str(v) for v in values)]) == values


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args([""])