import pytest

from numtheory.common import (
    PRIME_TABLE,
    CalcTiError,
    CoprimeCountError,
    ExceedPrimeRangeError,
    InvalidParameterError,
    NoCoprimeError,
    NumberTheoryError,
    is_repeat,
)


def test_is_repeat_empty_is_false():
    assert is_repeat([]) is False


def test_is_repeat_single_is_false():
    assert is_repeat([7]) is False


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3], False),
        ([1, 2, 1], True),
        ([5, 5], True),
        ([3, 5, 7, 11], False),
        ([3, 5, 7, 3], True),
    ],
)
def test_is_repeat_cases(values, expected):
    assert is_repeat(values) is expected


def test_is_repeat_accepts_generators():
    assert is_repeat(x % 3 for x in range(10)) is True
    assert is_repeat(x for x in range(10)) is False


def test_prime_table_has_no_duplicates():
    assert is_repeat(PRIME_TABLE) is False


def test_prime_table_with_duplicate_detected():
    assert is_repeat(PRIME_TABLE + PRIME_TABLE[-1:]) is True


@pytest.mark.parametrize(
    "value",
    [101, 1009, 10007, 100003, 1000003, 163, 1087, 10111, 100183, 1000183,
     379, 1361, 10457, 100591, 1000639],
)
def test_prime_table_pinned_values(value):
    assert is_repeat(PRIME_TABLE + (value,)) is True


def test_prime_table_pinned_rows():
    first_row = PRIME_TABLE[:5]
    last_row = PRIME_TABLE[-5:]
    assert is_repeat(first_row) is False
    assert is_repeat(first_row + (101,)) is True
    assert is_repeat(last_row + (1000639,)) is True
    assert is_repeat(PRIME_TABLE + (1000667,)) is False
    assert first_row == (101, 1009, 10007, 100003, 1000003)
    assert last_row == (379, 1361, 10457, 100591, 1000639)


@pytest.mark.parametrize("column", range(5))
def test_prime_table_columns_distinct(column):
    values = PRIME_TABLE[column::5]
    assert len(values) == 50
    assert is_repeat(values) is False
    assert is_repeat(values + values[:1]) is True


@pytest.mark.parametrize(
    "error, std_base",
    [
        (InvalidParameterError, ValueError),
        (ExceedPrimeRangeError, ValueError),
        (NoCoprimeError, ValueError),
        (CalcTiError, ArithmeticError),
        (CoprimeCountError, ArithmeticError),
    ],
)
def test_errors_share_base_and_message(error, std_base):
    with pytest.raises(NumberTheoryError) as info:
        raise error("bad input")
    assert str(info.value) == "bad input"
    assert isinstance(info.value, std_base)
    assert info.type is error