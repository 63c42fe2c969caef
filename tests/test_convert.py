import pytest

from cub3d.libft.convert import atoi, itoa


def test_atoi_skips_whitespace_and_sign():
    assert atoi("  \t\n+42abc") == 42


def test_atoi_negative():
    assert atoi("-17") == -17


def test_atoi_leading_zeros():
    assert atoi("\v\f\r 0007") == 7


@pytest.mark.parametrize("text", ["", "abc", "   ", "+", "-", "--5", "+-3"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_overflow_positive():
    assert atoi("1" * 20) == -1


def test_atoi_overflow_negative():
    assert atoi("-" + "9" * 25) == 0


def test_atoi_leading_zeros_do_not_count_towards_overflow():
    assert atoi("0" * 30 + "12") == 12


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 255, 2147483647, -2147483648])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [5, -5, 123456, -987])
def test_itoa_length_matches_sign_and_digits(n):
    text = itoa(n)
    assert text.startswith("-") == (n < 0)
    assert text.lstrip("-").isdigit()