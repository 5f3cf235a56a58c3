import pytest

from ftkit.conversions import INT_MAX, INT_MIN, atoi, itoa


def test_atoi_plain_number():
    assert atoi("12345") == 12345


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r +42abc") == 42
    assert atoi("   -42") == -42


def test_atoi_only_one_sign():
    assert atoi(" \t -----++122343qeq213") == 0
    assert atoi("+-5") == 0


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0


def test_atoi_limits():
    assert atoi("2147483647") == INT_MAX
    assert atoi("-2147483648") == INT_MIN


def test_atoi_saturates_on_overflow():
    assert atoi("99999999999") == INT_MAX
    assert atoi("-99999999999") == INT_MIN
    assert atoi("2147483648") == INT_MAX


def test_atoi_ignores_non_ascii_digits():
    assert atoi("12٣4") == 12


def test_itoa_limits():
    assert itoa(2147483647) == "2147483647"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 9, -9, 10, -10, 12345, -12345, INT_MAX, INT_MIN])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_single_leading_minus():
    text = itoa(-12345)
    assert text.startswith("-")
    assert text[1:].isdigit()


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)