import pytest

from bytekit.numbers import INT_MAX, INT_MIN, atoi, itoa


def test_atoi_plain_number():
    assert atoi("12345") == 12345


def test_atoi_skips_leading_whitespace():
    assert atoi("\t\n\v\f\r 42") == 42


def test_atoi_negative_and_trailing_text():
    assert atoi("   -42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0


def test_atoi_stops_at_inner_whitespace():
    assert atoi("12 34") == 12


def test_atoi_ignores_non_ascii_digits():
    assert atoi("٣") == 0


def test_atoi_limits():
    assert atoi(str(INT_MAX)) == INT_MAX
    assert atoi(str(INT_MIN)) == INT_MIN


def test_atoi_wraps_past_limit():
    assert atoi(str(INT_MAX + 1)) == INT_MIN


@pytest.mark.parametrize("n", [0, 1, -1, 9, -9, 10, -10, 987654, INT_MAX, INT_MIN])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [0, 7, -7, 123, -2000, INT_MAX, INT_MIN])
def test_itoa_matches_decimal_form(n):
    assert itoa(n) == str(n)


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)