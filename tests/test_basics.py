import datetime

import pytest

from algopuzzles.basics import (
    day_of_year,
    decode_prefix,
    grade,
    is_leap_year,
    legendre,
    series_sum,
    to_binary,
    xor_swap,
)


@pytest.mark.parametrize(
    "score, level",
    [(100, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C"), (70, "C"),
     (69, "D"), (60, "D"), (59, "E"), (0, "E")],
)
def test_grade_boundaries(score, level):
    assert grade(score) == level


_CODE = {"a": "1", "b": "01", "c": "001"}


def test_decode_prefix_source_string():
    message = decode_prefix("001011101001011001")
    assert "".join(_CODE[ch] for ch in message) == "001011101001011001"


@pytest.mark.parametrize("message", ["abc", "cba", "aaaa", "bcbcbc", ""])
def test_decode_prefix_round_trip(message):
    assert decode_prefix("".join(_CODE[ch] for ch in message)) == message


def test_decode_prefix_skips_incomplete_words():
    assert decode_prefix("000") == ""


@pytest.mark.parametrize("year", [1600, 2000, 2004, 2024, 1900, 2009, 2100])
def test_is_leap_year_matches_calendar(year):
    import calendar

    assert is_leap_year(year) == calendar.isleap(year)


def test_xor_swap():
    assert xor_swap(555, 66666) == (66666, 555)


def test_xor_swap_twice_is_identity():
    assert xor_swap(*xor_swap(-7, 12)) == (-7, 12)


def test_to_binary_example():
    assert to_binary(64) == "1000000"


@pytest.mark.parametrize("n", [0, 1, 2, 7, 255, 1022, 123456])
def test_to_binary_round_trip(n):
    assert int(to_binary(n), 2) == n


def test_to_binary_negative():
    with pytest.raises(ValueError):
        to_binary(-1)


def test_series_sum_first_term():
    assert series_sum(1) == 0.5


def test_series_sum_empty_and_increasing():
    assert series_sum(0) == 0
    values = [series_sum(k) for k in range(1, 11)]
    assert values == sorted(values)
    assert series_sum() == values[-1]


def test_series_sum_negative():
    with pytest.raises(ValueError):
        series_sum(-1)


@pytest.mark.parametrize("x", [-1.5, 0.0, 0.25, 3.0])
def test_legendre_base_cases(x):
    assert legendre(0, x) == 1.0
    assert legendre(1, x) == x


def test_legendre_second_order_at_zero():
    assert legendre(2, 0.0) == -0.5


def test_legendre_negative_order():
    with pytest.raises(ValueError):
        legendre(-1, 0.5)


@pytest.mark.parametrize(
    "year, month, day",
    [(2009, 3, 6), (2008, 3, 1), (2000, 12, 31), (1900, 12, 31), (2024, 1, 1)],
)
def test_day_of_year_matches_calendar(year, month, day):
    expected = datetime.date(year, month, day).timetuple().tm_yday
    assert day_of_year(year, month, day) == expected


def test_day_of_year_bad_month():
    with pytest.raises(ValueError):
        day_of_year(2009, 13, 1)