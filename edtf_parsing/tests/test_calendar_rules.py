"""Tests for calendar validation rules."""

import pytest
from edtf_parsing.calendar_rules import days_in_month, is_leap_year, is_valid_day


@pytest.mark.parametrize("year,expected", [
    (2000, True),
    (2020, True),
    (1900, False),
    (2001, False),
    (0, True),
    (-4, True),
    (-100, False),
])
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize("year,month,expected", [
    (2021, 1, 31),
    (2021, 4, 30),
    (2021, 2, 28),
    (2020, 2, 29),
    (1900, 2, 28),
    (1752, 9, 30),
])
def test_days_in_month(year, month, expected):
    assert days_in_month(year, month) == expected


@pytest.mark.parametrize("month", [0, 13])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(2020, month)


@pytest.mark.parametrize("day", range(3, 14))
def test_reform_gap_days_do_not_exist(day):
    """Test that 3-13 September 1752 were skipped."""
    assert is_valid_day(1752, 9, day) is False


@pytest.mark.parametrize("year,month,day", [
    (1752, 9, 2),
    (1752, 9, 14),
    (1753, 9, 5),
    (1752, 8, 5),
    (2000, 2, 29),
])
def test_valid_days(year, month, day):
    assert is_valid_day(year, month, day) is True


@pytest.mark.parametrize("year,month,day", [
    (2001, 2, 29),
    (2021, 4, 31),
    (2021, 1, 0),
    (2021, 13, 1),
])
def test_invalid_days(year, month, day):
    assert is_valid_day(year, month, day) is False
