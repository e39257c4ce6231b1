"""Calendar arithmetic used to validate parsed days.

Month lengths follow the proleptic Gregorian leap rule. The one exception is
the British calendar reform: in September 1752 the 2nd was followed directly
by the 14th, so days 3 through 13 of that month never existed.
"""

_MONTH_LENGTHS = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}

REFORM_YEAR = 1752
REFORM_MONTH = 9
REFORM_GAP = range(3, 14)  # 1752-09-03 .. 1752-09-13


def is_leap_year(year: int) -> bool:
    """Return True if the year has a February 29th."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of the last day of the given month.

    Raises:
        ValueError: If the month is outside 1..12
    """
    if month not in _MONTH_LENGTHS:
        raise ValueError(f"Month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month]


def is_in_reform_gap(year: int, month: int, day: int) -> bool:
    return year == REFORM_YEAR and month == REFORM_MONTH and day in REFORM_GAP


def is_valid_day(year: int, month: int, day: int) -> bool:
    """Check that a day exists in the given year and month."""
    if month not in _MONTH_LENGTHS:
        return False
    if day < 1 or day > days_in_month(year, month):
        return False
    return not is_in_reform_gap(year, month, day)
