"""Earliest and latest calendar days covered by EDTF values."""

from __future__ import annotations

from edtf_parsing.calendar_rules import days_in_month
from edtf_parsing.edtf import (
    DateValue,
    Edtf,
    EdtfList,
    Interval,
    Season,
    SeasonName,
    Single,
    Year,
    YearMonth,
    YearMonthDay,
)

# (first month, last month) of each meteorological season; winter runs into
# February of the following year.
_SEASON_MONTHS = {
    SeasonName.SPRING: (3, 5),
    SeasonName.SUMMER: (6, 8),
    SeasonName.AUTUMN: (9, 11),
    SeasonName.WINTER: (12, 2),
}


def _last_day(year: int, month: int) -> YearMonthDay:
    return YearMonthDay(year, month, days_in_month(year, month))


def date_bounds(value: DateValue) -> tuple[YearMonthDay, YearMonthDay]:
    """Return the first and last day a date value covers.

    Examples:
    - Year(2020)          -> 2020-01-01, 2020-12-31
    - YearMonth(2020, 2)  -> 2020-02-01, 2020-02-29
    - Season(2020, 24)    -> 2020-12-01, 2021-02-28
    """
    if isinstance(value, YearMonthDay):
        return value, value
    if isinstance(value, YearMonth):
        return YearMonthDay(value.year, value.month, 1), _last_day(value.year, value.month)
    if isinstance(value, Season):
        first_month, last_month = _SEASON_MONTHS[value.season]
        end_year = value.year + 1 if last_month < first_month else value.year
        return YearMonthDay(value.year, first_month, 1), _last_day(end_year, last_month)
    if isinstance(value, Year):
        return YearMonthDay(value.year, 1, 1), YearMonthDay(value.year, 12, 31)
    raise TypeError(f"Not an EDTF date value: {value!r}")


def edtf_bounds(value: Edtf) -> tuple[YearMonthDay | None, YearMonthDay | None]:
    """Return the first and last day an EDTF value covers.

    A side is None when the value is open or unknown on that side.
    """
    if isinstance(value, Single):
        return date_bounds(value.date.date)
    if isinstance(value, Interval):
        earliest = None if value.start is None else date_bounds(value.start.date)[0]
        latest = None if value.end is None else date_bounds(value.end.date)[1]
        return earliest, latest
    if isinstance(value, EdtfList):
        member_bounds = [edtf_bounds(item) for item in value.items]
        starts = [bounds[0] for bounds in member_bounds]
        ends = [bounds[1] for bounds in member_bounds]
        earliest = None if not starts or None in starts else min(starts, key=YearMonthDay.sort_key)
        latest = None if not ends or None in ends else max(ends, key=YearMonthDay.sort_key)
        return earliest, latest
    raise TypeError(f"Not an EDTF value: {value!r}")
