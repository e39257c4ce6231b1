"""Dataclasses representing parsed EDTF values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from edtf_parsing.calendar_rules import is_valid_day


class Month(IntEnum):
    """Calendar months, numbered as they are written."""
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class SeasonName(IntEnum):
    """Seasons, valued by their EDTF two-digit codes."""
    SPRING = 21
    SUMMER = 22
    AUTUMN = 23
    WINTER = 24


class DatePrecision(Enum):
    """Enumeration of date precision levels."""
    DAY = "day"
    MONTH = "month"
    SEASON = "season"
    YEAR = "year"


def _coerce_month(value: object) -> Month:
    try:
        return Month(value)
    except ValueError:
        raise ValueError(f"Month must be in 1..12, got {value!r}") from None


@dataclass(frozen=True)
class Year:
    """A year with no month or day. Negative years are BCE."""
    year: int

    @property
    def precision(self) -> DatePrecision:
        return DatePrecision.YEAR


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: Month

    def __post_init__(self):
        object.__setattr__(self, "month", _coerce_month(self.month))

    @property
    def precision(self) -> DatePrecision:
        return DatePrecision.MONTH


@dataclass(frozen=True)
class YearMonthDay:
    """A fully specified calendar day.

    The day must exist in its month, taking leap years and the
    September 1752 calendar reform into account.
    """
    year: int
    month: Month
    day: int

    def __post_init__(self):
        object.__setattr__(self, "month", _coerce_month(self.month))
        if not is_valid_day(self.year, self.month, self.day):
            raise ValueError(f"Day {self.day} does not exist in {self.year}-{self.month:02d}")

    @property
    def precision(self) -> DatePrecision:
        return DatePrecision.DAY

    def sort_key(self) -> tuple[int, int, int]:
        return (self.year, int(self.month), self.day)


@dataclass(frozen=True)
class Season:
    year: int
    season: SeasonName

    def __post_init__(self):
        try:
            object.__setattr__(self, "season", SeasonName(self.season))
        except ValueError:
            raise ValueError(f"Season code must be in 21..24, got {self.season!r}") from None

    @property
    def precision(self) -> DatePrecision:
        return DatePrecision.SEASON


DateValue = Union[YearMonthDay, YearMonth, Year, Season]


@dataclass(frozen=True)
class AnnotatedDate:
    """A date value with its uncertainty (?) and approximation (~) flags."""
    date: DateValue
    uncertain: bool = False
    approximate: bool = False


@dataclass(frozen=True)
class Single:
    date: AnnotatedDate


@dataclass(frozen=True)
class Interval:
    """A start/end pair. None on either side means the side is open or unknown."""
    start: AnnotatedDate | None
    end: AnnotatedDate | None


@dataclass(frozen=True)
class EdtfList:
    """An ordered list of EDTF values (written comma-separated)."""
    items: tuple[Edtf, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


Edtf = Union[Single, Interval, EdtfList]
