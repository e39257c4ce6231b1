"""Parser for dates with unspecified ('X') digits."""

from __future__ import annotations

import logging

from edtf_parsing.calendar_rules import days_in_month, is_valid_day
from edtf_parsing.cursor import MASK, TextCursor
from edtf_parsing.edtf import AnnotatedDate, Interval, Year, YearMonth, YearMonthDay
from edtf_parsing.strategy import EdtfParserStrategy

logger = logging.getLogger(__name__)

FULL_MASK = MASK * 2


class MaskedDateParser(EdtfParserStrategy):
    """Parses a date in which some digits are replaced by 'X' and expands it
    into the interval between the earliest and latest dates it could be.

    Examples:
    - 199X       -> 1990/1999
    - -01XX      -> Y-199/Y-100
    - 2004-XX    -> 2004-01/2004-12
    - 20XX-XX-XX -> 2000-01-01/2099-12-31

    Any year digit may be masked. Months and days are either fully masked
    ('XX') or fully written out. A date without any 'X' is not a match.
    """

    def parse(self, cursor: TextCursor) -> Interval | None:
        start = cursor.mark()

        sign = ""
        if cursor.peek() in ("+", "-"):
            sign = cursor.peek()
            cursor.advance()
        year_text = cursor.digit_run(4)
        if year_text is None:
            return None

        month_text = None
        day_text = None
        month_start = None
        day_start = None
        if cursor.peek() == "-":
            cursor.advance()
            month_start = cursor.mark()
            month_text = cursor.digit_run(2)
            if month_text is None:
                return None
            if cursor.peek() == "-":
                cursor.advance()
                day_start = cursor.mark()
                day_text = cursor.digit_run(2)
                if day_text is None:
                    return None

        if MASK not in year_text + (month_text or "") + (day_text or ""):
            return cursor.expect(f"a date with at least one {MASK}", at=start)

        year_lo, year_hi = self._year_bounds(sign, year_text)

        if month_text is None:
            return self._interval(Year(year_lo), Year(year_hi))

        months = self._month_bounds(month_text)
        if months is None:
            return cursor.expect(f"a month in 01..12 or {FULL_MASK}", at=month_start)
        month_lo, month_hi = months

        if day_text is None:
            return self._interval(YearMonth(year_lo, month_lo), YearMonth(year_hi, month_hi))

        days = self._day_bounds(day_text, year_hi, month_hi)
        if days is None:
            return cursor.expect(f"a day in 01..31 or {FULL_MASK}", at=day_start)
        day_lo, day_hi = days

        if not (is_valid_day(year_lo, month_lo, day_lo) and is_valid_day(year_hi, month_hi, day_hi)):
            logger.debug(f"Masked date {cursor.text[start:cursor.pos]!r} expands to a day that does not exist")
            return cursor.expect("a day that exists at both ends of the masked range", at=day_start)

        return self._interval(
            YearMonthDay(year_lo, month_lo, day_lo),
            YearMonthDay(year_hi, month_hi, day_hi),
        )

    @staticmethod
    def _interval(lower, upper) -> Interval:
        return Interval(AnnotatedDate(lower), AnnotatedDate(upper))

    @staticmethod
    def _year_bounds(sign: str, digits: str) -> tuple[int, int]:
        """Lowest and highest years a masked year can stand for.

        For negative years the digit window flips: '-01XX' covers -199..-100.
        """
        lowest = int(digits.replace(MASK, "0"))
        highest = int(digits.replace(MASK, "9"))
        if sign == "-":
            return -highest, -lowest
        return lowest, highest

    @staticmethod
    def _month_bounds(text: str) -> tuple[int, int] | None:
        if text == FULL_MASK:
            return 1, 12
        if MASK in text:
            return None
        month = int(text)
        if month < 1 or month > 12:
            return None
        return month, month

    @staticmethod
    def _day_bounds(text: str, year_hi: int, month_hi: int) -> tuple[int, int] | None:
        if text == FULL_MASK:
            return 1, days_in_month(year_hi, month_hi)
        if MASK in text:
            return None
        day = int(text)
        if day < 1 or day > 31:
            return None
        return day, day
