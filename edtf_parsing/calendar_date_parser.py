"""Parser for plain year, year-month and year-month-day dates."""

from edtf_parsing.calendar_rules import is_valid_day
from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import DateValue, Year, YearMonth, YearMonthDay
from edtf_parsing.strategy import EdtfParserStrategy


class CalendarDateParser(EdtfParserStrategy):
    """Parses calendar dates at year, month or day precision.

    Examples: 2020, -0044-03, 2020-05-17

    Month and day must be written with two digits; '2020-5' is not a
    year-month, and it is not a year with trailing text either.
    """

    def parse(self, cursor: TextCursor) -> DateValue | None:
        year = self._four_digit_year(cursor)
        if year is None:
            return None
        if cursor.peek() != "-":
            return Year(year)

        cursor.advance()
        month = cursor.two_digit_bounded(1, 12)
        if month is None:
            return None
        if cursor.peek() != "-":
            return YearMonth(year, month)

        cursor.advance()
        day_start = cursor.mark()
        day = cursor.two_digit_bounded(1, 31)
        if day is None:
            return None
        if not is_valid_day(year, month, day):
            return cursor.expect(f"a day that exists in {year:04d}-{month:02d}", at=day_start)

        return YearMonthDay(year, month, day)
