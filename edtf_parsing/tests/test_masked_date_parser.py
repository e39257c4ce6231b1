"""Unit tests for MaskedDateParser."""

import pytest
from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import AnnotatedDate, Interval, Month, Year, YearMonth, YearMonthDay
from edtf_parsing.masked_date_parser import MaskedDateParser


def _bounds(interval: Interval):
    return interval.start.date, interval.end.date


class TestMaskedDateParser:
    """Test cases for MaskedDateParser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = MaskedDateParser()

    @pytest.mark.parametrize("text,lower,upper", [
        ("199X", 1990, 1999),
        ("19XX", 1900, 1999),
        ("1X5X", 1050, 1959),
        ("XXXX", 0, 9999),
        ("-01XX", -199, -100),
        ("+19XX", 1900, 1999),
    ])
    def test_masked_years(self, text, lower, upper):
        cursor = TextCursor(text)
        result = self.parser.parse(cursor)
        assert cursor.at_end()
        assert _bounds(result) == (Year(lower), Year(upper))

    def test_bounds_are_unqualified(self):
        result = self.parser.parse(TextCursor("199X"))
        assert result == Interval(AnnotatedDate(Year(1990)), AnnotatedDate(Year(1999)))
        assert result.start.uncertain is False
        assert result.end.approximate is False

    @pytest.mark.parametrize("text,lower,upper", [
        ("2004-XX", YearMonth(2004, 1), YearMonth(2004, 12)),
        ("20XX-06", YearMonth(2000, 6), YearMonth(2099, 6)),
    ])
    def test_masked_year_month(self, text, lower, upper):
        assert _bounds(self.parser.parse(TextCursor(text))) == (lower, upper)

    @pytest.mark.parametrize("text,lower,upper", [
        ("2004-06-XX", YearMonthDay(2004, 6, 1), YearMonthDay(2004, 6, 30)),
        ("2004-02-XX", YearMonthDay(2004, 2, 1), YearMonthDay(2004, 2, 29)),
        ("2003-02-XX", YearMonthDay(2003, 2, 1), YearMonthDay(2003, 2, 28)),
        ("2004-XX-XX", YearMonthDay(2004, 1, 1), YearMonthDay(2004, 12, 31)),
        ("20XX-XX-XX", YearMonthDay(2000, 1, 1), YearMonthDay(2099, 12, 31)),
        ("200X-XX-15", YearMonthDay(2000, 1, 15), YearMonthDay(2009, 12, 15)),
        ("1752-09-XX", YearMonthDay(1752, 9, 1), YearMonthDay(1752, 9, 30)),
    ])
    def test_masked_days(self, text, lower, upper):
        """Test that a masked day ends on the last day of the upper month."""
        assert _bounds(self.parser.parse(TextCursor(text))) == (lower, upper)

    def test_last_day_follows_upper_bound_year(self):
        """Test February of a masked year uses the upper year's length."""
        lower, upper = _bounds(self.parser.parse(TextCursor("199X-02-XX")))
        assert lower == YearMonthDay(1990, Month.FEBRUARY, 1)
        assert upper == YearMonthDay(1999, Month.FEBRUARY, 28)

    @pytest.mark.parametrize("text", [
        "2004",
        "2004-06",
        "2004-06-11",
    ])
    def test_unmasked_dates_do_not_match(self, text):
        cursor = TextCursor(text)
        assert self.parser.attempt(cursor) is None
        assert cursor.pos == 0

    @pytest.mark.parametrize("text", [
        "199",
        "19XXX",
        "2004-1X",
        "2004-13-XX",
        "2004-XX-3X",
        "2004-XX-32",
        "19XX-02-29",
        "2004-X",
        "2004-XX-X",
    ])
    def test_invalid_masks(self, text):
        """Test partial month/day masks, bad widths and impossible days."""
        assert self.parser.attempt(TextCursor(text)) is None
