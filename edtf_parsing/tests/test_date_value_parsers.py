"""Unit tests for the expanded year, season and calendar date parsers."""

import pytest
from edtf_parsing.calendar_date_parser import CalendarDateParser
from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import Month, Season, SeasonName, Year, YearMonth, YearMonthDay
from edtf_parsing.expanded_year_parser import ExpandedYearParser
from edtf_parsing.season_parser import SeasonParser


class TestExpandedYearParser:
    """Test cases for ExpandedYearParser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = ExpandedYearParser()

    @pytest.mark.parametrize("text,expected", [
        ("Y12034", 12034),
        ("Y-170000", -170000),
        ("Y+5", 5),
        ("Y2020", 2020),
    ])
    def test_expanded_years(self, text, expected):
        cursor = TextCursor(text)
        assert self.parser.parse(cursor) == Year(expected)
        assert cursor.at_end()

    def test_qualifier_may_follow(self):
        """Test that the year stops before a qualifier marker."""
        cursor = TextCursor("Y12034?")
        assert self.parser.parse(cursor) == Year(12034)
        assert cursor.peek() == "?"

    @pytest.mark.parametrize("text", [
        "Y17E7",
        "Y12034-05",
        "Y12034-21",
        "12034",
        "Y",
        "y12034",
    ])
    def test_rejected(self, text):
        """Test exponential years, suffixes and missing prefixes."""
        assert self.parser.attempt(TextCursor(text)) is None


class TestSeasonParser:
    """Test cases for SeasonParser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = SeasonParser()

    @pytest.mark.parametrize("text,year,season", [
        ("2021-21", 2021, SeasonName.SPRING),
        ("2021-22", 2021, SeasonName.SUMMER),
        ("1999-23", 1999, SeasonName.AUTUMN),
        ("-0044-24", -44, SeasonName.WINTER),
    ])
    def test_seasons(self, text, year, season):
        cursor = TextCursor(text)
        assert self.parser.parse(cursor) == Season(year, season)
        assert cursor.at_end()

    @pytest.mark.parametrize("text", [
        "2021-12",
        "2021-25",
        "20-21",
        "2021-21-05",
        "Y12021-21",
    ])
    def test_rejected(self, text):
        """Test month codes, short years, trailing days and expanded years."""
        cursor = TextCursor(text)
        assert self.parser.attempt(cursor) is None
        assert cursor.pos == 0


class TestCalendarDateParser:
    """Test cases for CalendarDateParser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = CalendarDateParser()

    @pytest.mark.parametrize("text,expected", [
        ("2020", Year(2020)),
        ("0000", Year(0)),
        ("-0044", Year(-44)),
        ("+2020", Year(2020)),
        ("2020-05", YearMonth(2020, Month.MAY)),
        ("2020-05-17", YearMonthDay(2020, Month.MAY, 17)),
        ("2000-02-29", YearMonthDay(2000, Month.FEBRUARY, 29)),
        ("1752-09-02", YearMonthDay(1752, Month.SEPTEMBER, 2)),
        ("1752-09-14", YearMonthDay(1752, Month.SEPTEMBER, 14)),
        ("-0000-01-01", YearMonthDay(0, Month.JANUARY, 1)),
    ])
    def test_valid_dates(self, text, expected):
        cursor = TextCursor(text)
        assert self.parser.parse(cursor) == expected
        assert cursor.at_end()

    @pytest.mark.parametrize("text", [
        "20",
        "202",
        "20201",
        "2020-5",
        "2020-05-7",
        "2016-13-08",
        "2016-00",
        "2016-02-39",
        "2001-02-29",
        "2021-04-31",
        "2020-05-00",
    ])
    def test_invalid_dates(self, text):
        """Test bad widths, out-of-range months and days that don't exist."""
        cursor = TextCursor(text)
        assert self.parser.attempt(cursor) is None
        assert cursor.pos == 0

    @pytest.mark.parametrize("day", range(3, 14))
    def test_calendar_reform_gap(self, day):
        """Test that the days skipped in September 1752 are rejected."""
        assert self.parser.attempt(TextCursor(f"1752-09-{day:02d}")) is None

    def test_stops_before_interval_separator(self):
        cursor = TextCursor("2020-05/2021")
        assert self.parser.parse(cursor) == YearMonth(2020, Month.MAY)
        assert cursor.peek() == "/"
