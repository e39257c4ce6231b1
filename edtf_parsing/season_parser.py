"""Parser for year-season dates."""

from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import Season, SeasonName
from edtf_parsing.strategy import EdtfParserStrategy


class SeasonParser(EdtfParserStrategy):
    """Parses a four-digit year followed by a season code.

    Examples: 2021-21 (Spring 2021), 1999-24 (Winter 1999)
    """

    def parse(self, cursor: TextCursor) -> Season | None:
        year = self._four_digit_year(cursor)
        if year is None:
            return None
        if not cursor.literal("-"):
            return None

        code = cursor.two_digit_bounded(SeasonName.SPRING, SeasonName.WINTER)
        if code is None:
            return None

        # Seasons have no day component
        if cursor.peek() == "-":
            return cursor.expect("end of season")

        return Season(year, SeasonName(code))
