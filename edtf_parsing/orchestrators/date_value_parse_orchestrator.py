"""Parse orchestrator for a single date value."""

from typing import List

from edtf_parsing.factory import EdtfParsers
from edtf_parsing.orchestrators.parse_orchestrator import ParseOrchestrator


class DateValueParseOrchestrator(ParseOrchestrator):
    """Parses one date value without qualifiers.

    The season parser runs before the calendar date parser: '2021-21' is
    Spring 2021, while '2021-12' falls through to a year-month.
    """

    def get_parser_steps(self) -> List[EdtfParsers]:
        return [
            EdtfParsers.EXPANDED_YEAR,
            EdtfParsers.SEASON,
            EdtfParsers.CALENDAR_DATE,
        ]
