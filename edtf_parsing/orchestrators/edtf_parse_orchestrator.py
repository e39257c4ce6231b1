"""Parse orchestrator for complete EDTF strings."""

from typing import List

from edtf_parsing.factory import EdtfParsers
from edtf_parsing.orchestrators.parse_orchestrator import ParseOrchestrator


class EdtfParseOrchestrator(ParseOrchestrator):
    """Parses a whole EDTF string into a Single, Interval or EdtfList.

    Priority order (highest to lowest):
    1. Masked dates ('19XX'), whose leading digits look like a plain date
    2. Intervals ('2004/2006', '2020/..')
    3. Lists and single dates ('2004, 2006', '2004?')

    Every strategy must consume the entire input; a strategy that matches
    only a prefix is abandoned in favour of the next one.
    """

    require_end = True

    def get_parser_steps(self) -> List[EdtfParsers]:
        return [
            EdtfParsers.MASKED_INTERVAL,
            EdtfParsers.INTERVAL,
            EdtfParsers.LIST_OR_SINGLE,
        ]
