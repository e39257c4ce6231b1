"""Parser for Y-prefixed expanded years."""

import logging

from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import Year
from edtf_parsing.strategy import EdtfParserStrategy

logger = logging.getLogger(__name__)


class ExpandedYearParser(EdtfParserStrategy):
    """Parses years written with a leading 'Y' and any number of digits.

    Examples: Y12034, Y-170000, Y+5

    Nothing date-like may follow: 'Y12034-05' and the exponential form
    'Y17E7' are rejected as a whole.
    """

    def parse(self, cursor: TextCursor) -> Year | None:
        if not cursor.literal("Y"):
            return None

        digits = cursor.signed_integer()
        if digits is None:
            return None

        following = cursor.peek()
        if following == "-" or following.isalnum():
            logger.debug(f"Rejecting expanded year followed by {following!r} at {cursor.pos}")
            return cursor.expect("end of expanded year")

        year = self._to_int(digits)
        if year is None:
            return cursor.expect("a year within integer limits")
        return Year(year)
