"""Parser for trailing uncertainty/approximation markers."""

from functools import reduce

from edtf_parsing.cursor import TextCursor
from edtf_parsing.strategy import EdtfParserStrategy

# marker -> (uncertain, approximate)
QUALIFIER_FLAGS = {
    "?": (True, False),
    "~": (False, True),
    "%": (True, True),
}


def _combine(flags: tuple[bool, bool], marker: str) -> tuple[bool, bool]:
    uncertain, approximate = QUALIFIER_FLAGS[marker]
    return (flags[0] or uncertain, flags[1] or approximate)


class QualifierParser(EdtfParserStrategy):
    """Reads any run of '?', '~' and '%' markers into (uncertain, approximate).

    Markers may come in any order and may repeat. An empty run is a match
    with both flags off, so this parser never fails.
    """

    def parse(self, cursor: TextCursor) -> tuple[bool, bool]:
        markers = []
        while cursor.peek() and cursor.peek() in QUALIFIER_FLAGS:
            markers.append(cursor.peek())
            cursor.advance()
        return reduce(_combine, markers, (False, False))
