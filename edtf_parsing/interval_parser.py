"""Parser for start/end intervals."""

from __future__ import annotations

from edtf_parsing.config import ParserConfig
from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import AnnotatedDate, Interval
from edtf_parsing.factory import EdtfParserFactory, EdtfParsers
from edtf_parsing.strategy import EdtfParserStrategy

OPEN_TOKEN = ".."
OPEN_KEYWORD = "open"


class IntervalParser(EdtfParserStrategy):
    """Parses '<start>/<end>' intervals.

    Each side is a date, the open marker '..' (or the word 'open'), or
    nothing at all for an unknown side:
    - 2004-06/2006-08
    - 2020/..
    - ../2021-05-17
    - /2021-05-17
    - 2020/

    Open and unknown sides are both stored as None. At least one side
    has to be a date.
    """

    def __init__(self, config: ParserConfig | None = None):
        super().__init__(config)
        self._annotated = EdtfParserFactory.get_parser(EdtfParsers.ANNOTATED_DATE, self.config)
        self._open_tokens = [OPEN_TOKEN]
        if self.config.accept_open_keyword:
            self._open_tokens.append(OPEN_KEYWORD)

    def parse(self, cursor: TextCursor) -> Interval | None:
        start = self._side(cursor)
        if not cursor.literal("/"):
            return None
        end = self._side(cursor)

        if start is None and end is None:
            return cursor.expect("a date on at least one side of '/'")
        return Interval(start, end)

    def _side(self, cursor: TextCursor) -> AnnotatedDate | None:
        date = self._annotated.attempt(cursor)
        if date is not None:
            return date
        for token in self._open_tokens:
            if cursor.literal(token):
                return None
        # Empty side
        return None
