"""Parser for a single date or a comma-separated list of dates."""

from __future__ import annotations

from edtf_parsing.config import ParserConfig
from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import EdtfList, Single
from edtf_parsing.factory import EdtfParserFactory, EdtfParsers
from edtf_parsing.strategy import EdtfParserStrategy


class ListOrSingleParser(EdtfParserStrategy):
    """Parses one qualified date, or several separated by commas.

    Spaces and tabs around the commas are ignored.

    Examples:
    - 2020?              -> Single
    - 2020, 2021-05~     -> EdtfList of two Singles
    """

    def __init__(self, config: ParserConfig | None = None):
        super().__init__(config)
        self._annotated = EdtfParserFactory.get_parser(EdtfParsers.ANNOTATED_DATE, self.config)

    def parse(self, cursor: TextCursor) -> Single | EdtfList | None:
        first = self._annotated.attempt(cursor)
        if first is None:
            return None

        items = [Single(first)]
        while True:
            before_separator = cursor.mark()
            cursor.skip_blanks()
            if not cursor.literal(","):
                cursor.reset(before_separator)
                break
            cursor.skip_blanks()
            item = self._annotated.attempt(cursor)
            if item is None:
                return None
            items.append(Single(item))

        if len(items) == 1:
            return items[0]
        return EdtfList(tuple(items))
