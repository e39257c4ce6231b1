"""Parser for a date value followed by its qualifier markers."""

from edtf_parsing.config import ParserConfig
from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import AnnotatedDate
from edtf_parsing.strategy import EdtfParserStrategy


class AnnotatedDateParser(EdtfParserStrategy):
    """Parses one date value (expanded year, season or calendar date)
    and the '?', '~' or '%' markers after it.

    Example: 2004-06~
    """

    def __init__(self, config: ParserConfig | None = None):
        super().__init__(config)
        # Lazy import to avoid circular dependency
        from edtf_parsing.factory import EdtfParserFactory, EdtfParsers
        from edtf_parsing.orchestrators.parse_orchestrator_factory import (
            ParseOrchestratorFactory,
            ParseOrchestratorTypes,
        )

        self._date_values = ParseOrchestratorFactory.get_orchestrator(ParseOrchestratorTypes.DATE_VALUE, self.config)
        self._qualifiers = EdtfParserFactory.get_parser(EdtfParsers.QUALIFIERS, self.config)

    def parse(self, cursor: TextCursor) -> AnnotatedDate | None:
        value = self._date_values.parse(cursor)
        if value is None:
            return None
        uncertain, approximate = self._qualifiers.parse(cursor)
        return AnnotatedDate(value, uncertain=uncertain, approximate=approximate)
