"""Factory for creating EDTF parser strategies."""

from enum import Enum, auto

from edtf_parsing.config import ParserConfig
from edtf_parsing.strategy import EdtfParserStrategy


class EdtfParsers(Enum):
    """Enumeration of available EDTF parsing strategies."""
    EXPANDED_YEAR = auto()
    SEASON = auto()
    CALENDAR_DATE = auto()
    QUALIFIERS = auto()
    ANNOTATED_DATE = auto()
    MASKED_INTERVAL = auto()
    INTERVAL = auto()
    LIST_OR_SINGLE = auto()


class EdtfParserFactory:
    """Factory for creating EdtfParserStrategy instances."""

    @staticmethod
    def get_parser(strategy: EdtfParsers, config: ParserConfig | None = None) -> EdtfParserStrategy:
        """Get a parser instance for the specified strategy.

        Args:
            strategy: The type of parser to create
            config: Parser configuration passed on to the strategy

        Returns:
            An instance of the requested parser strategy

        Raises:
            ValueError: If the strategy is unknown
        """
        # Import here to avoid circular dependencies
        from edtf_parsing.expanded_year_parser import ExpandedYearParser
        from edtf_parsing.season_parser import SeasonParser
        from edtf_parsing.calendar_date_parser import CalendarDateParser
        from edtf_parsing.qualifier_parser import QualifierParser
        from edtf_parsing.annotated_date_parser import AnnotatedDateParser
        from edtf_parsing.masked_date_parser import MaskedDateParser
        from edtf_parsing.interval_parser import IntervalParser
        from edtf_parsing.list_or_single_parser import ListOrSingleParser

        if strategy == EdtfParsers.EXPANDED_YEAR:
            return ExpandedYearParser(config)
        elif strategy == EdtfParsers.SEASON:
            return SeasonParser(config)
        elif strategy == EdtfParsers.CALENDAR_DATE:
            return CalendarDateParser(config)
        elif strategy == EdtfParsers.QUALIFIERS:
            return QualifierParser(config)
        elif strategy == EdtfParsers.ANNOTATED_DATE:
            return AnnotatedDateParser(config)
        elif strategy == EdtfParsers.MASKED_INTERVAL:
            return MaskedDateParser(config)
        elif strategy == EdtfParsers.INTERVAL:
            return IntervalParser(config)
        elif strategy == EdtfParsers.LIST_OR_SINGLE:
            return ListOrSingleParser(config)
        else:
            raise ValueError(f"Unknown strategy: {strategy}")
