"""Entry points for parsing and formatting EDTF strings."""

from __future__ import annotations

import logging
from functools import lru_cache

from edtf_parsing.config import ParserConfig, load_parser_config
from edtf_parsing.cursor import TextCursor
from edtf_parsing.edtf import Edtf
from edtf_parsing.errors import EdtfParseError, ParseErrorEntry
from edtf_parsing.formatter import format_edtf
from edtf_parsing.orchestrators.parse_orchestrator import ParseOrchestrator
from edtf_parsing.orchestrators.parse_orchestrator_factory import (
    ParseOrchestratorFactory,
    ParseOrchestratorTypes,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _orchestrator(config: ParserConfig) -> ParseOrchestrator:
    # Orchestrators keep no per-call state, so one per config is shared.
    return ParseOrchestratorFactory.get_orchestrator(ParseOrchestratorTypes.EDTF, config)


def parse_edtf(text: str, config: ParserConfig | None = None) -> Edtf:
    """Parse an EDTF string.

    Args:
        text: The EDTF string, e.g. '2004-06~', '2020/..' or '19XX'
        config: Parser configuration; loaded from the environment when omitted

    Returns:
        A Single, Interval or EdtfList

    Raises:
        EdtfParseError: If the text is not a supported EDTF value
    """
    if config is None:
        config = load_parser_config()

    if config.max_input_length and len(text) > config.max_input_length:
        entry = ParseErrorEntry(position=config.max_input_length, expected=("input within length limit",))
        logger.debug(f"Rejecting EDTF input of {len(text)} characters")
        raise EdtfParseError(text, [entry])

    cursor = TextCursor(text)
    result = _orchestrator(config).parse(cursor)
    if result is None:
        entry = cursor.error_entry()
        logger.debug(f"Could not parse EDTF {text!r}: {entry.describe()}")
        raise EdtfParseError(text, [entry])
    return result


def try_parse_edtf(text: str, config: ParserConfig | None = None) -> Edtf | None:
    """Parse an EDTF string, returning None instead of raising on failure."""
    try:
        return parse_edtf(text, config)
    except EdtfParseError:
        return None


class EdtfParser:
    """Module for parsing EDTF strings and writing them back out."""

    @staticmethod
    def parse(text: str, config: ParserConfig | None = None) -> Edtf:
        return parse_edtf(text, config)

    @staticmethod
    def try_parse(text: str, config: ParserConfig | None = None) -> Edtf | None:
        return try_parse_edtf(text, config)

    @staticmethod
    def format(value: Edtf) -> str:
        return format_edtf(value)
