"""Base class for parsers that orchestrate multiple parsing strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List

from edtf_parsing.config import ParserConfig
from edtf_parsing.cursor import TextCursor
from edtf_parsing.factory import EdtfParserFactory, EdtfParsers

logger = logging.getLogger(__name__)


class ParseOrchestrator(ABC):
    """Base class for parsers that try multiple parsing strategies in order.

    Subclasses define the order and selection of strategies to try. The first
    strategy that matches wins; a strategy that fails leaves the cursor where
    it was, so the next one sees the same input.
    """

    # When set, a match only counts if it consumed the whole input.
    require_end = False

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self._steps = [
            (step, EdtfParserFactory.get_parser(step, self.config))
            for step in self.get_parser_steps()
        ]

    @abstractmethod
    def get_parser_steps(self) -> List[EdtfParsers]:
        """Return the ordered list of parser strategies to try.

        Returns:
            List of EdtfParsers enum values in the order they should be attempted.
        """
        pass

    def parse(self, cursor: TextCursor) -> Any | None:
        """Parse at the cursor with the first strategy that matches.

        Args:
            cursor: The cursor to read from

        Returns:
            The value produced by the matching strategy, or None
        """
        start = cursor.mark()
        for step, parser in self._steps:
            result = parser.attempt(cursor)
            if result is None:
                continue
            if self.require_end and not cursor.at_end():
                logger.debug(f"{step.name} left {cursor.remaining()!r} unparsed, trying next strategy")
                cursor.expect("end of input")
                cursor.reset(start)
                continue
            logger.debug(f"{step.name} matched {cursor.text[start:cursor.pos]!r}")
            return result
        return None
