"""Abstract base class for EDTF parsing strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from edtf_parsing.config import ParserConfig
from edtf_parsing.cursor import TextCursor


class EdtfParserStrategy(ABC):
    """Interface for EDTF parsing strategies.

    A strategy reads one grammar production starting at the cursor position.
    On success it returns the parsed value with the cursor moved past it; on
    failure it returns None and the cursor is back where it started.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()

    def attempt(self, cursor: TextCursor) -> Any | None:
        """Run `parse`, rewinding the cursor if it does not match."""
        start = cursor.mark()
        result = self.parse(cursor)
        if result is None:
            cursor.reset(start)
        return result

    @staticmethod
    def _to_int(digits: str) -> int | None:
        """Convert scanned digits, treating oversized runs as no match."""
        try:
            return int(digits)
        except ValueError:
            return None

    def _four_digit_year(self, cursor: TextCursor) -> int | None:
        """Read a signed year written with exactly four digits.

        Shorter years such as '20' are rejected because they would be
        ambiguous with season codes.
        """
        start = cursor.mark()
        text = cursor.signed_integer()
        if text is None:
            return None
        if len(text.lstrip("+-")) != 4:
            cursor.reset(start)
            return cursor.expect("4-digit year")
        # '-0000' is accepted and read as year 0
        return int(text)

    @abstractmethod
    def parse(self, cursor: TextCursor) -> Any | None:
        """Parse one production at the cursor, or return None if it doesn't match.

        Args:
            cursor: The cursor positioned at the start of the production

        Returns:
            The parsed value if parsing succeeds, None otherwise
        """
        pass
