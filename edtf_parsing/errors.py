"""Exceptions raised when EDTF text cannot be parsed."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseErrorEntry:
    """Where parsing got furthest, and what it was looking for there."""
    position: int
    expected: tuple[str, ...]

    def describe(self) -> str:
        if not self.expected:
            return f"unexpected input at position {self.position}"
        return f"expected {' or '.join(self.expected)} at position {self.position}"


class EdtfParseError(ValueError):
    """Raised when a string is not a supported EDTF value."""

    def __init__(self, text: str, entries: list[ParseErrorEntry]):
        self.text = text
        self.entries = list(entries)
        details = "; ".join(entry.describe() for entry in self.entries) or "no match"
        super().__init__(f"Invalid EDTF string {text!r}: {details}")
