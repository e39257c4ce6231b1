"""Position-tracking cursor with the low-level scanners every parser builds on.

A scanner either consumes input and returns what it read, or returns None and
leaves the position untouched. Callers that combine several scanners take a
`mark()` first and `reset()` to it when a later step fails.
"""

from __future__ import annotations

from edtf_parsing.errors import ParseErrorEntry

MASK = "X"
BLANKS = " \t"


class TextCursor:
    """Reads a string left to right and remembers the furthest failure."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._furthest = 0
        self._expected: list[str] = []

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int) -> None:
        self.pos = mark

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the next character, or an empty string at the end."""
        return self.text[self.pos:self.pos + 1]

    def advance(self, n: int = 1) -> None:
        self.pos = min(self.pos + n, len(self.text))

    def remaining(self) -> str:
        return self.text[self.pos:]

    def expect(self, what: str, at: int | None = None) -> None:
        """Record that `what` was expected at a position (default: here).

        Always returns None so a failing scanner can `return cursor.expect(...)`.
        """
        position = self.pos if at is None else at
        if position > self._furthest:
            self._furthest = position
            self._expected = []
        if position == self._furthest and what not in self._expected:
            self._expected.append(what)
        return None

    def error_entry(self) -> ParseErrorEntry:
        return ParseErrorEntry(position=self._furthest, expected=tuple(self._expected))

    # Scanners

    def literal(self, token: str) -> bool:
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        self.expect(repr(token))
        return False

    def skip_blanks(self) -> None:
        """Skip spaces and tabs."""
        while self.peek() and self.peek() in BLANKS:
            self.pos += 1

    def _digits(self) -> str:
        start = self.pos
        end = start
        while end < len(self.text) and self.text[end].isdigit() and self.text[end].isascii():
            end += 1
        return self.text[start:end]

    def signed_integer(self) -> str | None:
        """Read an optional +/- sign and one or more digits, sign included."""
        start = self.pos
        sign = ""
        if self.peek() in ("+", "-"):
            sign = self.peek()
            self.pos += 1
        digits = self._digits()
        if not digits:
            self.expect("digit")
            self.reset(start)
            return None
        self.pos += len(digits)
        return sign + digits

    def digit_run(self, n: int) -> str | None:
        """Read exactly `n` characters that are digits or the mask character."""
        start = self.pos
        end = start
        while end < len(self.text) and _is_digit_or_mask(self.text[end]):
            end += 1
        if end - start != n:
            return self.expect(f"{n} digits or {MASK}", at=start + min(end - start, n))
        self.pos = end
        return self.text[start:end]

    def two_digit_bounded(self, lo: int, hi: int) -> int | None:
        """Read exactly two digits whose value lies within [lo, hi]."""
        start = self.pos
        digits = self._digits()
        if len(digits) != 2:
            return self.expect(f"two digits in {lo:02d}..{hi:02d}", at=start + min(len(digits), 2))
        value = int(digits)
        if value < lo or value > hi:
            return self.expect(f"two digits in {lo:02d}..{hi:02d}")
        self.pos += 2
        return value


def _is_digit_or_mask(ch: str) -> bool:
    return ch == MASK or (ch.isdigit() and ch.isascii())
