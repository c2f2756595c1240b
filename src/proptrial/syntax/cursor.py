"""Immutable scan position over a charset pattern.

The charset compiler walks patterns with a Cursor value: moving returns a new
cursor, so every loop iteration makes visible progress and a lookahead can
never disturb the scan. Only peek() returns None; reading past the end with
current is an error.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position within a pattern string.

    Example:
        >>> cursor = Cursor("a-z", 0)
        >>> cursor.current, cursor.advance().current
        ('a', '-')
        >>> cursor.advance(2).is_last
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Whether the scan has consumed the whole pattern."""
        return self.pos >= len(self.source)

    @property
    def is_last(self) -> bool:
        return self.pos == len(self.source) - 1

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: If the pattern is exhausted
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at pos + offset (negative looks back), None outside the pattern."""
        index = self.pos + offset
        if 0 <= index < len(self.source):
            return self.source[index]
        return None

    def advance(self, count: int = 1) -> "Cursor":
        """Cursor moved forward by count, stopping at the end of the pattern."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))
