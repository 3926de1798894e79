"""Line span tracking for block tokens.

Every token the scanner emits records which input lines it came from.
Used for debugging output and for asserting the scanner's coverage
invariants in tests.

Thread Safety:
LineSpan is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Inclusive range of 1-indexed input lines.

    Attributes:
        lineno: First line of the token
        end_lineno: Last line of the token (equal to lineno for one-line tokens)

    Examples:
        >>> LineSpan(3, 5)
        LineSpan(lineno=3, end_lineno=5)
        >>> str(LineSpan(2, 2))
        '2'
    """

    lineno: int
    end_lineno: int

    def __str__(self) -> str:
        if self.lineno == self.end_lineno:
            return str(self.lineno)
        return f"{self.lineno}-{self.end_lineno}"

    def __len__(self) -> int:
        """Number of lines covered."""
        return self.end_lineno - self.lineno + 1

    @classmethod
    def from_indices(cls, start: int, stop: int) -> LineSpan:
        """Build a span from 0-indexed half-open line indices.

        Args:
            start: Index of the first consumed line
            stop: Index one past the last consumed line
        """
        return cls(lineno=start + 1, end_lineno=stop)
