"""Detector result type."""

from __future__ import annotations

from dataclasses import dataclass

from marklet.tokens import Block


@dataclass(frozen=True, slots=True)
class Detection:
    """Outcome of a detector that matched at the cursor.

    Attributes:
        tokens: Tokens produced from the consumed lines, in order
        next_index: Index of the first line the detector did not consume

    """

    tokens: tuple[Block, ...]
    next_index: int

    @classmethod
    def single(cls, token: Block, next_index: int) -> Detection:
        """Detection producing exactly one token."""
        return cls(tokens=(token,), next_index=next_index)
