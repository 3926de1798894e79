"""Scanner operating modes.

The streaming parser switches between modes as fence lines arrive:
- BLOCK: Between blocks, classifying each line
- CODE_FENCE: Inside a fenced code block, passing lines through verbatim
"""

from __future__ import annotations

from enum import Enum, auto


class ScannerMode(Enum):
    """Scanner operating modes."""

    BLOCK = auto()  # Between blocks
    CODE_FENCE = auto()  # Inside fenced code block
