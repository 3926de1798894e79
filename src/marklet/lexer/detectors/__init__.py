"""Block detectors for the marklet scanner.

Each detector is a mixin method ``_try_detect_*(index)`` that either
declines (returns None) or returns a Detection holding the tokens it
produced and the index of the first line it did not consume. Detectors
never move the scanner's cursor themselves.
"""

from marklet.lexer.detectors.fence import FenceDetectorMixin
from marklet.lexer.detectors.heading import HeadingDetectorMixin
from marklet.lexer.detectors.list import ListDetectorMixin
from marklet.lexer.detectors.media import MediaDetectorMixin
from marklet.lexer.detectors.quote import QuoteDetectorMixin
from marklet.lexer.detectors.table import TableDetectorMixin
from marklet.lexer.detectors.thematic import ThematicDetectorMixin

__all__ = [
    "FenceDetectorMixin",
    "HeadingDetectorMixin",
    "ListDetectorMixin",
    "MediaDetectorMixin",
    "QuoteDetectorMixin",
    "TableDetectorMixin",
    "ThematicDetectorMixin",
]
