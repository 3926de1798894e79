"""Line-cursor block scanner.

Splits the source into lines once, then walks them with an explicit
cursor. At each non-blank line the detectors run in fixed precedence and
the first match decides the token(s) and how far the cursor moves. The
cursor only moves forward, so every line is consumed exactly once.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from marklet.lexer.detection import Detection
from marklet.lexer.detectors import (
    FenceDetectorMixin,
    HeadingDetectorMixin,
    ListDetectorMixin,
    MediaDetectorMixin,
    QuoteDetectorMixin,
    TableDetectorMixin,
    ThematicDetectorMixin,
)
from marklet.location import LineSpan
from marklet.tokens import Block, Paragraph


class Scanner(
    HeadingDetectorMixin,
    ThematicDetectorMixin,
    ListDetectorMixin,
    QuoteDetectorMixin,
    MediaDetectorMixin,
    TableDetectorMixin,
    FenceDetectorMixin,
):
    """Block scanner producing a tuple of Block tokens.

    Detector precedence (first match wins):

    1. heading
    2. horizontal rule
    3. ordered / unordered list
    4. blockquote
    5. standalone image / link
    6. table
    7. fenced code
    8. paragraph (one token per line)

    The order resolves lines that fit several patterns, e.g. ``- - -``
    is a rule rather than a list item, and must not change.

    Usage:
        >>> Scanner("# Hello\\n\\nWorld").scan()
        (Heading(level=1, text='Hello'), Paragraph(text='World'))

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = ("_lines", "_stripped")

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: Markdown source text
        """
        self._lines: tuple[str, ...] = tuple(
            line.removesuffix("\r") for line in source.split("\n")
        )
        self._stripped: tuple[str, ...] = tuple(line.strip() for line in self._lines)

    def scan(self) -> tuple[Block, ...]:
        """Scan the whole source into tokens.

        Returns:
            Tokens in source order

        Complexity: O(n) in the number of lines; no detector backtracks.
        """
        detectors = self._detectors()
        tokens: list[Block] = []
        index = 0
        total = len(self._lines)
        while index < total:
            if not self._stripped[index]:
                index += 1
                continue
            detection = self._detect(index, detectors)
            tokens.extend(detection.tokens)
            index = detection.next_index
        return tuple(tokens)

    def _detectors(self) -> tuple[Callable[[int], Detection | None], ...]:
        """Detectors in precedence order."""
        return (
            self._try_detect_heading,
            self._try_detect_thematic_break,
            self._try_detect_list,
            self._try_detect_blockquote,
            self._try_detect_media,
            self._try_detect_table,
            self._try_detect_fence,
        )

    def _detect(
        self, index: int, detectors: tuple[Callable[[int], Detection | None], ...]
    ) -> Detection:
        """Run detectors at index, falling back to a one-line paragraph."""
        for detector in detectors:
            detection = detector(index)
            if detection is not None:
                return detection
        return Detection.single(
            Paragraph(text=self._stripped[index], span=self._span(index, index + 1)),
            index + 1,
        )

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop] (0-indexed, half-open)."""
        return LineSpan.from_indices(start, stop)


def scan(source: str) -> tuple[Block, ...]:
    """Scan Markdown source into block tokens.

    Example:
        >>> scan("1. a\\n2. b")
        (OrderedList(items=('a', 'b')),)
    """
    return Scanner(source).scan()
