"""ATX heading detector mixin."""

from __future__ import annotations

import re

from marklet.lexer.detection import Detection
from marklet.location import LineSpan
from marklet.tokens import Heading

_ATX_HEADING = re.compile(r"^(#{1,6})\s+(.*)$")


def match_heading(line: str) -> Heading | None:
    """Classify a single trimmed line as a heading.

    Shared with the streaming parser, which has no line cursor.

    Examples:
        >>> match_heading("### Setup")
        Heading(level=3, text='Setup')
        >>> match_heading("#hashtag") is None
        True
    """
    match = _ATX_HEADING.match(line)
    if match is None:
        return None
    return Heading(level=len(match.group(1)), text=match.group(2))


class HeadingDetectorMixin:
    """Mixin providing ATX heading detection."""

    _stripped: tuple[str, ...]

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop]. Implemented by Scanner."""
        raise NotImplementedError

    def _try_detect_heading(self, index: int) -> Detection | None:
        """Try to detect a heading: 1-6 ``#`` followed by whitespace.

        Always consumes exactly one line.
        """
        match = _ATX_HEADING.match(self._stripped[index])
        if match is None:
            return None
        token = Heading(
            level=len(match.group(1)),
            text=match.group(2),
            span=self._span(index, index + 1),
        )
        return Detection.single(token, index + 1)
