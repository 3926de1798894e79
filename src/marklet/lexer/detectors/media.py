"""Standalone image and link detector mixin."""

from __future__ import annotations

import re

from marklet.lexer.detection import Detection
from marklet.location import LineSpan
from marklet.tokens import Image, Link

# Whole line, optional trailing period
_STANDALONE_IMAGE = re.compile(r"^!\[([^\]]*)\]\(([^)]+)\)\.?$")
_STANDALONE_LINK = re.compile(r"^\[([^\]]+)\]\(([^)]+)\)\.?$")


class MediaDetectorMixin:
    """Mixin providing detection of lines that are a single image or link.

    A line with any other text around the construct is left for the
    paragraph fallback, where the inline transformer handles it.
    """

    _stripped: tuple[str, ...]

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop]. Implemented by Scanner."""
        raise NotImplementedError

    def _try_detect_media(self, index: int) -> Detection | None:
        """Try to detect a standalone image, then a standalone link."""
        line = self._stripped[index]
        span = self._span(index, index + 1)

        match = _STANDALONE_IMAGE.match(line)
        if match:
            return Detection.single(Image(alt=match.group(1), src=match.group(2), span=span), index + 1)

        match = _STANDALONE_LINK.match(line)
        if match:
            return Detection.single(Link(text=match.group(1), href=match.group(2), span=span), index + 1)

        return None
