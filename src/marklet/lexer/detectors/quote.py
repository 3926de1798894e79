"""Blockquote detector mixin."""

from __future__ import annotations

import re

from marklet.lexer.detection import Detection
from marklet.location import LineSpan
from marklet.tokens import Blockquote

_QUOTE_MARKER = re.compile(r"^> ?")


class QuoteDetectorMixin:
    """Mixin providing blockquote detection."""

    _stripped: tuple[str, ...]

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop]. Implemented by Scanner."""
        raise NotImplementedError

    def _try_detect_blockquote(self, index: int) -> Detection | None:
        """Try to detect a run of ``>`` lines.

        Strips the marker and one following space from each line and joins
        the remainders with newlines. Nested ``>`` markers are kept as text.
        """
        if not self._stripped[index].startswith(">"):
            return None

        quoted: list[str] = []
        cursor = index
        total = len(self._stripped)
        while cursor < total and self._stripped[cursor].startswith(">"):
            quoted.append(_QUOTE_MARKER.sub("", self._stripped[cursor], count=1))
            cursor += 1

        token = Blockquote(text="\n".join(quoted), span=self._span(index, cursor))
        return Detection.single(token, cursor)
