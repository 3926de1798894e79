"""Horizontal rule detector mixin."""

from __future__ import annotations

import re

from marklet.lexer.detection import Detection
from marklet.location import LineSpan
from marklet.tokens import HorizontalRule

# Up to 3 leading spaces, then 3+ of one rule char with optional spaces/tabs between
_THEMATIC_BREAK = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")


class ThematicDetectorMixin:
    """Mixin providing horizontal rule detection."""

    _lines: tuple[str, ...]

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop]. Implemented by Scanner."""
        raise NotImplementedError

    def _try_detect_thematic_break(self, index: int) -> Detection | None:
        """Try to detect a horizontal rule.

        Checked against the untrimmed line so that the leading-indent limit
        applies. Runs before list detection: ``- - -`` is a rule, not a
        one-item list.
        """
        if _THEMATIC_BREAK.match(self._lines[index]) is None:
            return None
        return Detection.single(HorizontalRule(span=self._span(index, index + 1)), index + 1)
