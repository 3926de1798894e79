"""Pipe table detector mixin."""

from __future__ import annotations

import re

from marklet.lexer.detection import Detection
from marklet.location import LineSpan
from marklet.tokens import Table
from marklet.utils.logger import get_logger

logger = get_logger(__name__)

_BOUNDED_ROW = re.compile(r"^\|.*\|$")

# Header + delimiter
MIN_TABLE_ROWS = 2


class TableDetectorMixin:
    """Mixin providing pipe table detection."""

    _stripped: tuple[str, ...]

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop]. Implemented by Scanner."""
        raise NotImplementedError

    def _try_detect_table(self, index: int) -> Detection | None:
        """Try to detect a table starting at index.

        The first row must be bounded by pipes on both ends. Following rows
        only need to start with a pipe, which tolerates rows like
        ``| Missing Header``. A run shorter than MIN_TABLE_ROWS declines,
        leaving its first line to the later detectors.
        """
        if _BOUNDED_ROW.match(self._stripped[index]) is None:
            return None

        cursor = index + 1
        total = len(self._stripped)
        while cursor < total and self._stripped[cursor].startswith("|"):
            cursor += 1

        if cursor - index < MIN_TABLE_ROWS:
            logger.debug("Table at line %d has no delimiter row; not a table", index + 1)
            return None

        token = Table(raw_rows=self._stripped[index:cursor], span=self._span(index, cursor))
        return Detection.single(token, cursor)
