"""List detector mixin."""

from __future__ import annotations

import re

from marklet.lexer.detection import Detection
from marklet.location import LineSpan
from marklet.tokens import OrderedList, UnorderedList

_ORDERED_ITEM = re.compile(r"^\d+\.\s+(.*)$")
# Both bullet markers belong to one kind: "* a" followed by "- b" is one list
_UNORDERED_ITEM = re.compile(r"^[-*]\s+(.*)$")


class ListDetectorMixin:
    """Mixin providing ordered and unordered list detection."""

    _stripped: tuple[str, ...]

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop]. Implemented by Scanner."""
        raise NotImplementedError

    def _try_detect_list(self, index: int) -> Detection | None:
        """Try to detect a list run starting at index.

        Greedy: collects every following line of the same list kind and
        stops at the first blank or non-matching line. Item text is the
        trimmed line with its marker removed.
        """
        line = self._stripped[index]
        if _ORDERED_ITEM.match(line):
            pattern, token_class = _ORDERED_ITEM, OrderedList
        elif _UNORDERED_ITEM.match(line):
            pattern, token_class = _UNORDERED_ITEM, UnorderedList
        else:
            return None

        items: list[str] = []
        cursor = index
        total = len(self._stripped)
        while cursor < total:
            match = pattern.match(self._stripped[cursor])
            if match is None:
                break
            items.append(match.group(1))
            cursor += 1

        token = token_class(items=tuple(items), span=self._span(index, cursor))
        return Detection.single(token, cursor)
