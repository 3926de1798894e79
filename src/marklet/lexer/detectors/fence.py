"""Fenced code block detector mixin."""

from __future__ import annotations

from marklet.lexer.detection import Detection
from marklet.location import LineSpan
from marklet.tokens import Block, CodeBlock, Paragraph
from marklet.utils.logger import get_logger

logger = get_logger(__name__)

FENCE_MARKER = "```"


def is_fence(line: str) -> bool:
    """Check whether a trimmed line opens or closes a fenced code block."""
    return line.startswith(FENCE_MARKER)


def fence_language(line: str) -> str | None:
    """Extract the language tag from a trimmed opening fence line.

    Examples:
        >>> fence_language("```python title")
        'python'
        >>> fence_language("```") is None
        True
    """
    info = line.lstrip("`").strip()
    return info.split()[0] if info else None


class FenceDetectorMixin:
    """Mixin providing fenced code block detection."""

    _lines: tuple[str, ...]
    _stripped: tuple[str, ...]

    def _span(self, start: int, stop: int) -> LineSpan:
        """Span for lines[start:stop]. Implemented by Scanner."""
        raise NotImplementedError

    def _try_detect_fence(self, index: int) -> Detection | None:
        """Try to detect a fenced code block.

        Content lines are taken raw, indentation and blank lines included,
        up to the first trimmed line starting with the fence marker.

        Without a closing fence no CodeBlock is produced: the opening line
        and every later non-blank line become one Paragraph each.
        """
        opening = self._stripped[index]
        if not is_fence(opening):
            return None

        total = len(self._lines)
        for cursor in range(index + 1, total):
            if is_fence(self._stripped[cursor]):
                token = CodeBlock(
                    language=fence_language(opening),
                    lines=self._lines[index + 1 : cursor],
                    span=self._span(index, cursor + 1),
                )
                return Detection.single(token, cursor + 1)

        logger.debug("Unterminated code fence at line %d; rendering as paragraphs", index + 1)
        paragraphs: list[Block] = [
            Paragraph(text=self._stripped[i], span=self._span(i, i + 1))
            for i in range(index, total)
            if self._stripped[i]
        ]
        return Detection(tokens=tuple(paragraphs), next_index=total)
