"""Syntax highlighting plugin for marklet.

Claims fenced code blocks that carry a language tag the highlighting
backend supports. Everything else (no language, unknown language, no
backend installed, backend failure) falls through to the plain
``<pre><code>`` template.

This plugin is not selectable by name; it is toggled with
``Markdown.enable_syntax_highlighting()``.

"""

from __future__ import annotations

from marklet.highlighting import Highlighter, SimpleHighlighter, highlight
from marklet.tokens import Block, CodeBlock


class SyntaxHighlightPlugin:
    """Render CodeBlock tokens through a highlighting backend.

    Args:
        highlighter: Backend to use; None means the process default
            (Pygments when installed)

    """

    __slots__ = ("_highlighter",)

    def __init__(self, highlighter: Highlighter | SimpleHighlighter | None = None) -> None:
        self._highlighter = highlighter

    @property
    def name(self) -> str:
        return "highlight"

    def try_render(self, token: Block) -> str | None:
        if not isinstance(token, CodeBlock) or not token.language:
            return None
        result = highlight(token.code, token.language, highlighter=self._highlighter)
        return result.html if result.supported else None
