"""Syntax highlighting backend for marklet.

The renderer never highlights code itself. It asks a backend, which
either returns highlighted markup or reports the language as
unsupported, in which case the plain escaped ``<pre><code>`` template is
used. When marklet[syntax] is installed, Pygments is used automatically.

Usage:
    # Automatic with marklet[syntax]
    from marklet import Markdown
    md = Markdown().enable_syntax_highlighting(True)

    # Manual injection
    from marklet.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str | None:
        if language != "sql":
            return None  # unsupported
        return f'<pre class="sql">{escape_html(code)}</pre>'

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from marklet.utils.logger import get_logger
from marklet.utils.text import escape_html

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HighlightResult:
    """Outcome of a highlighting request.

    Attributes:
        supported: False when the backend does not know the language
        html: Complete highlighted markup; empty when unsupported

    """

    supported: bool
    html: str = ""


UNSUPPORTED = HighlightResult(supported=False)


class Highlighter(Protocol):
    """Protocol for syntax highlighting backends.

    Contract:
        - MUST escape HTML entities in code
        - MUST return UNSUPPORTED (not raise) for unknown languages
        - SHOULD use CSS classes, not inline styles
    """

    def highlight(self, code: str, language: str) -> HighlightResult:
        """Highlight code.

        Args:
            code: Source code to highlight
            language: Language tag from the code fence

        Returns:
            HighlightResult with full ``<pre>`` markup when supported
        """
        ...


# Simple callable form: returns markup, or None for unsupported
SimpleHighlighter = Callable[[str, str], str | None]

_highlighter: Highlighter | SimpleHighlighter | None = None
_tried_pygments: bool = False


class PygmentsHighlighter:
    """Pygments-based highlighter implementing the Highlighter protocol.

    Output shape::

        <pre class="highlight"><code class="language-python">…spans…</code></pre>

    """

    def highlight(self, code: str, language: str) -> HighlightResult:
        """Highlight code using Pygments."""
        from pygments import highlight as pygments_highlight
        from pygments.formatters import HtmlFormatter
        from pygments.lexers import get_lexer_by_name
        from pygments.util import ClassNotFound

        try:
            lexer = get_lexer_by_name(language, ensurenl=False)
        except ClassNotFound:
            return UNSUPPORTED

        body: str = pygments_highlight(code, lexer, HtmlFormatter(nowrap=True))
        body = body.removesuffix("\n")
        lang_class = escape_html(language)
        return HighlightResult(
            supported=True,
            html=(
                f'<pre class="highlight"><code class="language-{lang_class}">'
                f"{body}</code></pre>"
            ),
        )


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the default syntax highlighting backend.

    Args:
        highlighter: A Highlighter implementation, or a function taking
            (code, language) and returning markup or None.
            Pass None to clear; the next lookup retries Pygments.
    """
    global _highlighter, _tried_pygments
    _highlighter = highlighter
    if highlighter is None:
        _tried_pygments = False


def _try_import_pygments() -> bool:
    """Try to import Pygments and install it as the default backend."""
    global _highlighter, _tried_pygments

    if _tried_pygments:
        return _highlighter is not None

    _tried_pygments = True

    try:
        import pygments  # noqa: F401
    except ImportError:
        logger.debug("Pygments not installed; code blocks render without highlighting")
        return False

    _highlighter = PygmentsHighlighter()
    return True


def get_highlighter() -> Highlighter | SimpleHighlighter | None:
    """Get the current default backend, loading Pygments on first use."""
    if _highlighter is None:
        _try_import_pygments()
    return _highlighter


def has_highlighter() -> bool:
    """Check if a syntax highlighting backend is available."""
    return get_highlighter() is not None


def highlight(
    code: str,
    language: str,
    *,
    highlighter: Highlighter | SimpleHighlighter | None = None,
) -> HighlightResult:
    """Highlight code with the given or default backend.

    Backend errors are logged and reported as unsupported, so the caller
    always gets a usable answer.

    Args:
        code: Source code to highlight
        language: Language tag
        highlighter: Backend to use instead of the default one

    Returns:
        HighlightResult; UNSUPPORTED when no backend handles the language
    """
    backend = highlighter if highlighter is not None else get_highlighter()
    if backend is None or not language:
        return UNSUPPORTED

    try:
        if hasattr(backend, "highlight") and callable(backend.highlight):
            return backend.highlight(code, language)
        markup = backend(code, language)  # type: ignore[operator]
    except Exception:
        logger.debug("Syntax highlighting failed for language %r", language, exc_info=True)
        return UNSUPPORTED

    if markup is None:
        return UNSUPPORTED
    return HighlightResult(supported=True, html=markup)
