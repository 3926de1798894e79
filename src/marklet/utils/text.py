"""Text processing utilities for marklet.

Example:
    >>> from marklet.utils.text import escape_html, slugify
    >>> escape_html("<b>")
    '&lt;b&gt;'
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html as html_module
import re

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATOR_RUN = re.compile(r"[-\s]+")


def escape_html(text: str) -> str:
    """Escape the five HTML-sensitive characters.

    Converts ``&``, ``<``, ``>``, ``"`` and ``'`` to entities in a single
    pass. Escaping is not idempotent: ``&amp;`` becomes ``&amp;amp;``, so
    callers must escape each value exactly once.

    Args:
        text: Text to escape

    Returns:
        Escaped text, safe for element content and quoted attribute values

    Examples:
        >>> escape_html("<a href='x'>")
        '&lt;a href=&#x27;x&#x27;&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to a URL-safe anchor slug.

    Unicode word characters are preserved; everything else except spaces
    and hyphens is dropped, then runs of spaces/hyphens collapse into
    ``separator``.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café & Crème")
        'café-crème'
    """
    if not text:
        return ""
    text = html_module.unescape(text).lower().strip()
    text = _NON_WORD.sub("", text)
    text = _SEPARATOR_RUN.sub(separator, text)
    return text.strip(separator)
