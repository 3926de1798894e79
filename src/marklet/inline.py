"""Inline transformation for paragraph text.

Turns the text of one Paragraph token into HTML through a fixed sequence
of regex substitutions:

1. escape ``& < > " '``
2. ``**bold**`` / ``__bold__`` -> ``<strong>``
3. ``*italic*`` / ``_italic_`` -> ``<em>``
4. ``~~struck~~`` -> ``<del>``
5. `` `code` `` -> ``<code>``
6. ``![alt](src)`` -> ``<img>``, ``[text](href)`` -> ``<a>``

Each step sees the output of the previous one, so code span content is
already entity-escaped and may still pick up emphasis markup. There is no
nesting: emphasis inside link text is not recognized.

Image and link spans are located right after escaping and replaced by
placeholders so steps 2-5 cannot rewrite delimiters inside URLs; their
markup is substituted last. Values are escaped exactly once, by step 1.
Private-use characters U+E000/U+E001 in the input are written as
character references so they can never be mistaken for placeholders.

Pass-through:
Text with no HTML tag look-alike and none of the delimiters above is
returned untouched, without escaping. ``a & b`` therefore renders as
``a & b``, while ``a & <b>`` renders as ``a &amp; &lt;b&gt;``. This
inconsistency is long-standing observable output; pass
``always_escape=True`` to opt out of it.

Thread Safety:
InlineTransformer holds only immutable settings. Safe to share.

"""

from __future__ import annotations

import re

from marklet.utils.text import escape_html

# Tag look-alike or any inline delimiter
_MARKUP_HINT = re.compile(r"<[A-Za-z/!?]|\*|_|~~|`|\[[^\]]*\]\([^)]*\)")

_BOLD = re.compile(r"(\*\*|__)(.*?)\1")
_ITALIC = re.compile(r"(\*|_)(.*?)\1")
_STRIKETHROUGH = re.compile(r"~~(.*?)~~")
_CODE_SPAN = re.compile(r"`(.*?)`")
_IMAGE_OR_LINK = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)|\[([^\]]+)\]\(([^)]+)\)")

# Private-use delimiters around placeholder indices
_SHIELD_OPEN = "\ue000"
_SHIELD_CLOSE = "\ue001"
_SHIELD = re.compile(f"{_SHIELD_OPEN}(\\d+){_SHIELD_CLOSE}")
# Literal delimiters in the input become character references before shielding
_SHIELD_ESCAPES = str.maketrans({_SHIELD_OPEN: "&#xe000;", _SHIELD_CLOSE: "&#xe001;"})

SAFE_LINK_ATTRS = ' target="_blank" rel="noopener noreferrer"'


def needs_markup(text: str) -> bool:
    """Check whether text contains anything the transformer would rewrite."""
    return _MARKUP_HINT.search(text) is not None


class InlineTransformer:
    """Apply the inline substitution rules to paragraph text.

    Usage:
        >>> InlineTransformer().transform("Some **bold** text")
        'Some <strong>bold</strong> text'
        >>> InlineTransformer(safe_links=True).transform("[a](https://x.org)")
        '<a href="https://x.org" target="_blank" rel="noopener noreferrer">a</a>'

    """

    __slots__ = ("_safe_links", "_always_escape")

    def __init__(self, *, safe_links: bool = False, always_escape: bool = False) -> None:
        """Initialize transformer.

        Args:
            safe_links: Add target/rel attributes to generated links
            always_escape: Disable the pass-through shortcut
        """
        self._safe_links = safe_links
        self._always_escape = always_escape

    def transform(self, text: str) -> str:
        """Transform paragraph text into inline HTML.

        Args:
            text: Raw paragraph text

        Returns:
            HTML fragment (without the surrounding ``<p>``)
        """
        if not self._always_escape and not needs_markup(text):
            return text

        html = escape_html(text).translate(_SHIELD_ESCAPES)

        shielded: list[str] = []

        def shield(match: re.Match[str]) -> str:
            shielded.append(self._media_markup(match))
            return f"{_SHIELD_OPEN}{len(shielded) - 1}{_SHIELD_CLOSE}"

        html = _IMAGE_OR_LINK.sub(shield, html)
        html = _BOLD.sub(r"<strong>\2</strong>", html)
        html = _ITALIC.sub(r"<em>\2</em>", html)
        html = _STRIKETHROUGH.sub(r"<del>\1</del>", html)
        html = _CODE_SPAN.sub(r"<code>\1</code>", html)

        if not shielded:
            return html

        def restore(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index < len(shielded):
                return shielded[index]
            return match.group(0)

        return _SHIELD.sub(restore, html)

    def _media_markup(self, match: re.Match[str]) -> str:
        """Build <img>/<a> markup from an already-escaped match."""
        alt, src, text, href = match.groups()
        if src is not None:
            return f'<img src="{src}" alt="{alt}" />'
        attrs = SAFE_LINK_ATTRS if self._safe_links else ""
        return f'<a href="{href}"{attrs}>{text}</a>'


def transform_inline(text: str, *, safe_links: bool = False) -> str:
    """Transform paragraph text with a one-off InlineTransformer.

    Example:
        >>> transform_inline("~~old~~ `new`")
        '<del>old</del> <code>new</code>'
    """
    return InlineTransformer(safe_links=safe_links).transform(text)
