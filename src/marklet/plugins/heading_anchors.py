"""Heading anchors plugin for marklet.

Adds an ``id`` attribute derived from the heading text, so headings can
be linked to directly.

Usage:
    >>> md = Markdown(plugins=["heading_anchors"])
    >>> md("## Getting Started")
    '<h2 id="getting-started">Getting Started</h2>\\n'

Notes:
- Slugs are not de-duplicated; two identical headings get the same id
- A heading whose slug is empty (e.g. only punctuation) is left to the
  default template

Thread Safety:
This plugin is stateless and thread-safe.

"""

from __future__ import annotations

from marklet.plugins import register_plugin
from marklet.tokens import Block, Heading
from marklet.utils.text import escape_html, slugify


@register_plugin("heading_anchors")
class HeadingAnchorsPlugin:
    """Render headings with a slug ``id`` attribute."""

    @property
    def name(self) -> str:
        return "heading_anchors"

    def try_render(self, token: Block) -> str | None:
        if not isinstance(token, Heading):
            return None
        slug = slugify(token.text)
        if not slug:
            return None
        return (
            f'<h{token.level} id="{escape_html(slug)}">'
            f"{escape_html(token.text)}</h{token.level}>"
        )
