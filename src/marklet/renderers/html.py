"""HTML renderer using StringBuilder pattern.

Renders a tuple of Block tokens to HTML. Each token is offered to the
plugin pipeline first; the built-in template only runs when no plugin
claims it. Every non-empty fragment is followed by a newline.

Thread Safety:
The renderer holds no per-render state. A single HtmlRenderer may be
shared by threads as long as its plugin pipeline is not mutated while
rendering.
"""

from __future__ import annotations

from collections.abc import Iterable

from marklet.config import DEFAULT_CONFIG, RenderConfig
from marklet.inline import SAFE_LINK_ATTRS, InlineTransformer
from marklet.plugins import PluginPipeline
from marklet.stringbuilder import StringBuilder
from marklet.tokens import (
    Block,
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    Link,
    OrderedList,
    Paragraph,
    Table,
    UnorderedList,
)
from marklet.utils.logger import get_logger
from marklet.utils.text import escape_html

logger = get_logger(__name__)


class HtmlRenderer:
    """Render Block tokens to HTML.

    Usage:
        >>> from marklet.lexer import scan
        >>> renderer = HtmlRenderer()
        >>> renderer.render(scan("# Hello\\n\\nSome **bold** text"))
        '<h1>Hello</h1>\\n<p>Some <strong>bold</strong> text</p>\\n'

    """

    __slots__ = ("_config", "_plugins", "_inline")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        plugins: PluginPipeline | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Rendering options (DEFAULT_CONFIG when omitted)
            plugins: Pipeline consulted before the built-in templates
        """
        self._config = config or DEFAULT_CONFIG
        self._plugins = plugins if plugins is not None else PluginPipeline()
        self._inline = InlineTransformer(
            safe_links=self._config.safe_links,
            always_escape=self._config.always_escape,
        )

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def plugins(self) -> PluginPipeline:
        return self._plugins

    def render(self, tokens: Iterable[Block]) -> str:
        """Render tokens to an HTML string.

        Raises:
            PluginError: Only when strict_plugins is set and a plugin raised
        """
        sb = StringBuilder()
        for token in tokens:
            sb.append_block(self.render_token(token))
        return sb.build()

    def render_token(self, token: Block) -> str:
        """Render one token: a claimed plugin fragment, else the template.

        A plugin that returns an empty string claims the token and the
        token emits nothing at all; render() adds no newline for it.
        """
        if self._plugins:
            claimed = self._plugins.try_render(token, strict=self._config.strict_plugins)
            if claimed is not None:
                return claimed
        return self.render_default(token)

    def render_default(self, token: Block) -> str:
        """Render one token with the built-in template, ignoring plugins."""
        match token:
            case Heading(level=level, text=text):
                return f"<h{level}>{escape_html(text)}</h{level}>"
            case Paragraph(text=text):
                return f"<p>{self._inline.transform(text)}</p>"
            case UnorderedList(items=items):
                return self._render_list("ul", items)
            case OrderedList(items=items):
                return self._render_list("ol", items)
            case Blockquote():
                return self._render_blockquote(token)
            case Table():
                return self._render_table(token)
            case CodeBlock():
                return self._render_code_block(token)
            case Image(alt=alt, src=src):
                return f'<img src="{escape_html(src)}" alt="{escape_html(alt)}" />'
            case Link(text=text, href=href):
                attrs = SAFE_LINK_ATTRS if self._config.safe_links else ""
                return f'<a href="{escape_html(href)}"{attrs}>{escape_html(text)}</a>'
            case HorizontalRule():
                return "<hr />"
            case _:
                logger.debug("No template for token %r", token)
                return ""

    def _render_list(self, tag: str, items: Iterable[str]) -> str:
        lines = [f"<{tag}>"]
        lines.extend(f"  <li>{escape_html(item)}</li>" for item in items)
        lines.append(f"</{tag}>")
        return "\n".join(lines)

    def _render_blockquote(self, quote: Blockquote) -> str:
        lines = ["<blockquote>"]
        lines.extend(f"  <p>{escape_html(line)}</p>" for line in quote.lines)
        lines.append("</blockquote>")
        return "\n".join(lines)

    def _render_table(self, table: Table) -> str:
        """Render table.

        Row 0 becomes the header, row 1 (the delimiter row) is skipped,
        rows 2+ become the body. ``<tbody>`` is emitted even when empty.
        """
        header = "".join(f"<th>{escape_html(cell)}</th>" for cell in table.header_cells)
        lines = ["<table>", "  <thead>", f"    <tr>{header}</tr>", "  </thead>", "  <tbody>"]
        for row in table.body_rows:
            cells = "".join(f"<td>{escape_html(cell)}</td>" for cell in row)
            lines.append(f"    <tr>{cells}</tr>")
        lines.extend(["  </tbody>", "</table>"])
        return "\n".join(lines)

    def _render_code_block(self, code: CodeBlock) -> str:
        """Render fenced code without highlighting."""
        if code.language:
            open_tag = f'<pre><code class="language-{escape_html(code.language)}">'
        else:
            open_tag = "<pre><code>"
        return f"{open_tag}{escape_html(code.code)}</code></pre>"
