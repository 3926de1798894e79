"""Tests for HtmlRenderer default templates."""

from __future__ import annotations

import pytest

from marklet.config import RenderConfig
from marklet.renderers.html import HtmlRenderer
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


@pytest.fixture
def renderer() -> HtmlRenderer:
    return HtmlRenderer()


class TestHtmlRenderer:
    """One template per token kind."""

    def test_empty(self, renderer: HtmlRenderer) -> None:
        assert renderer.render(()) == ""

    def test_heading_is_escaped(self, renderer: HtmlRenderer) -> None:
        assert renderer.render([Heading(level=2, text="A & B")]) == "<h2>A &amp; B</h2>\n"

    def test_headings_and_paragraphs(self, renderer: HtmlRenderer) -> None:
        tokens = [
            Heading(level=1, text="Heading 1"),
            Heading(level=2, text="Heading 2"),
            Paragraph(text="This is a paragraph."),
        ]
        assert renderer.render(tokens) == (
            "<h1>Heading 1</h1>\n<h2>Heading 2</h2>\n<p>This is a paragraph.</p>\n"
        )

    def test_paragraph_inline(self, renderer: HtmlRenderer) -> None:
        assert renderer.render([Paragraph(text="Some **bold**")]) == (
            "<p>Some <strong>bold</strong></p>\n"
        )

    def test_unordered_list(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([UnorderedList(items=("Item 1", "<b>"))])
        assert html == "<ul>\n  <li>Item 1</li>\n  <li>&lt;b&gt;</li>\n</ul>\n"

    def test_list_items_are_not_inline_transformed(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([UnorderedList(items=("**x**",))])
        assert "<li>**x**</li>" in html

    def test_ordered_list(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([OrderedList(items=("one", "two"))])
        assert html == "<ol>\n  <li>one</li>\n  <li>two</li>\n</ol>\n"

    def test_blockquote(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([Blockquote(text="one\n<two>")])
        assert html == "<blockquote>\n  <p>one</p>\n  <p>&lt;two&gt;</p>\n</blockquote>\n"

    def test_table(self, renderer: HtmlRenderer) -> None:
        table = Table(raw_rows=("| Name | Age |", "|------|-----|", "| Alice | <25> |"))
        assert renderer.render([table]) == (
            "<table>\n"
            "  <thead>\n"
            "    <tr><th>Name</th><th>Age</th></tr>\n"
            "  </thead>\n"
            "  <tbody>\n"
            "    <tr><td>Alice</td><td>&lt;25&gt;</td></tr>\n"
            "  </tbody>\n"
            "</table>\n"
        )

    def test_table_without_body_keeps_tbody(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([Table(raw_rows=("| a |", "|---|"))])
        assert "  <tbody>\n  </tbody>" in html
        assert "<td>" not in html

    def test_delimiter_row_is_never_rendered(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([Table(raw_rows=("| a |", "| not a delimiter |", "| b |"))])
        assert "not a delimiter" not in html
        assert "<td>b</td>" in html

    def test_code_block_with_language(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([CodeBlock(language="python", lines=("x = 1 < 2",))])
        assert html == '<pre><code class="language-python">x = 1 &lt; 2</code></pre>\n'

    def test_code_block_without_language(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([CodeBlock(language=None, lines=("a", "  b"))])
        assert html == "<pre><code>a\n  b</code></pre>\n"

    def test_empty_code_block(self, renderer: HtmlRenderer) -> None:
        assert renderer.render([CodeBlock(language=None, lines=())]) == "<pre><code></code></pre>\n"

    def test_image(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([Image(alt="Alt text", src="https://example.com/image.png")])
        assert html == '<img src="https://example.com/image.png" alt="Alt text" />\n'

    def test_link(self, renderer: HtmlRenderer) -> None:
        html = renderer.render([Link(text="Link text", href="https://example.com")])
        assert html == '<a href="https://example.com">Link text</a>\n'

    def test_safe_link(self) -> None:
        renderer = HtmlRenderer(RenderConfig(safe_links=True))
        html = renderer.render([Link(text="t", href="/x")])
        assert html == '<a href="/x" target="_blank" rel="noopener noreferrer">t</a>\n'

    def test_horizontal_rule(self, renderer: HtmlRenderer) -> None:
        assert renderer.render([HorizontalRule()]) == "<hr />\n"

    def test_unknown_token_renders_nothing(self, renderer: HtmlRenderer) -> None:
        assert renderer.render_default(Block()) == ""
        assert renderer.render([Block(), HorizontalRule()]) == "<hr />\n"

    def test_mixed_content(self, renderer: HtmlRenderer) -> None:
        tokens = [
            Heading(level=1, text="Heading"),
            Paragraph(text="This is a paragraph."),
            UnorderedList(items=("Item 1", "Item 2")),
            Blockquote(text="This is a blockquote."),
            Image(alt="Alt text", src="https://example.com/image.png"),
            Link(text="Link text", href="https://example.com"),
        ]
        assert renderer.render(tokens) == (
            "<h1>Heading</h1>\n"
            "<p>This is a paragraph.</p>\n"
            "<ul>\n  <li>Item 1</li>\n  <li>Item 2</li>\n</ul>\n"
            "<blockquote>\n  <p>This is a blockquote.</p>\n</blockquote>\n"
            '<img src="https://example.com/image.png" alt="Alt text" />\n'
            '<a href="https://example.com">Link text</a>\n'
        )
