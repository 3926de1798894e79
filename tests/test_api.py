"""End-to-end tests for the public API."""

from __future__ import annotations

import pytest

import marklet
from marklet import Markdown, render, scan
from marklet.tokens import Heading, OrderedList, Paragraph, Table, UnorderedList


class TestRender:
    """marklet.render() and Markdown.render() on whole documents."""

    def test_empty(self) -> None:
        assert render("") == ""

    def test_heading(self) -> None:
        assert render("# Hello World") == "<h1>Hello World</h1>\n"

    def test_all_heading_levels(self) -> None:
        source = "\n".join(f"{'#' * n} Heading {n}" for n in range(1, 7))
        expected = "".join(f"<h{n}>Heading {n}</h{n}>\n" for n in range(1, 7))
        assert render(source) == expected

    def test_header_and_paragraph(self) -> None:
        assert render("\n# Header\nThis is a paragraph.\n    ") == (
            "<h1>Header</h1>\n<p>This is a paragraph.</p>\n"
        )

    def test_inline_link_in_paragraph(self) -> None:
        html = render("This is a [link](https://example.com)", safe_links=True)
        assert html == (
            '<p>This is a <a href="https://example.com" target="_blank" '
            'rel="noopener noreferrer">link</a></p>\n'
        )

    def test_inline_image_in_paragraph(self) -> None:
        html = render("This is an image: ![alt text](https://example.com/image.png)")
        assert html == (
            '<p>This is an image: <img src="https://example.com/image.png" alt="alt text" /></p>\n'
        )

    def test_lists(self) -> None:
        assert render("- Item 1\n- Item 2") == "<ul>\n  <li>Item 1</li>\n  <li>Item 2</li>\n</ul>\n"
        assert render("1. Item 1\n2. Item 2") == "<ol>\n  <li>Item 1</li>\n  <li>Item 2</li>\n</ol>\n"

    def test_blockquote(self) -> None:
        assert render("> This is a blockquote") == (
            "<blockquote>\n  <p>This is a blockquote</p>\n</blockquote>\n"
        )

    def test_indented_table(self) -> None:
        source = (
            "\n      | Header 1 | Header 2 |\n"
            "      |----------|----------|\n"
            "      | Cell 1   | Cell 2   |\n"
            "      | Cell 3   | Cell 4   |\n    "
        )
        html = render(source)
        assert "<th>Header 1</th><th>Header 2</th>" in html
        assert "<tr><td>Cell 1</td><td>Cell 2</td></tr>" in html
        assert "<tr><td>Cell 3</td><td>Cell 4</td></tr>" in html
        assert "----" not in html

    def test_malformed_table_row(self) -> None:
        source = (
            "| Header 1 | Header 2 |\n"
            "    |----------|----------|\n"
            "    | Cell 1   | Cell 2   |\n"
            "    | Missing Header"
        )
        html = render(source)
        assert "<tr><td>Missing Header</td></tr>" in html

    def test_header_only_table_is_paragraph(self) -> None:
        assert render("| Header |") == "<p>| Header |</p>\n"

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("This is <b>bold", "<p>This is &lt;b&gt;bold</p>\n"),
            ("This is [an example", "<p>This is [an example</p>\n"),
            ("This is a ^superscript^", "<p>This is a ^superscript^</p>\n"),
            ("This is `inline code`.", "<p>This is <code>inline code</code>.</p>\n"),
            (
                "This is **bold**, *italic*, ~~strikethrough~~, and `inline code`.",
                "<p>This is <strong>bold</strong>, <em>italic</em>, "
                "<del>strikethrough</del>, and <code>inline code</code>.</p>\n",
            ),
        ],
    )
    def test_paragraph_inline(self, source: str, expected: str) -> None:
        assert render(source) == expected

    def test_code_block(self) -> None:
        assert render("```\ncode\n```") == "<pre><code>code</code></pre>\n"

    def test_code_block_escapes_html(self) -> None:
        html = render('  ```\n  console.log("Hello, world!");\n  ```')
        assert html == '<pre><code>  console.log(&quot;Hello, world!&quot;);</code></pre>\n'

    def test_unterminated_code_block(self) -> None:
        html = render("```\ncode")
        assert html.count("<p>") == 2
        assert "<pre>" not in html

    def test_mixed_document(self) -> None:
        source = (
            "\n# Title\n\nThis is a paragraph.\n\n"
            '```javascript\nfunction greet() {\n  return "Hello!";\n}\n```\n\n'
            "- Item 1\n- Item 2\n"
        )
        assert render(source) == (
            "<h1>Title</h1>\n"
            "<p>This is a paragraph.</p>\n"
            '<pre><code class="language-javascript">function greet() {\n'
            "  return &quot;Hello!&quot;;\n"
            "}</code></pre>\n"
            "<ul>\n  <li>Item 1</li>\n  <li>Item 2</li>\n</ul>\n"
        )

    def test_horizontal_rule_between_blocks(self) -> None:
        source = "\n# This is a heading\n---\nThis is a paragraph with **bold** and *italic* text.\n"
        assert render(source) == (
            "<h1>This is a heading</h1>\n"
            "<hr />\n"
            "<p>This is a paragraph with <strong>bold</strong> and <em>italic</em> text.</p>\n"
        )

    def test_one_paragraph_per_line(self) -> None:
        assert render("Invalid markdown content\nwithout any proper structure.") == (
            "<p>Invalid markdown content</p>\n<p>without any proper structure.</p>\n"
        )


class TestMarkdown:
    """The Markdown processor class."""

    def test_call_matches_render(self) -> None:
        md = Markdown()
        source = "# A\n\n- b\n\n> c"
        assert md(source) == md.render(source) == render(source)

    def test_custom_heading_plugin(self) -> None:
        def custom(token):
            if isinstance(token, Heading) and token.level == 1:
                return f'<h1 class="custom">{token.text}</h1>'
            return None

        md = Markdown().use(custom)
        assert md("# Custom Heading") == '<h1 class="custom">Custom Heading</h1>\n'
        assert md("## Plain") == "<h2>Plain</h2>\n"

    def test_scan(self) -> None:
        assert Markdown().scan("1. a\n2. b") == (OrderedList(items=("a", "b")),)
        assert scan("* a\n- b") == (UnorderedList(items=("a", "b")),)

    def test_scan_header_only_table(self) -> None:
        tokens = scan("| Header |")
        assert tokens == (Paragraph(text="| Header |"),)
        assert not any(isinstance(t, Table) for t in tokens)

    def test_stream_shares_config(self) -> None:
        parser = Markdown(always_escape=True).stream()
        assert parser.parse_chunk("a & b\n") == "<p>a &amp; b</p>\n"


class TestPackage:
    def test_version(self) -> None:
        assert marklet.__version__ == "0.1.0"

    def test_all_exports_resolve(self) -> None:
        for name in marklet.__all__:
            assert hasattr(marklet, name), name
