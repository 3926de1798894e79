"""
marklet: small line-oriented Markdown to HTML converter

Scans Markdown into a flat tuple of block tokens and renders them to
HTML, with render plugins that can take over any token and a streaming
mode for text that arrives in chunks.

Quick Start:
    >>> from marklet import render
    >>> render("# Hello\\n\\nSome **bold** text")
    '<h1>Hello</h1>\\n<p>Some <strong>bold</strong> text</p>\\n'

    >>> # Or use the Markdown class
    >>> from marklet import Markdown
    >>> md = Markdown(safe_links=True, plugins=["heading_anchors"])
    >>> html = md("## Setup")

Plugins:
    >>> def shout(token):
    ...     if isinstance(token, Heading):
    ...         return f"<h{token.level}>{token.text.upper()}</h{token.level}>"
    ...     return None
    >>> Markdown().use(shout)("# hi")
    '<h1>HI</h1>\\n'

Streaming:
    >>> parser = Markdown().stream()
    >>> parser.parse_chunk("# Ti") + parser.parse_chunk("tle\\n") + parser.finalize()
    '<h1>Title</h1>\\n'

Installation:
    pip install marklet              # Core (zero deps)
    pip install marklet[syntax]      # + Syntax highlighting via Pygments
"""

from __future__ import annotations

from collections.abc import Iterable

from marklet.config import DEFAULT_CONFIG, RenderConfig
from marklet.errors import MarkletError, PluginError
from marklet.inline import InlineTransformer, transform_inline
from marklet.lexer import Scanner, scan
from marklet.location import LineSpan
from marklet.plugins import (
    BUILTIN_PLUGINS,
    FunctionPlugin,
    PluginPipeline,
    RenderPlugin,
    SyntaxHighlightPlugin,
    get_plugin,
)
from marklet.plugins import PluginFunction as _PluginFunction
from marklet.renderers.html import HtmlRenderer
from marklet.streaming import StreamingParser
from marklet.tokens import (
    Block,
    Blockquote,
    BlockToken,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    Link,
    OrderedList,
    Paragraph,
    Table,
    TokenType,
    UnorderedList,
)
from marklet.utils.text import escape_html, slugify

__version__ = "0.1.0"


class Markdown:
    """High-level Markdown processor combining scanner and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello")
        '<h1>Hello</h1>\\n'

        >>> # Access the tokens
        >>> md.scan("1. a\\n2. b")
        (OrderedList(items=('a', 'b')),)

        >>> # Syntax highlighting (needs marklet[syntax])
        >>> md = Markdown().enable_syntax_highlighting(True)

    Thread Safety:
        render() is safe to call concurrently. use() and
        enable_syntax_highlighting() mutate the instance's plugin pipeline
        and must not race with rendering.

    """

    __slots__ = ("_config", "_pipeline", "_renderer", "_highlight_plugin")

    def __init__(
        self,
        *,
        config: RenderConfig | None = None,
        safe_links: bool = False,
        strict_plugins: bool = False,
        always_escape: bool = False,
        highlight: bool = False,
        plugins: str | Iterable[str] | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            config: Complete configuration; when given, the individual
                option flags below are ignored
            safe_links: Add ``target="_blank" rel="noopener noreferrer"`` to links
            strict_plugins: Raise PluginError when a plugin fails
            always_escape: Disable the paragraph pass-through shortcut
            highlight: Enable syntax highlighting for code blocks
            plugins: Built-in plugin names to enable, in order
                (e.g. ["heading_anchors"]). Use ["all"] for every one.
                A single name may be passed as a plain string.

        Raises:
            KeyError: If a plugin name is not recognized
        """
        self._config = config or RenderConfig(
            safe_links=safe_links,
            strict_plugins=strict_plugins,
            always_escape=always_escape,
        )
        self._pipeline = PluginPipeline()
        self._renderer = HtmlRenderer(self._config, plugins=self._pipeline)
        self._highlight_plugin = SyntaxHighlightPlugin()

        names = [plugins] if isinstance(plugins, str) else list(plugins or [])
        if "all" in names:
            names = list(BUILTIN_PLUGINS.keys())
        for name in names:
            self._pipeline.use(get_plugin(name))

        if highlight:
            self.enable_syntax_highlighting(True)

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def plugins(self) -> PluginPipeline:
        """The instance's plugin pipeline, in consultation order."""
        return self._pipeline

    def use(self, plugin: RenderPlugin | _PluginFunction) -> Markdown:
        """Append a render plugin (object or plain callable).

        Returns:
            self, for chaining
        """
        self._pipeline.use(plugin)
        return self

    def enable_syntax_highlighting(self, enabled: bool = True) -> Markdown:
        """Toggle syntax highlighting for fenced code blocks.

        Idempotent: enabling twice registers the highlighter once, and
        disabling removes it without reordering other plugins.

        Returns:
            self, for chaining
        """
        if enabled:
            if self._highlight_plugin not in self._pipeline:
                self._pipeline.use(self._highlight_plugin)
        else:
            self._pipeline.remove(self._highlight_plugin)
        return self

    def scan(self, source: str) -> tuple[Block, ...]:
        """Scan Markdown source into block tokens."""
        return scan(source)

    def render(self, source: str) -> str:
        """Convert Markdown source to HTML.

        Never raises for any input string unless strict_plugins is set
        and a plugin fails.
        """
        return self._renderer.render(scan(source))

    def __call__(self, source: str) -> str:
        return self.render(source)

    def stream(self) -> StreamingParser:
        """Create a StreamingParser sharing this instance's configuration."""
        return StreamingParser(self._config)


def render(source: str, *, safe_links: bool = False) -> str:
    """Convert Markdown source to HTML with default settings.

    Args:
        source: Markdown source text
        safe_links: Add target/rel attributes to links

    Returns:
        HTML string, one line-terminated fragment per block
    """
    config = RenderConfig(safe_links=True) if safe_links else DEFAULT_CONFIG
    return HtmlRenderer(config).render(scan(source))


__all__ = [
    "BUILTIN_PLUGINS",
    "DEFAULT_CONFIG",
    "Block",
    "BlockToken",
    "Blockquote",
    "CodeBlock",
    "FunctionPlugin",
    "Heading",
    "HorizontalRule",
    "HtmlRenderer",
    "Image",
    "InlineTransformer",
    "LineSpan",
    "Link",
    "Markdown",
    "MarkletError",
    "OrderedList",
    "Paragraph",
    "PluginError",
    "PluginPipeline",
    "RenderConfig",
    "RenderPlugin",
    "Scanner",
    "StreamingParser",
    "SyntaxHighlightPlugin",
    "Table",
    "TokenType",
    "UnorderedList",
    "escape_html",
    "get_plugin",
    "render",
    "scan",
    "slugify",
    "transform_inline",
    "__version__",
]
