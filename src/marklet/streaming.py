"""Incremental HTML rendering for text that arrives in chunks.

StreamingParser renders each complete line as soon as its newline
arrives, which suits output produced token-by-token (LLM responses,
network reads). Only a subset of the block grammar is available, since
no line may wait for the lines that follow it:

- fenced code blocks (the fence line toggles code mode)
- ATX headings
- paragraphs, with the full inline transformation

Lists, tables, blockquotes, horizontal rules, standalone images/links and
render plugins are not recognized; such lines render as paragraphs. For
input made only of headings, closed fences and plain paragraphs, the
concatenated output equals ``Markdown().render`` of the whole text, for
any chunking.

Thread Safety:
A StreamingParser holds per-document state. Use one instance per
document at a time; concurrent calls on the same instance must be
serialized by the caller.

"""

from __future__ import annotations

from marklet.config import DEFAULT_CONFIG, RenderConfig
from marklet.lexer.detectors.fence import fence_language, is_fence
from marklet.lexer.detectors.heading import match_heading
from marklet.lexer.modes import ScannerMode
from marklet.renderers.html import HtmlRenderer
from marklet.stringbuilder import StringBuilder
from marklet.tokens import Paragraph
from marklet.utils.logger import get_logger
from marklet.utils.text import escape_html

logger = get_logger(__name__)


class StreamingParser:
    """Chunk-at-a-time Markdown to HTML renderer.

    Usage:
        >>> parser = StreamingParser()
        >>> parser.parse_chunk("# Ti")
        ''
        >>> parser.parse_chunk("tle\\nSome ")
        '<h1>Title</h1>\\n'
        >>> parser.finalize()
        '<p>Some</p>\\n'

    """

    __slots__ = ("_renderer", "_buffer", "_mode", "_code_started")

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._renderer = HtmlRenderer(config or DEFAULT_CONFIG)
        self._buffer = ""
        self._mode = ScannerMode.BLOCK
        self._code_started = False

    @property
    def in_code_block(self) -> bool:
        """True while inside an open fenced code block."""
        return self._mode is ScannerMode.CODE_FENCE

    def parse_chunk(self, chunk: str) -> str:
        """Feed a chunk and return HTML for every line it completed.

        The text after the last newline stays buffered until a later
        chunk or finalize() completes it.
        """
        if not chunk:
            return ""
        self._buffer += chunk
        *complete, self._buffer = self._buffer.split("\n")
        sb = StringBuilder()
        for line in complete:
            sb.append(self._process_line(line.removesuffix("\r")))
        return sb.build()

    def finalize(self) -> str:
        """Flush the buffered partial line, close any open code block and reset."""
        sb = StringBuilder()
        if self._buffer:
            sb.append(self._process_line(self._buffer.removesuffix("\r")))
        if self.in_code_block:
            logger.debug("Stream ended inside a code fence; closing it")
            sb.append("</code></pre>\n")
        self.reset()
        return sb.build()

    def reset(self) -> None:
        """Discard all state, ready for a new document."""
        self._buffer = ""
        self._mode = ScannerMode.BLOCK
        self._code_started = False

    def _process_line(self, line: str) -> str:
        stripped = line.strip()

        if self._mode is ScannerMode.CODE_FENCE:
            if is_fence(stripped):
                self._mode = ScannerMode.BLOCK
                self._code_started = False
                return "</code></pre>\n"
            prefix = "\n" if self._code_started else ""
            self._code_started = True
            return f"{prefix}{escape_html(line)}"

        if not stripped:
            return ""

        if is_fence(stripped):
            self._mode = ScannerMode.CODE_FENCE
            self._code_started = False
            language = fence_language(stripped)
            if language:
                return f'<pre><code class="language-{escape_html(language)}">'
            return "<pre><code>"

        token = match_heading(stripped) or Paragraph(text=stripped)
        return f"{self._renderer.render_default(token)}\n"
