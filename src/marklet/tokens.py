"""Block token definitions for the marklet scanner.

The scanner produces a tuple of Block tokens that the renderer consumes.
Each token kind is its own frozen dataclass, so rendering can match on
the class and no token carries fields that only make sense for another
kind.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from marklet.location import LineSpan


class TokenType(Enum):
    """Tag identifying the kind of a Block token.

    Every Block subclass exposes its tag as the class attribute ``type``,
    so plugins can write ``token.type is TokenType.HEADING`` instead of
    an isinstance check.

    """

    HEADING = auto()  # # Heading
    PARAGRAPH = auto()
    UNORDERED_LIST = auto()  # - item / * item
    ORDERED_LIST = auto()  # 1. item
    BLOCKQUOTE = auto()  # > quote
    TABLE = auto()  # | a | b |
    CODE_BLOCK = auto()  # ```lang
    IMAGE = auto()  # ![alt](src) alone on a line
    LINK = auto()  # [text](href) alone on a line
    HORIZONTAL_RULE = auto()  # ---, ***, ___


@dataclass(frozen=True, slots=True)
class Block:
    """Base class for all block tokens.

    Attributes:
        span: Input lines the token was scanned from. Excluded from
            equality so hand-built tokens compare equal to scanned ones.

    """

    span: LineSpan | None = field(default=None, kw_only=True, compare=False, repr=False)

    type: ClassVar[TokenType]


@dataclass(frozen=True, slots=True)
class Heading(Block):
    """ATX heading.

    Markdown: ``## Title``
    HTML: ``<h2>Title</h2>``

    """

    level: int
    text: str

    type: ClassVar[TokenType] = TokenType.HEADING


@dataclass(frozen=True, slots=True)
class Paragraph(Block):
    """One line of paragraph text, trimmed but not yet inline-transformed."""

    text: str

    type: ClassVar[TokenType] = TokenType.PARAGRAPH


@dataclass(frozen=True, slots=True)
class UnorderedList(Block):
    """Bullet list; items are the text after each ``-``/``*`` marker."""

    items: tuple[str, ...]

    type: ClassVar[TokenType] = TokenType.UNORDERED_LIST


@dataclass(frozen=True, slots=True)
class OrderedList(Block):
    """Numbered list; items are the text after each ``N.`` marker."""

    items: tuple[str, ...]

    type: ClassVar[TokenType] = TokenType.ORDERED_LIST


@dataclass(frozen=True, slots=True)
class Blockquote(Block):
    """Quoted lines with their ``>`` markers removed, joined with newlines."""

    text: str

    type: ClassVar[TokenType] = TokenType.BLOCKQUOTE

    @property
    def lines(self) -> tuple[str, ...]:
        """The quoted lines, one entry per source line."""
        return tuple(self.text.split("\n"))


@dataclass(frozen=True, slots=True)
class Table(Block):
    """Pipe table kept as raw rows.

    Row 0 is the header, row 1 the delimiter row, rows 2+ the body.
    The delimiter row is never validated; it is always skipped.

    """

    raw_rows: tuple[str, ...]

    type: ClassVar[TokenType] = TokenType.TABLE

    @staticmethod
    def split_row(row: str) -> list[str]:
        """Split a raw row into trimmed cells.

        The empty cells produced by the bounding pipes are dropped;
        empty cells in the middle of the row are kept.

        Examples:
            >>> Table.split_row("| a | b |")
            ['a', 'b']
            >>> Table.split_row("| Missing Header")
            ['Missing Header']
        """
        row = row.strip()
        parts = row.split("|")
        if row.startswith("|"):
            parts = parts[1:]
        if row.endswith("|") and parts:
            parts = parts[:-1]
        return [part.strip() for part in parts]

    @property
    def header_cells(self) -> list[str]:
        """Cells of the header row."""
        return self.split_row(self.raw_rows[0]) if self.raw_rows else []

    @property
    def body_rows(self) -> list[list[str]]:
        """Cells of each body row (everything after the delimiter row)."""
        return [self.split_row(row) for row in self.raw_rows[2:]]


@dataclass(frozen=True, slots=True)
class CodeBlock(Block):
    """Fenced code block.

    Markdown:
        ```python
        print("hi")
        ```

    Lines are kept verbatim, indentation included.

    """

    language: str | None
    lines: tuple[str, ...]

    type: ClassVar[TokenType] = TokenType.CODE_BLOCK

    @property
    def code(self) -> str:
        """Code content with lines joined by newlines."""
        return "\n".join(self.lines)


@dataclass(frozen=True, slots=True)
class Image(Block):
    """A line consisting of exactly one image: ``![alt](src)``."""

    alt: str
    src: str

    type: ClassVar[TokenType] = TokenType.IMAGE


@dataclass(frozen=True, slots=True)
class Link(Block):
    """A line consisting of exactly one link: ``[text](href)``."""

    text: str
    href: str

    type: ClassVar[TokenType] = TokenType.LINK


@dataclass(frozen=True, slots=True)
class HorizontalRule(Block):
    """Thematic break: ``---``, ``***`` or ``___``."""

    type: ClassVar[TokenType] = TokenType.HORIZONTAL_RULE


BlockToken = (
    Heading
    | Paragraph
    | UnorderedList
    | OrderedList
    | Blockquote
    | Table
    | CodeBlock
    | Image
    | Link
    | HorizontalRule
)
