"""Block scanner for the marklet Markdown dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, scan, ScannerMode
├── core.py              # Scanner class (mixin composition + cursor)
├── detection.py         # Detection result type
├── modes.py             # ScannerMode enum (used by streaming)
└── detectors/           # One mixin per block kind
    ├── heading.py       # # Heading
    ├── thematic.py      # ---
    ├── list.py          # - item / 1. item
    ├── quote.py         # > quote
    ├── media.py         # standalone ![img]() / [link]()
    ├── table.py         # | pipe | table |
    └── fence.py         # ``` code ```

Usage:
    >>> from marklet.lexer import scan
    >>> for token in scan("# Hello\\n\\nWorld"):
    ...     print(token)
    Heading(level=1, text='Hello')
    Paragraph(text='World')

"""

from marklet.lexer.core import Scanner, scan
from marklet.lexer.detection import Detection
from marklet.lexer.modes import ScannerMode

__all__ = ["Detection", "Scanner", "ScannerMode", "scan"]
