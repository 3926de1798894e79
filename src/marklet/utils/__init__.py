"""Utility modules for marklet.

Provides:
- text: escape_html, slugify
- logger: get_logger
"""

from marklet.utils.logger import get_logger
from marklet.utils.text import escape_html, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
]
