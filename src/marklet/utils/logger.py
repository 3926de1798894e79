"""Logger factory for marklet modules.

All library loggers live under the ``marklet`` namespace, so one call
such as ``logging.getLogger("marklet").setLevel(logging.DEBUG)`` shows
every structural degradation the library records: declined tables,
unterminated code fences, skipped plugins, failed highlighting and
streams that end inside a fence. marklet never installs handlers.

Example:
    >>> import logging
    >>> logging.basicConfig()
    >>> logging.getLogger("marklet").setLevel(logging.DEBUG)
    >>> from marklet import render
    >>> html = render("| header only |")  # logs the declined table
"""

from __future__ import annotations

import logging

_ROOT = "marklet"


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the marklet namespace.

    Module names inside the package are used as-is; any other name is
    nested under ``marklet.``.

    Example:
        >>> get_logger("marklet.lexer.detectors.table").name
        'marklet.lexer.detectors.table'
        >>> get_logger("plugins.custom").name
        'marklet.plugins.custom'
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
