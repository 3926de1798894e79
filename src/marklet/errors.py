"""Exception classes for marklet.

Scanning and default rendering never raise; these exceptions cover the
configurable failure paths around caller-supplied plugins.
"""

from __future__ import annotations


class MarkletError(Exception):
    """Base exception for all marklet errors."""

    pass


class PluginError(MarkletError):
    """A render plugin raised while handling a token.

    Only raised when the renderer runs with ``strict_plugins=True``;
    otherwise the failing plugin is logged and skipped.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
