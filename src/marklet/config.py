"""Render configuration for marklet.

Configuration is instance-scoped: each Markdown processor builds one
immutable RenderConfig at construction time and hands it to its renderer
and streaming parsers. There is no process-wide configuration.

Usage:
    config = RenderConfig(safe_links=True)
    md = Markdown(config=config)

    # From an external mapping (unknown keys ignored)
    config = RenderConfig.from_dict({"safe_links": True, "theme": "dark"})

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        safe_links: Add ``target="_blank" rel="noopener noreferrer"`` to links
        strict_plugins: Re-raise plugin failures as PluginError instead of
            logging and skipping the plugin
        always_escape: Escape and transform every paragraph, disabling the
            pass-through shortcut for paragraphs without markup

    """

    safe_links: bool = False
    strict_plugins: bool = False
    always_escape: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Create RenderConfig from a mapping.

        Only keys that name RenderConfig fields are used; unknown keys
        are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"safe_links": True, "unknown": 1}).safe_links
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


DEFAULT_CONFIG: RenderConfig = RenderConfig()


__all__ = ["DEFAULT_CONFIG", "RenderConfig"]
