"""Renderers for marklet block tokens."""

from marklet.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
