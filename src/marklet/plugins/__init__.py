"""Render plugin system for marklet.

A plugin gets the first chance to render a token. The renderer asks each
plugin in registration order; the first one that returns a string owns
that token's HTML, and the built-in template only runs when every plugin
returns None.

Usage:
    >>> from marklet import Markdown
    >>> from marklet.tokens import Heading
    >>>
    >>> def shout(token):
    ...     if isinstance(token, Heading):
    ...         return f"<h{token.level}>{token.text.upper()}</h{token.level}>"
    ...     return None
    >>>
    >>> Markdown().use(shout).render("# hi")
    '<h1>HI</h1>\\n'
    >>>
    >>> # Built-in plugins by name
    >>> md = Markdown(plugins=["heading_anchors", "task_lists"])

Plugins may be objects implementing RenderPlugin or plain callables; the
pipeline wraps callables in FunctionPlugin. Plugins must not mutate the
token they are given (tokens are frozen anyway).

Thread Safety:
Built-in plugins are stateless. A PluginPipeline is owned by one Markdown
instance and is only mutated through use()/remove().

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Protocol, runtime_checkable

from marklet.errors import PluginError
from marklet.tokens import Block
from marklet.utils.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "BUILTIN_PLUGINS",
    "FunctionPlugin",
    "PluginPipeline",
    "RenderPlugin",
    "as_plugin",
    "get_plugin",
    "register_plugin",
]


@runtime_checkable
class RenderPlugin(Protocol):
    """Protocol for render plugins.

    Thread Safety:
        Plugins should be stateless; the same instance may render many
        documents.

    """

    @property
    def name(self) -> str:
        """Plugin identifier, used in log records and PluginError."""
        ...

    def try_render(self, token: Block) -> str | None:
        """Render token, or return None to let the next plugin try.

        Returning a string (even an empty one) claims the token.
        """
        ...


PluginFunction = Callable[[Block], "str | None"]


class FunctionPlugin:
    """Adapt a plain ``token -> str | None`` function to RenderPlugin."""

    __slots__ = ("func", "_name")

    def __init__(self, func: PluginFunction, name: str | None = None) -> None:
        self.func = func
        self._name = name or getattr(func, "__name__", type(func).__name__)

    @property
    def name(self) -> str:
        return self._name

    def try_render(self, token: Block) -> str | None:
        return self.func(token)

    def __repr__(self) -> str:
        return f"FunctionPlugin({self._name!r})"


def as_plugin(plugin: RenderPlugin | PluginFunction) -> RenderPlugin:
    """Return plugin itself, or a FunctionPlugin wrapping a callable.

    Raises:
        TypeError: If plugin is neither a RenderPlugin nor callable
    """
    if isinstance(plugin, RenderPlugin):
        return plugin
    if callable(plugin):
        return FunctionPlugin(plugin)
    raise TypeError(f"Expected a RenderPlugin or callable, got {type(plugin).__name__}")


class PluginPipeline:
    """Ordered sequence of render plugins.

    Order is registration order. Membership and removal compare by
    identity, and removal keeps the remaining plugins in order.

    Usage:
        >>> pipeline = PluginPipeline()
        >>> pipeline.use(lambda token: None)
        >>> len(pipeline)
        1
    """

    __slots__ = ("_plugins",)

    def __init__(self) -> None:
        self._plugins: list[RenderPlugin] = []

    def use(self, plugin: RenderPlugin | PluginFunction) -> None:
        """Append a plugin (or callable) to the end of the pipeline."""
        self._plugins.append(as_plugin(plugin))

    def remove(self, plugin: RenderPlugin | PluginFunction) -> bool:
        """Remove every entry that is plugin, or wraps it.

        Returns:
            True if anything was removed
        """
        kept = [entry for entry in self._plugins if not _is_entry_for(entry, plugin)]
        removed = len(kept) != len(self._plugins)
        self._plugins = kept
        return removed

    def try_render(self, token: Block, *, strict: bool = False) -> str | None:
        """Ask each plugin in order; return the first claimed fragment.

        A plugin that raises is logged and skipped, so rendering falls
        through to the next plugin or the default template.

        Args:
            token: Token to render
            strict: Re-raise plugin failures as PluginError

        Raises:
            PluginError: If strict and a plugin raised
        """
        for plugin in self._plugins:
            try:
                result = plugin.try_render(token)
            except Exception as exc:
                if strict:
                    raise PluginError(plugin.name, str(exc)) from exc
                logger.debug(
                    "Plugin %r failed on %s; skipping", plugin.name, token.type.name, exc_info=True
                )
                continue
            if result is not None:
                return result
        return None

    def __contains__(self, plugin: object) -> bool:
        return any(_is_entry_for(entry, plugin) for entry in self._plugins)

    def __iter__(self) -> Iterator[RenderPlugin]:
        return iter(tuple(self._plugins))

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        names = ", ".join(plugin.name for plugin in self._plugins)
        return f"PluginPipeline([{names}])"


def _is_entry_for(entry: RenderPlugin, plugin: object) -> bool:
    """Identity match, looking through FunctionPlugin wrappers."""
    return entry is plugin or (isinstance(entry, FunctionPlugin) and entry.func is plugin)


# Registry of built-in plugins, by name
BUILTIN_PLUGINS: dict[str, type[RenderPlugin]] = {}


def register_plugin(
    name: str,
) -> Callable[[type[RenderPlugin]], type[RenderPlugin]]:
    """Decorator to register a built-in plugin class.

    Usage:
        @register_plugin("heading_anchors")
        class HeadingAnchorsPlugin:
            ...

    """

    def decorator(cls: type[RenderPlugin]) -> type[RenderPlugin]:
        BUILTIN_PLUGINS[name] = cls
        return cls

    return decorator


def get_plugin(name: str) -> RenderPlugin:
    """Get a new built-in plugin instance by name.

    Raises:
        KeyError: If plugin name is not recognized
    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS.keys()))
        raise KeyError(f"Unknown plugin: {name!r}. Available: {available}")
    return BUILTIN_PLUGINS[name]()


# Import built-in plugins to register them
# These imports trigger the @register_plugin decorators
from marklet.plugins.heading_anchors import HeadingAnchorsPlugin  # noqa: E402
from marklet.plugins.highlight import SyntaxHighlightPlugin  # noqa: E402
from marklet.plugins.task_lists import TaskListPlugin  # noqa: E402

__all__ += [
    "HeadingAnchorsPlugin",
    "SyntaxHighlightPlugin",
    "TaskListPlugin",
]
