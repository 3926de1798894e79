"""StringBuilder for O(n) HTML accumulation.

Appends fragments to a list and joins once at the end, instead of
repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> _ = sb.append_block("<h1>Hello</h1>").append_block("")
        >>> sb.build()
        '<h1>Hello</h1>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_block(self, fragment: str) -> StringBuilder:
        """Append a rendered block followed by a newline.

        An empty fragment appends nothing, not even the newline.
        """
        if fragment:
            self._parts.append(fragment)
            self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
