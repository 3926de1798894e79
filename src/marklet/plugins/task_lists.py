"""Task list plugin for marklet.

Renders bullet list items that start with a checkbox marker as disabled
checkboxes.

Usage:
    >>> md = Markdown(plugins=["task_lists"])
    >>> print(md("- [ ] Unchecked\\n- [x] Checked"), end="")
    <ul class="task-list">
      <li><input type="checkbox" disabled /> Unchecked</li>
      <li><input type="checkbox" disabled checked /> Checked</li>
    </ul>

Syntax:
- [ ] Unchecked task
- [x] Checked task
- [X] Also checked (uppercase)

Notes:
- Only unordered lists are claimed, and only when at least one item
  carries a marker; items without one render as plain items
- Checkboxes are rendered disabled

Thread Safety:
This plugin is stateless and thread-safe.

"""

from __future__ import annotations

import re

from marklet.plugins import register_plugin
from marklet.tokens import Block, UnorderedList
from marklet.utils.text import escape_html

_TASK_MARKER = re.compile(r"^\[([ xX])\]\s+(.*)$")


@register_plugin("task_lists")
class TaskListPlugin:
    """Render ``[ ]``/``[x]`` list items as checkboxes."""

    @property
    def name(self) -> str:
        return "task_lists"

    def try_render(self, token: Block) -> str | None:
        if not isinstance(token, UnorderedList):
            return None
        matches = [_TASK_MARKER.match(item) for item in token.items]
        if not any(matches):
            return None

        lines = ['<ul class="task-list">']
        for item, match in zip(token.items, matches):
            if match is None:
                lines.append(f"  <li>{escape_html(item)}</li>")
                continue
            checked = " checked" if match.group(1) in "xX" else ""
            lines.append(
                f'  <li><input type="checkbox" disabled{checked} /> '
                f"{escape_html(match.group(2))}</li>"
            )
        lines.append("</ul>")
        return "\n".join(lines)
