"""Tree row formatting.

Turns ``RenderEvent`` values from the walker into themed text lines.
"""

from __future__ import annotations

from .rendering import format_guides, format_render_event, render_lines

__all__ = [
    "format_guides",
    "format_render_event",
    "render_lines",
]
