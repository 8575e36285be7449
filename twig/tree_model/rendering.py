"""Formatting helpers turning render events into output lines."""

from __future__ import annotations

from collections.abc import Iterable

from ..file_tree_model.types import RenderEvent
from ..ui_theme import DEFAULT_THEME, UITheme

GUIDE_BAR = "|"
GUIDE_BLANK = " "
BRANCH_MARKER = "|"
DEPTH_STEP = "__"


def format_guides(guides: Iterable[bool]) -> str:
    """Render guide columns as ``|`` or blanks."""
    return "".join(GUIDE_BAR if bar else GUIDE_BLANK for bar in guides)


def format_render_event(event: RenderEvent, theme: UITheme | None = None) -> str:
    """Render one event as a line without a trailing newline.

    Non-root lines are ``<guides>|`` followed by ``__`` per depth level, then
    the category-colored name.
    """
    active_theme = theme or DEFAULT_THEME
    color = active_theme.color_for(event.category)
    reset = active_theme.reset if color else ""
    name = f"{color}{event.label}{reset}"
    if event.depth == 0:
        return name

    prefix = format_guides(event.guides) + BRANCH_MARKER + DEPTH_STEP * event.depth
    return prefix + name


def render_lines(events: Iterable[RenderEvent], theme: UITheme | None = None) -> list[str]:
    """Format every event in ``events``."""
    return [format_render_event(event, theme) for event in events]


__all__ = [
    "GUIDE_BAR",
    "GUIDE_BLANK",
    "BRANCH_MARKER",
    "DEPTH_STEP",
    "format_guides",
    "format_render_event",
    "render_lines",
]
