"""UI theme definitions and selection helpers.

Themes are ANSI palettes keyed by entry category.
"""

from __future__ import annotations

from dataclasses import dataclass

from .file_tree_model.types import EntryCategory


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    directory: str
    image: str
    video: str
    data: str
    archive: str
    executable: str
    other: str

    def color_for(self, category: EntryCategory) -> str:
        """Return the escape sequence used for names of ``category``."""
        return getattr(self, category.value)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    directory="\033[1;34m",
    image="\033[1;38;2;255;105;180m",
    video="\033[1;35m",
    data="\033[1;33m",
    archive="\033[1;31m",
    executable="\033[1;32m",
    other="",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    directory="",
    image="",
    video="",
    data="",
    archive="",
    executable="",
    other="",
)


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return the plain palette when color is off, the default one otherwise."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "resolve_theme",
]
