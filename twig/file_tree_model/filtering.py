"""Per-entry visibility rules applied to each directory listing."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Entry, TraversalConfig


def path_filter(entry: Entry, config: TraversalConfig) -> bool:
    """Return whether ``entry`` should be shown under ``config``.

    Hidden entries (leading ``.``) are dropped unless ``include_hidden``.
    Directories are subject only to that rule; files are additionally dropped
    by ``directories_only`` and must satisfy the name filter.
    """
    if entry.is_hidden and not config.include_hidden:
        return False
    if entry.is_dir:
        return True
    if config.directories_only:
        return False
    return config.name_filter.matches(entry.name)


def filter_entries(entries: Iterable[Entry], config: TraversalConfig) -> list[Entry]:
    """Keep entries accepted by :func:`path_filter`, preserving order."""
    return [entry for entry in entries if path_filter(entry, config)]


__all__ = ["path_filter", "filter_entries"]
