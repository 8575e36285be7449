"""Domain model for directory traversal.

This package contains the non-presentation pieces of a tree listing:
- entry/config/event datatypes
- filesystem listing and category classification
- per-entry filtering and sibling ordering
- the recursive walker that emits render events
"""

from __future__ import annotations

from .types import (
    Entry,
    EntryCategory,
    NameFilter,
    RenderEvent,
    SortMode,
    TraversalConfig,
    WalkError,
)
from .fs import classify_entry, entry_for_path, is_executable_mode, list_directory_children
from .filtering import filter_entries, path_filter
from .sorting import available_sort_modes, parse_sort_mode, resolve_comparator, sort_entries
from .walker import branch_offset, guide_columns, walk

__all__ = [
    "Entry",
    "EntryCategory",
    "NameFilter",
    "RenderEvent",
    "SortMode",
    "TraversalConfig",
    "WalkError",
    "classify_entry",
    "entry_for_path",
    "is_executable_mode",
    "list_directory_children",
    "filter_entries",
    "path_filter",
    "available_sort_modes",
    "parse_sort_mode",
    "resolve_comparator",
    "sort_entries",
    "branch_offset",
    "guide_columns",
    "walk",
]
