"""Domain datatypes for one tree traversal run."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from pathlib import Path

FILTER_WILDCARD = "*"


class SortMode(str, Enum):
    """Sibling ordering key selectable from the command line."""

    NONE = "none"
    NAME = "name"
    MODIFIED = "modified"


class EntryCategory(Enum):
    """Display category of an entry, used to pick its color."""

    DIRECTORY = "directory"
    IMAGE = "image"
    VIDEO = "video"
    DATA = "data"
    ARCHIVE = "archive"
    EXECUTABLE = "executable"
    OTHER = "other"


@dataclass(frozen=True)
class NameFilter:
    """File-name filter: either an exact name or a prefix/suffix pair.

    Empty strings are treated like ``None``. Only non-directory entries are
    subject to this filter.
    """

    exact: str | None = None
    prefix: str | None = None
    suffix: str | None = None

    def __post_init__(self) -> None:
        if self.exact and (self.prefix or self.suffix):
            raise ValueError("exact name filter cannot be combined with prefix/suffix")

    @classmethod
    def parse(cls, pattern: str) -> NameFilter:
        """Build a filter from ``name``, ``prefix*``, ``*suffix`` or ``prefix*suffix``."""
        count = pattern.count(FILTER_WILDCARD)
        if count == 0:
            return cls(exact=pattern or None)
        if count > 1:
            raise ValueError(f"malformed file filter: {pattern!r} (at most one '*' allowed)")
        prefix, _star, suffix = pattern.partition(FILTER_WILDCARD)
        return cls(prefix=prefix or None, suffix=suffix or None)

    def matches(self, name: str) -> bool:
        """Return whether ``name`` passes this filter."""
        if self.exact:
            return name == self.exact
        if self.prefix and not name.startswith(self.prefix):
            return False
        if self.suffix and not name.endswith(self.suffix):
            return False
        return True


@dataclass(frozen=True)
class TraversalConfig:
    """Read-only options for one run; ``max_depth=None`` means unlimited."""

    include_hidden: bool = False
    directories_only: bool = False
    max_depth: int | None = None
    sort_mode: SortMode = SortMode.NONE
    reverse: bool = False
    directories_first: bool = False
    name_filter: NameFilter = field(default_factory=NameFilter)
    follow_symlinks: bool = True


@dataclass(frozen=True)
class Entry:
    """One filesystem node observed while listing a directory."""

    name: str
    path: Path
    is_dir: bool
    is_executable: bool
    category: EntryCategory

    @cached_property
    def mtime_ns(self) -> int | None:
        """Modification time of the entry itself (symlinks are not followed).

        Fetched on first access; ``None`` when the entry can no longer be stat-ed.
        """
        try:
            return int(os.stat(self.path, follow_symlinks=False).st_mtime_ns)
        except OSError:
            return None

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass(frozen=True)
class RenderEvent:
    """One output row: depth, guide columns before the branch marker, entry."""

    depth: int
    guides: tuple[bool, ...]
    entry: Entry

    @property
    def label(self) -> str:
        return self.entry.name

    @property
    def category(self) -> EntryCategory:
        return self.entry.category


@dataclass(frozen=True)
class WalkError:
    """A subtree that could not be expanded."""

    path: Path
    depth: int
    error: OSError


__all__ = [
    "SortMode",
    "EntryCategory",
    "NameFilter",
    "TraversalConfig",
    "Entry",
    "RenderEvent",
    "WalkError",
]
