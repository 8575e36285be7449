"""Sibling ordering: resolve a sort mode into a three-way comparator."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from .types import Entry, SortMode

Comparator = Callable[[Entry, Entry], int]


def available_sort_modes() -> tuple[str, ...]:
    """Return selectable sort-mode names in display order."""
    return tuple(mode.value for mode in SortMode)


def parse_sort_mode(name: str | SortMode) -> SortMode:
    """Return the ``SortMode`` for ``name``.

    Lookup is case-sensitive. Unknown names raise ``ValueError`` naming the
    offending token.
    """
    if isinstance(name, SortMode):
        return name
    try:
        return SortMode(name)
    except ValueError:
        choices = ", ".join(available_sort_modes())
        raise ValueError(f"unknown sort mode: {name!r} (choose from {choices})") from None


def _cmp(left: object, right: object) -> int:
    return (left > right) - (left < right)


def keep_order(_left: Entry, _right: Entry) -> int:
    """Comparator that never reorders; stable sorting keeps listing order."""
    return 0


def by_name(left: Entry, right: Entry) -> int:
    """Case-sensitive codepoint order of names."""
    return _cmp(left.name, right.name)


def _mtime_key(entry: Entry) -> int:
    mtime_ns = entry.mtime_ns
    return -1 if mtime_ns is None else mtime_ns


def by_modified(left: Entry, right: Entry) -> int:
    """Most recently modified first; entries that cannot be stat-ed sort last."""
    return _cmp(_mtime_key(right), _mtime_key(left))


def directories_before_files(left: Entry, right: Entry) -> int:
    """Order a directory before a non-directory; equal otherwise."""
    if left.is_dir == right.is_dir:
        return 0
    return -1 if left.is_dir else 1


_BASE_COMPARATORS: dict[SortMode, Comparator] = {
    SortMode.NONE: keep_order,
    SortMode.NAME: by_name,
    SortMode.MODIFIED: by_modified,
}


def resolve_comparator(
    sort_mode: str | SortMode,
    reverse: bool = False,
    directories_first: bool = False,
) -> Comparator:
    """Build the sibling comparator for one traversal.

    ``reverse`` inverts only the base key; the directories-first split is
    applied before the base key and is never inverted.
    """
    base = _BASE_COMPARATORS[parse_sort_mode(sort_mode)]
    if base is keep_order and not directories_first:
        return keep_order

    def compare(left: Entry, right: Entry) -> int:
        if directories_first:
            order = directories_before_files(left, right)
            if order:
                return order
        order = base(left, right)
        return -order if reverse else order

    return compare


def sort_entries(entries: Iterable[Entry], comparator: Comparator) -> list[Entry]:
    """Return ``entries`` ordered by ``comparator`` (stable)."""
    items = list(entries)
    if comparator is keep_order:
        return items
    return sorted(items, key=cmp_to_key(comparator))


__all__ = [
    "Comparator",
    "available_sort_modes",
    "parse_sort_mode",
    "keep_order",
    "by_name",
    "by_modified",
    "directories_before_files",
    "resolve_comparator",
    "sort_entries",
]
