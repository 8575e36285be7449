"""Recursive pre-order traversal producing render events.

The walker lists each directory, filters and orders its children, and tracks
which guide columns still need a continuation bar. A column stays active while
the directory that owns it has children left to visit; it is cleared before
that directory's last child is entered, so the last child's subtree draws no
bar beneath it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from .filtering import filter_entries
from .fs import canonical_path, entry_for_path, is_displayable_name, list_directory_children
from .sorting import Comparator, resolve_comparator, sort_entries
from .types import Entry, RenderEvent, TraversalConfig, WalkError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[WalkError], None]


def branch_offset(depth: int) -> int:
    """Column of the ``|`` marker for children of a depth-``depth`` directory.

    Each marker sits under the first character of its parent's name: a line at
    depth ``d`` starts its name after ``branch_offset(d - 1) + 1 + 2 * d``
    columns.
    """
    return depth * (depth + 2)


def guide_columns(depth: int, branch_state: set[int]) -> tuple[bool, ...]:
    """Return the bar/blank flags for the columns preceding a depth-``depth`` marker."""
    if depth <= 0:
        return ()
    return tuple(column in branch_state for column in range(branch_offset(depth - 1)))


def visible_children(
    directory: Path,
    config: TraversalConfig,
    comparator: Comparator,
) -> tuple[list[Entry], OSError | None]:
    """List, filter, and order the children of ``directory``.

    Returns ``(children, error)``; on error the child list is empty. Only a
    failure to list ``directory`` itself is an error: an entry that cannot be
    stat-ed while sorting is kept and ordered last.
    """
    children, scan_error = list_directory_children(directory)
    if scan_error is not None:
        return [], scan_error

    displayable: list[Entry] = []
    for child in children:
        if not is_displayable_name(child.name):
            logger.debug("skipping undecodable name in %s", directory)
            continue
        displayable.append(child)

    return sort_entries(filter_entries(displayable, config), comparator), None


def walk(
    root: Path,
    config: TraversalConfig,
    on_error: ErrorHandler | None = None,
) -> Iterator[RenderEvent]:
    """Yield render events for ``root`` and its visible descendants in pre-order.

    ``root`` itself is always emitted, even when it is a file. Directory
    failures are passed to ``on_error`` and the walk continues with the next
    sibling; without a handler the underlying ``OSError`` is raised and the
    walk stops.
    """
    comparator = resolve_comparator(config.sort_mode, config.reverse, config.directories_first)

    def report(error: WalkError) -> None:
        if on_error is None:
            raise error.error
        on_error(error)

    def should_expand(entry: Entry, depth: int) -> bool:
        if not entry.is_dir:
            return False
        if config.max_depth is not None and depth >= config.max_depth:
            return False
        if depth > 0 and not config.follow_symlinks and entry.path.is_symlink():
            return False
        return True

    def visit(
        entry: Entry,
        depth: int,
        branch_state: set[int],
        ancestors: frozenset[Path],
    ) -> Iterator[RenderEvent]:
        yield RenderEvent(depth=depth, guides=guide_columns(depth, branch_state), entry=entry)
        if not should_expand(entry, depth):
            return

        canonical = canonical_path(entry.path)
        if canonical in ancestors:
            logger.debug("not descending into %s: symlink cycle", entry.path)
            return

        children, error = visible_children(entry.path, config, comparator)
        if error is not None:
            report(WalkError(path=entry.path, depth=depth, error=error))
            return

        offset = branch_offset(depth)
        branch_ancestors = ancestors | {canonical}
        last_index = len(children) - 1
        for index, child in enumerate(children):
            if index < last_index:
                branch_state.add(offset)
            else:
                branch_state.discard(offset)
            yield from visit(child, depth + 1, branch_state, branch_ancestors)
        branch_state.discard(offset)

    yield from visit(entry_for_path(root), 0, set(), frozenset())


__all__ = [
    "ErrorHandler",
    "branch_offset",
    "guide_columns",
    "visible_children",
    "walk",
]
