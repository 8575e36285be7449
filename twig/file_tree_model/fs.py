"""Filesystem listing and entry classification."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .types import Entry, EntryCategory

IMAGE_EXTENSIONS = frozenset({"svg", "png", "jpg", "jpeg"})
VIDEO_EXTENSIONS = frozenset({"mp4", "mkv", "flv"})
DATA_EXTENSIONS = frozenset({"json", "xml"})
ARCHIVE_EXTENSIONS = frozenset({"gz", "zip", "rar", "tar", "7z"})
EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

_EXTENSION_CATEGORIES: tuple[tuple[frozenset[str], EntryCategory], ...] = (
    (IMAGE_EXTENSIONS, EntryCategory.IMAGE),
    (VIDEO_EXTENSIONS, EntryCategory.VIDEO),
    (DATA_EXTENSIONS, EntryCategory.DATA),
    (ARCHIVE_EXTENSIONS, EntryCategory.ARCHIVE),
)


def name_extension(name: str) -> str | None:
    """Return the text after the last dot, or ``None`` when there is no dot."""
    _stem, dot, ext = name.rpartition(".")
    if not dot:
        return None
    return ext


def is_executable_mode(mode: int) -> bool:
    """Return whether any owner/group/other execute bit is set."""
    return bool(mode & EXECUTABLE_BITS)


def classify_entry(name: str, is_dir: bool, is_executable: bool) -> EntryCategory:
    """Pick the display category for an entry.

    Extension matching is case-sensitive, so ``photo.PNG`` is not an image.
    Extension categories win over the execute bit.
    """
    if is_dir:
        return EntryCategory.DIRECTORY
    ext = name_extension(name)
    if ext is not None:
        for extensions, category in _EXTENSION_CATEGORIES:
            if ext in extensions:
                return category
    if is_executable:
        return EntryCategory.EXECUTABLE
    return EntryCategory.OTHER


def is_displayable_name(name: str) -> bool:
    """Return False for names that only survived decoding via surrogate escapes."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _safe_mode(path: Path | os.DirEntry) -> int:
    try:
        return path.stat().st_mode
    except OSError:
        return 0


def _safe_is_dir(path: Path | os.DirEntry) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def make_entry(name: str, path: Path, is_dir: bool, mode: int) -> Entry:
    executable = not is_dir and is_executable_mode(mode)
    return Entry(
        name=name,
        path=path,
        is_dir=is_dir,
        is_executable=executable,
        category=classify_entry(name, is_dir, executable),
    )


def entry_for_path(path: Path) -> Entry:
    """Build the entry for a traversal root."""
    name = path.name or str(path)
    return make_entry(name, path, _safe_is_dir(path), _safe_mode(path))


def list_directory_children(directory: Path) -> tuple[list[Entry], OSError | None]:
    """List direct children of ``directory`` in platform order.

    Returns ``(entries, scan_error)``. ``scan_error`` is set when the directory
    cannot be opened or read; entries collected before the failure are dropped.
    Symlinks are followed when deciding whether a child is a directory.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as scanned:
            for child in scanned:
                entries.append(
                    make_entry(child.name, Path(child.path), _safe_is_dir(child), _safe_mode(child))
                )
    except OSError as exc:
        return [], exc
    return entries, None


def canonical_path(path: Path) -> Path:
    """Resolve ``path`` for cycle detection, falling back to an absolute path."""
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()


__all__ = [
    "IMAGE_EXTENSIONS",
    "VIDEO_EXTENSIONS",
    "DATA_EXTENSIONS",
    "ARCHIVE_EXTENSIONS",
    "name_extension",
    "is_executable_mode",
    "classify_entry",
    "is_displayable_name",
    "make_entry",
    "entry_for_path",
    "list_directory_children",
    "canonical_path",
]
