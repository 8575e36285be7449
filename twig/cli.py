"""Command-line front door for twig.

Parses CLI options into a ``TraversalConfig``, expands root paths, and prints
each root's tree in turn.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .file_tree_model import NameFilter, TraversalConfig, WalkError, available_sort_modes, parse_sort_mode, walk
from .file_tree_model.types import SortMode
from .tree_model import format_render_event
from .ui_theme import UITheme, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "twig: %(message)s"
EXIT_TRAVERSAL_ERRORS = 1


def _nonnegative_int(value: str) -> int:
    """argparse type for depth limits."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be >= 0")
    return parsed


def _sort_mode(value: str) -> SortMode:
    """argparse type for ``--sort``."""
    try:
        return parse_sort_mode(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _file_filter(value: str) -> NameFilter:
    """argparse type for ``--file-filter``."""
    try:
        return NameFilter.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _stdout_is_tty() -> bool:
    """Return whether stdout is an interactive terminal (colors default on)."""
    return sys.stdout.isatty()


def expand_path(raw: str) -> Path:
    """Expand a leading ``~`` to the home directory and a leading ``.`` to the cwd."""
    path = Path(os.path.expanduser(raw))
    if raw.startswith("."):
        path = Path(os.path.abspath(path))
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twig",
        description="Print the file architecture of one or more directories.",
    )
    parser.add_argument("paths", nargs="*", help="Paths to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", help="Include hidden entries.")
    parser.add_argument("-d", "--directory", action="store_true", help="Display only directories.")
    parser.add_argument(
        "-l",
        "--max-level",
        type=_nonnegative_int,
        default=None,
        metavar="N",
        help="Max level of depth (default: unlimited).",
    )
    parser.add_argument(
        "-s",
        "--sort",
        type=_sort_mode,
        default=SortMode.NONE,
        metavar="MODE",
        help=f"Sort siblings by a criteria ({', '.join(available_sort_modes())}).",
    )
    parser.add_argument(
        "--dir-first",
        action="store_true",
        help="Display directories before files. Can be combined with --sort.",
    )
    parser.add_argument("-r", "--reverse", action="store_true", help="Sort in reverse order.")
    parser.add_argument(
        "-f",
        "--file-filter",
        type=_file_filter,
        default=None,
        metavar="PATTERN",
        help='File name filter: a complete name, "prefix*", "*suffix" or "prefix*suffix".',
    )
    parser.add_argument(
        "--no-follow-symlinks",
        action="store_true",
        help="List symlinked directories without descending into them.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def build_traversal_config(args: argparse.Namespace) -> TraversalConfig:
    return TraversalConfig(
        include_hidden=args.all,
        directories_only=args.directory,
        max_depth=args.max_level,
        sort_mode=args.sort,
        reverse=args.reverse,
        directories_first=args.dir_first,
        name_filter=args.file_filter or NameFilter(),
        follow_symlinks=not args.no_follow_symlinks,
    )


def print_tree(root: Path, config: TraversalConfig, theme: UITheme) -> list[WalkError]:
    """Print one root's tree to stdout and return the subtrees that failed."""
    failures: list[WalkError] = []

    def on_error(error: WalkError) -> None:
        logger.warning("cannot open directory %s: %s", error.path, error.error.strerror or error.error)
        failures.append(error)

    for event in walk(root, config, on_error=on_error):
        sys.stdout.write(format_render_event(event, theme) + "\n")
    return failures


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print a tree for every requested path.

    Exits with status 2 on configuration errors (via argparse) and with
    status 1 when a root is missing or any subtree could not be listed.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    config = build_traversal_config(args)
    no_color = args.no_color or not _stdout_is_tty()
    theme = resolve_theme(no_color=no_color)

    roots = [expand_path(raw) for raw in args.paths] or [Path.cwd()]
    failed = False
    for index, root in enumerate(roots):
        if index > 0:
            sys.stdout.write("\n")
        if not os.path.lexists(root):
            logger.error("path not found: %s", root)
            failed = True
            continue
        if print_tree(root, config, theme):
            failed = True
    sys.stdout.flush()

    if failed:
        raise SystemExit(EXIT_TRAVERSAL_ERRORS)


if __name__ == "__main__":
    main()
