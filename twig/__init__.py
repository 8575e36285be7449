"""Public package surface for twig.

Exports ``main`` for programmatic CLI invocation and ``walk`` for callers
that want render events instead of printed output.
"""

from __future__ import annotations

from .file_tree_model import TraversalConfig, walk


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main", "walk", "TraversalConfig"]
