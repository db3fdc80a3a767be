"""Public package surface for lazyexplorer.

Exports ``main`` for programmatic CLI invocation and the explorer core types.
Most implementation lives in submodules under ``lazyexplorer``.
"""

from __future__ import annotations

from .entries import Entry, OpenMode, RefreshScope
from .paths import normalize_path


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["Entry", "OpenMode", "RefreshScope", "main", "normalize_path"]
