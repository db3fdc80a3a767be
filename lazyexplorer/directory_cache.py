"""Memoized directory listings for the explorer view.

A directory is read once and its entries kept until the cache is told to
forget it. Masks are applied while reading, so masked names never reach the
cache; dotfile visibility is left to the caller because it changes with
every keystroke.
"""

from __future__ import annotations

import logging
import os

from .entries import Entry
from .masks import GlobMaskFilter
from .paths import SEPARATOR

logger = logging.getLogger(__name__)

PARENT_ENTRY = Entry("..", is_dir=True)


def cache_key(directory: str) -> str:
    """Return the cache slot for ``directory``; ``/a/b`` and ``/a/b/`` share one."""
    if len(directory) > 1 and directory.endswith(SEPARATOR):
        return directory[: -len(SEPARATOR)]
    return directory


def read_directory_entries(
    directory: str,
    mask_filter: GlobMaskFilter,
    include_parent: bool = False,
) -> tuple[Entry, ...] | None:
    """Read one directory level in filesystem order.

    Returns ``None`` when the directory is missing or cannot be scanned.
    """
    entries: list[Entry] = []
    if include_parent:
        entries.append(PARENT_ENTRY)
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if name in {".", ".."}:
                    continue
                if mask_filter.is_masked(name):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(Entry(name, is_dir))
    except (OSError, ValueError) as exc:
        # ValueError: embedded NUL byte, which normalize_path passes through.
        logger.debug("cannot list %s: %s", directory, exc)
        return None
    return tuple(entries)


class DirectoryCache:
    """Directory path to ordered entry tuple, filled on lookup miss."""

    def __init__(self, mask_filter: GlobMaskFilter | None = None, include_parent: bool = False) -> None:
        self.mask_filter = mask_filter if mask_filter is not None else GlobMaskFilter()
        self.include_parent = include_parent
        self._entries: dict[str, tuple[Entry, ...]] = {}

    def __contains__(self, directory: object) -> bool:
        return isinstance(directory, str) and cache_key(directory) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, directory: str) -> tuple[Entry, ...]:
        key = cache_key(directory)
        cached = self._entries.get(key)
        if cached is not None:
            return cached

        entries = read_directory_entries(key, self.mask_filter, self.include_parent)
        if entries is None:
            # Not cached: a later read may succeed.
            return ()
        self._entries[key] = entries
        logger.debug("cached %d entries for %s", len(entries), key)
        return entries

    def invalidate(self, directory: str) -> None:
        self._entries.pop(cache_key(directory), None)

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["DirectoryCache", "PARENT_ENTRY", "cache_key", "read_directory_entries"]
