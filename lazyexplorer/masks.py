"""Glob exclusion masks applied when a directory is read."""

from __future__ import annotations

import fnmatch
import re
from collections.abc import Iterable

from .config import ConfigProvider


class GlobMaskFilter:
    """Compiled set of ``fnmatch`` patterns.

    Patterns are joined into one regular expression at construction, so
    ``is_masked`` costs a single match per name.
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns = tuple(pattern.strip() for pattern in patterns if pattern.strip())
        if self.patterns:
            combined = "|".join(f"(?:{fnmatch.translate(pattern)})" for pattern in self.patterns)
            self._regex: re.Pattern[str] | None = re.compile(combined)
        else:
            self._regex = None

    @classmethod
    def from_config(cls, config: ConfigProvider) -> GlobMaskFilter:
        return cls(config.file_masks())

    def is_masked(self, name: str) -> bool:
        if self._regex is None:
            return False
        return self._regex.match(name) is not None


__all__ = ["GlobMaskFilter"]
