"""Listing entries and the open-mode policy passed to the host opener."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .paths import SEPARATOR


@dataclass(frozen=True)
class Entry:
    """One directory child as seen by the explorer."""

    name: str
    is_dir: bool = False

    @property
    def label(self) -> str:
        """Display string; directories carry a trailing separator."""
        if self.is_dir:
            return self.name + SEPARATOR
        return self.name

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


class OpenMode(Enum):
    CURRENT_TAB = "current_tab"
    NEW_TAB = "new_tab"
    NEW_SPLIT = "new_split"
    NEW_VERTICAL_SPLIT = "new_vertical_split"


class RefreshScope(Enum):
    FULL = "full"


__all__ = ["Entry", "OpenMode", "RefreshScope"]
