"""Error kinds reported at the explorer boundary.

Explorer actions return ``ExplorerError | None`` instead of raising so the
interactive session can show the message and keep running.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    INVALID_OPEN_MODE = "invalid_open_mode"
    OPEN_FAILED = "open_failed"
    INTERNAL_INVARIANT = "internal_invariant"


@dataclass(frozen=True)
class ExplorerError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class InvalidOpenModeError(ValueError):
    """Raised by an opener handed a mode it does not recognize."""

    def __init__(self, mode: object) -> None:
        super().__init__(f"bad open mode: {mode!r}")
        self.mode = mode


__all__ = ["ErrorKind", "ExplorerError", "InvalidOpenModeError"]
