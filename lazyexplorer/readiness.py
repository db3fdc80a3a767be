"""Non-blocking "is more input waiting?" probes.

The answer is advisory; nothing in the explorer core depends on it.
"""

from __future__ import annotations

import select
from typing import Protocol


class ReadinessProbe(Protocol):
    def poll_readable(self) -> bool: ...


class SelectReadiness:
    """Probe a file descriptor with a zero-timeout ``select``."""

    def __init__(self, fd: int) -> None:
        self.fd = fd

    def poll_readable(self) -> bool:
        try:
            ready, _, _ = select.select([self.fd], [], [], 0)
        except (OSError, ValueError):
            return False
        return bool(ready)


class NeverReady:
    """Probe for non-interactive use."""

    def poll_readable(self) -> bool:
        return False


__all__ = ["NeverReady", "ReadinessProbe", "SelectReadiness"]
