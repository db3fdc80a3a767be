"""Host opener: the explorer's only route to the editing environment.

``EditorOpener`` runs ``$EDITOR`` while temporarily leaving raw/alternate
screen TUI mode. Host failures come back as an error message string instead
of raising; an unrecognized open mode raises ``InvalidOpenModeError``.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Callable
from typing import Protocol

from .entries import OpenMode
from .errors import InvalidOpenModeError

logger = logging.getLogger(__name__)

# Command-line flags understood by vi-family editors.
EDITOR_MODE_ARGS: dict[OpenMode, tuple[str, ...]] = {
    OpenMode.CURRENT_TAB: (),
    OpenMode.NEW_TAB: ("-p",),
    OpenMode.NEW_SPLIT: ("-o",),
    OpenMode.NEW_VERTICAL_SPLIT: ("-O",),
}


class Opener(Protocol):
    def current_working_directory(self) -> str: ...

    def current_buffer_directory(self) -> str | None: ...

    def open_path(self, path: str, mode: OpenMode) -> str | None: ...


def display_path(path: str, cwd: str) -> str:
    """Return ``path`` relative to ``cwd`` when it lives below it."""
    if path.startswith("./"):
        path = path[2:]
    if not os.path.isabs(path):
        return path
    try:
        relative = os.path.relpath(path, cwd)
    except ValueError:
        return path
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return path
    return relative


def _noop() -> None:
    return None


class EditorOpener:
    def __init__(
        self,
        disable_tui_mode: Callable[[], None] = _noop,
        enable_tui_mode: Callable[[], None] = _noop,
        editor: str | None = None,
    ) -> None:
        self.disable_tui_mode = disable_tui_mode
        self.enable_tui_mode = enable_tui_mode
        self.editor = editor
        self.last_opened: str | None = None

    def current_working_directory(self) -> str:
        return os.getcwd()

    def current_buffer_directory(self) -> str | None:
        if self.last_opened is None:
            return None
        return os.path.dirname(self.last_opened)

    def editor_command(self) -> list[str] | str:
        """Return the editor argv, or an error message when unusable."""
        editor_env = (self.editor if self.editor is not None else os.environ.get("EDITOR", "")).strip()
        if not editor_env:
            return "Cannot open: $EDITOR is not set."
        cmd = shlex.split(editor_env)
        if not cmd:
            return "Cannot open: $EDITOR is empty."
        return cmd

    def open_path(self, path: str, mode: OpenMode) -> str | None:
        if not isinstance(mode, OpenMode) or mode not in EDITOR_MODE_ARGS:
            raise InvalidOpenModeError(mode)

        cmd = self.editor_command()
        if isinstance(cmd, str):
            return cmd

        target = display_path(path, self.current_working_directory())
        logger.debug("opening %s (%s)", target, mode.value)
        self.disable_tui_mode()
        try:
            subprocess.run([*cmd, *EDITOR_MODE_ARGS[mode], target], check=False)
        except Exception as exc:
            return f"Failed to launch editor: {exc}"
        finally:
            self.enable_tui_mode()
        self.last_opened = os.path.abspath(path)
        return None


__all__ = ["EDITOR_MODE_ARGS", "EditorOpener", "Opener", "display_path"]
