"""Interactive explorer session.

``ExplorerSession`` maps key tokens to explorer actions and tracks the
selection; ``run_session`` is the event loop that reads keys, dispatches
them and repaints. Opening a file ends the session, the way a picker closes
once it has done its job.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field

from .entries import Entry, OpenMode, RefreshScope
from .errors import ExplorerError
from .explorer import Explorer
from .input import read_key
from .render import RenderContext, clamp_list_start, compose_screen, list_rows, render_frame
from .terminal import TerminalController

OPEN_MODE_KEYS: dict[str, OpenMode] = {
    "ENTER": OpenMode.CURRENT_TAB,
    "TAB": OpenMode.CURRENT_TAB,
    "CTRL_T": OpenMode.NEW_TAB,
    "CTRL_O": OpenMode.NEW_SPLIT,
    "CTRL_V": OpenMode.NEW_VERTICAL_SPLIT,
}
QUIT_KEYS = frozenset({"ESC", "CTRL_C", "CTRL_G"})


@dataclass
class ExplorerSession:
    explorer: Explorer
    selected: int = 0
    list_start: int = 0
    message: str = ""
    message_is_error: bool = False
    finished: bool = False
    matches: list[Entry] = field(default_factory=list)

    def refresh_matches(self) -> None:
        self.matches = self.explorer.matching_entries()
        if self.selected >= len(self.matches):
            self.selected = max(0, len(self.matches) - 1)

    def selected_entry(self) -> Entry | None:
        if not self.matches:
            return None
        return self.matches[self.selected]

    def move_selection(self, delta: int) -> None:
        if not self.matches:
            self.selected = 0
            return
        self.selected = (self.selected + delta) % len(self.matches)

    def _report(self, error: ExplorerError | None) -> bool:
        if error is None:
            return True
        self.message = str(error)
        self.message_is_error = True
        return False

    def _prompt_changed(self) -> None:
        self.selected = 0
        self.list_start = 0
        self.refresh_matches()

    def _finish(self) -> None:
        self.finished = True
        self.explorer.close()

    def open_selected(self, mode: OpenMode) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        if entry.is_dir:
            self.explorer.open_entry(entry, mode)
            self._prompt_changed()
            return
        if self._report(self.explorer.open_entry(entry, mode)):
            self._finish()

    def handle_key(self, key: str) -> bool:
        """Apply one key token; returns ``False`` once the session should end."""
        self.message = ""
        self.message_is_error = False

        if key in QUIT_KEYS:
            self._finish()
        elif key in OPEN_MODE_KEYS:
            self.open_selected(OPEN_MODE_KEYS[key])
        elif key in {"DOWN", "CTRL_N"}:
            self.move_selection(1)
        elif key in {"UP", "CTRL_P"}:
            self.move_selection(-1)
        elif key == "BACKSPACE":
            self.explorer.backspace()
            self._prompt_changed()
        elif key in {"CTRL_W", "LEFT"}:
            self.explorer.delete_component()
            self._prompt_changed()
        elif key == "RIGHT":
            entry = self.selected_entry()
            if entry is not None and entry.is_dir:
                self.open_selected(OpenMode.CURRENT_TAB)
        elif key == "CTRL_U":
            self.explorer.clear_prompt()
            self._prompt_changed()
        elif key == "CTRL_R":
            self.explorer.refresh(RefreshScope.FULL)
            self.refresh_matches()
            self.message = "Refreshed."
        elif key == "CTRL_A":
            if self._report(self.explorer.open_all_visible(OpenMode.CURRENT_TAB)):
                self._finish()
        elif key == "CTRL_E":
            if not self.explorer.state.at_directory():
                if self._report(self.explorer.edit_prompt_path(OpenMode.CURRENT_TAB)):
                    self._finish()
        elif len(key) == 1 and key.isprintable():
            self.explorer.type_text(key)
            self._prompt_changed()
        return not self.finished

    def render_context(self, width: int, height: int) -> RenderContext:
        rows = list_rows(height)
        self.list_start = clamp_list_start(self.selected, self.list_start, rows, len(self.matches))
        return RenderContext(
            view_path=self.explorer.view_path(),
            prompt=self.explorer.state.prompt,
            entries=self.matches,
            selected=self.selected,
            list_start=self.list_start,
            width=width,
            height=height,
            message=self.message,
            message_is_error=self.message_is_error,
        )


def run_session(
    session: ExplorerSession,
    terminal: TerminalController,
    stdin_fd: int,
    terminal_size: Callable[[], tuple[int, int]] | None = None,
) -> None:
    """Read keys and repaint until the session finishes.

    Repainting is skipped while more input is already queued so pasted or
    fast-typed text is applied before the next frame.
    """
    if terminal_size is None:

        def terminal_size() -> tuple[int, int]:
            size = shutil.get_terminal_size((80, 24))
            return size.columns, size.lines

    session.refresh_matches()
    with terminal.raw_mode():
        dirty = True
        last_size: tuple[int, int] | None = None
        while not session.finished:
            size = terminal_size()
            if size != last_size:
                dirty = True
            if dirty and not session.explorer.input_pending():
                width, height = size
                terminal.write(compose_screen(render_frame(session.render_context(width, height))))
                last_size = size
                dirty = False
            key = read_key(stdin_fd, timeout_ms=250)
            if not key:
                continue
            session.handle_key(key)
            dirty = True


__all__ = ["ExplorerSession", "OPEN_MODE_KEYS", "QUIT_KEYS", "run_session"]
