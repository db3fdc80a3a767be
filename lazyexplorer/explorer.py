"""Explorer orchestration: the visible listing and the actions on it.

Ties the prompt, the directory cache and the mask filter together. Masks are
applied when a directory is read; dotfile visibility is decided here on every
call because it depends on what the user is typing. Actions report failures
as ``ExplorerError`` values so the session can display them and continue.
"""

from __future__ import annotations

import logging

from .config import ALWAYS_SHOW_DOT_FILES, ConfigProvider
from .directory_cache import DirectoryCache
from .entries import Entry, OpenMode, RefreshScope
from .errors import ErrorKind, ExplorerError, InvalidOpenModeError
from .fuzzy import entry_matches, order_matching_entries
from .masks import GlobMaskFilter
from .opener import Opener
from .paths import SEPARATOR, expand_variables, join_view_path, normalize_path
from .prompt import NavigationState
from .readiness import NeverReady, ReadinessProbe

logger = logging.getLogger(__name__)


class Explorer:
    def __init__(
        self,
        opener: Opener,
        config: ConfigProvider,
        cache: DirectoryCache | None = None,
        readiness: ReadinessProbe | None = None,
    ) -> None:
        self.opener = opener
        self.config = config
        self.cache = cache if cache is not None else DirectoryCache()
        self.readiness = readiness if readiness is not None else NeverReady()
        self.state = NavigationState()
        self.active = False

    # Session lifecycle

    def start(self, path: str) -> None:
        """Begin a session at ``path``, re-reading masks and options."""
        self.cache.mask_filter = GlobMaskFilter.from_config(self.config)
        self.cache.include_parent = self.config.option_set(ALWAYS_SHOW_DOT_FILES)
        self.cache.clear()
        self.state.set(normalize_path(path))
        self.active = True
        logger.debug("session started at %s", self.state.prompt)

    def start_from_working_directory(self) -> None:
        self.start(self.opener.current_working_directory() + SEPARATOR)

    def start_from_buffer_directory(self) -> None:
        directory = self.opener.current_buffer_directory()
        if directory is None:
            directory = self.opener.current_working_directory()
        self.start(directory + SEPARATOR)

    def close(self) -> None:
        self.active = False

    # Listing

    def view_path(self) -> str:
        return self.state.view_path()

    def abbreviation(self) -> str:
        return self.state.abbreviation()

    def visible_entries(self) -> tuple[Entry, ...]:
        entries = self.cache.lookup(self.view_path())
        if self.config.option_set(ALWAYS_SHOW_DOT_FILES) or self.abbreviation().startswith("."):
            return entries
        return tuple(entry for entry in entries if not entry.is_hidden)

    def matching_entries(self) -> list[Entry]:
        return order_matching_entries(self.visible_entries(), self.abbreviation())

    def entry_path(self, entry: Entry) -> str:
        return join_view_path(self.view_path(), entry.name)

    # Prompt editing

    def set_prompt(self, raw: str) -> None:
        self.state.set(normalize_path(expand_variables(raw)))

    def type_text(self, text: str) -> None:
        self.set_prompt(self.state.prompt + text)

    def backspace(self) -> None:
        if self.state.prompt == SEPARATOR:
            return
        self.set_prompt(self.state.prompt[:-1])

    def delete_component(self) -> None:
        self.state.up_one_dir()
        self.set_prompt(self.state.prompt or SEPARATOR)

    def clear_prompt(self) -> None:
        self.set_prompt(self.opener.current_working_directory() + SEPARATOR)

    def input_pending(self) -> bool:
        return self.readiness.poll_readable()

    # Actions

    def descend(self, entry: Entry) -> None:
        self.state.set(normalize_path(self.entry_path(entry) + SEPARATOR))

    def open_entry(self, entry: Entry, mode: OpenMode) -> ExplorerError | None:
        if entry.is_dir:
            self.descend(entry)
            return None
        if SEPARATOR in entry.name:
            # Not a single filesystem object under the view path.
            return None
        return self._load_file(self.entry_path(entry), mode)

    def open_all_visible(self, mode: OpenMode) -> ExplorerError | None:
        abbreviation = self.abbreviation()
        for entry in self.visible_entries():
            if entry.is_dir or SEPARATOR in entry.name:
                continue
            if not entry_matches(abbreviation, entry):
                continue
            error = self._load_file(self.entry_path(entry), mode)
            if error is not None:
                return error
        return None

    def edit_prompt_path(self, mode: OpenMode = OpenMode.CURRENT_TAB) -> ExplorerError | None:
        """Open the typed path itself, which may not exist yet."""
        if self.state.at_directory():
            return None
        # The file may be created, so the listing must be re-read.
        self.cache.invalidate(self.view_path())
        return self._load_file(self.state.prompt, mode)

    def refresh(self, scope: RefreshScope = RefreshScope.FULL) -> None:
        if scope is RefreshScope.FULL:
            self.cache.invalidate(self.view_path())

    def _load_file(self, path: str, mode: OpenMode) -> ExplorerError | None:
        if not self.active:
            error = ExplorerError(
                ErrorKind.INTERNAL_INVARIANT,
                f"open of {path!r} requested outside an active session",
            )
            logger.error("%s", error.message)
            return error
        try:
            message = self.opener.open_path(path, mode)
        except InvalidOpenModeError as exc:
            logger.error("%s", exc)
            return ExplorerError(ErrorKind.INVALID_OPEN_MODE, str(exc))
        if message is not None:
            logger.warning("open failed for %s: %s", path, message)
            return ExplorerError(ErrorKind.OPEN_FAILED, message)
        return None


__all__ = ["Explorer"]
