"""Command-line front door for lazyexplorer.

Parses CLI options, builds the explorer with its config and opener, and
either prints one listing (``--list``) or runs the interactive session.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .config import ALWAYS_SHOW_DOT_FILES, JsonConfigProvider, StaticConfigProvider
from .explorer import Explorer
from .opener import EditorOpener
from .paths import SEPARATOR, normalize_path
from .readiness import SelectReadiness
from .session import ExplorerSession, run_session
from .terminal import TerminalController

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def start_prompt_for(path: str) -> str:
    """Return the starting prompt for an existing file or directory."""
    normalized = normalize_path(path)
    if os.path.isdir(normalized):
        return normalized if normalized.endswith(SEPARATOR) else normalized + SEPARATOR
    directory = os.path.dirname(normalized)
    return directory if directory.endswith(SEPARATOR) else directory + SEPARATOR


def build_config(show_dotfiles: bool, masks: list[str]) -> StaticConfigProvider:
    options: dict[str, object] = {ALWAYS_SHOW_DOT_FILES: True} if show_dotfiles else {}
    return StaticConfigProvider(options=options, masks=masks, fallback=JsonConfigProvider())


def print_listing(explorer: Explorer, prompt: str) -> None:
    """Print the entries matching ``prompt`` one label per line."""
    explorer.start(prompt)
    try:
        for entry in explorer.matching_entries():
            sys.stdout.write(entry.label + "\n")
    finally:
        explorer.close()


def run_explorer(explorer: Explorer, start_prompt: str | None) -> None:
    """Run the interactive session on the controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    opener = explorer.opener
    if isinstance(opener, EditorOpener):
        opener.disable_tui_mode = terminal.disable_tui_mode
        opener.enable_tui_mode = terminal.enable_tui_mode
    explorer.readiness = SelectReadiness(stdin_fd)

    if start_prompt is None:
        explorer.start_from_buffer_directory()
    else:
        explorer.start(start_prompt)
    run_session(ExplorerSession(explorer), terminal, stdin_fd)


def main(default_path: str | None = None) -> None:
    """Parse CLI arguments and launch the explorer.

    ``default_path`` is primarily for tests; when omitted the session starts
    from the current working directory.
    """
    parser = argparse.ArgumentParser(
        description="Browse directories by typing paths, then open files in $EDITOR."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start file or directory. Defaults to current directory.")
    parser.add_argument("--show-dotfiles", action="store_true", help="Always list names starting with '.'.")
    parser.add_argument(
        "--mask",
        action="append",
        default=[],
        metavar="GLOB",
        help="Hide names matching GLOB (repeatable, added to configured masks).",
    )
    parser.add_argument("--editor", default=None, help="Editor command (default: $EDITOR).")
    parser.add_argument("--list", action="store_true", help="Print entries matching PATH as a prompt and exit.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    args = parser.parse_args()

    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=logging.DEBUG, format=LOG_FORMAT)

    explorer = Explorer(EditorOpener(editor=args.editor), build_config(args.show_dotfiles, args.mask))

    raw_path = args.path if args.path is not None else default_path
    if args.list:
        prompt = raw_path if raw_path is not None else os.getcwd() + SEPARATOR
        print_listing(explorer, prompt)
        return

    if raw_path is None:
        run_explorer(explorer, None)
        return
    if not os.path.exists(normalize_path(raw_path)):
        raise SystemExit(f"Path not found: {raw_path}")
    run_explorer(explorer, start_prompt_for(raw_path))


if __name__ == "__main__":
    main()
