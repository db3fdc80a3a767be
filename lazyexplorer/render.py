"""Frame composition for the explorer TUI.

Builds the screen as a list of ANSI-styled rows: a title row, the matching
entries, a status row and the prompt row. Pure functions; writing the frame
to the terminal is left to the session.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from .entries import Entry

TITLE = "[lazyexplorer]"
PROMPT_PREFIX = ">> "

_RESET = "\033[0m"
_TITLE_STYLE = "\033[1;38;5;81m"
_DIR_STYLE = "\033[1;38;5;110m"
_FILE_STYLE = "\033[38;5;252m"
_SELECTED_STYLE = "\033[7m"
_STATUS_STYLE = "\033[38;5;245m"
_ERROR_STYLE = "\033[1;38;5;203m"
_EMPTY_STYLE = "\033[38;5;244m"


@dataclass
class RenderContext:
    view_path: str
    prompt: str
    entries: list[Entry]
    selected: int
    list_start: int
    width: int
    height: int
    message: str = ""
    message_is_error: bool = False


def char_width(ch: str) -> int:
    """Terminal columns for one character: 0 for combining marks, 2 for wide."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain text to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def clip_prompt(prompt: str, max_cols: int) -> str:
    """Keep the tail of a long prompt; the cursor sits at its end."""
    if display_width(prompt) <= max_cols:
        return prompt
    if max_cols <= 1:
        return clip_text(prompt[-1:], max_cols)
    tail: list[str] = []
    col = 0
    for ch in reversed(prompt):
        w = char_width(ch)
        if col + w > max_cols - 1:
            break
        tail.append(ch)
        col += w
    return "…" + "".join(reversed(tail))


def list_rows(height: int) -> int:
    """Rows available to entries once title, status and prompt are drawn."""
    return max(1, height - 3)


def clamp_list_start(selected: int, list_start: int, rows: int, count: int) -> int:
    """Scroll just enough to keep ``selected`` inside the visible window."""
    if count <= rows:
        return 0
    if selected < list_start:
        return selected
    if selected >= list_start + rows:
        return selected - rows + 1
    return max(0, min(list_start, count - rows))


def format_entry(entry: Entry, selected: bool, width: int) -> str:
    label = clip_text(entry.label, max(0, width - 2))
    style = _DIR_STYLE if entry.is_dir else _FILE_STYLE
    if selected:
        style += _SELECTED_STYLE
    return f"  {style}{label}{_RESET}"


def render_frame(context: RenderContext) -> list[str]:
    width = max(1, context.width)
    rows = list_rows(context.height)

    lines = [f"{_TITLE_STYLE}{clip_text(f'{TITLE} {context.view_path}', width)}{_RESET}"]

    visible = context.entries[context.list_start : context.list_start + rows]
    if not context.entries:
        lines.append(f"{_EMPTY_STYLE}{clip_text('-- NO ENTRIES --', width)}{_RESET}")
    for offset, entry in enumerate(visible):
        idx = context.list_start + offset
        lines.append(format_entry(entry, idx == context.selected, width))
    while len(lines) < rows + 1:
        lines.append("")

    if context.message:
        style = _ERROR_STYLE if context.message_is_error else _STATUS_STYLE
        lines.append(f"{style}{clip_text(context.message, width)}{_RESET}")
    else:
        count = len(context.entries)
        noun = "entry" if count == 1 else "entries"
        lines.append(f"{_STATUS_STYLE}{clip_text(f'{count} {noun}', width)}{_RESET}")

    prompt_cols = max(1, width - len(PROMPT_PREFIX))
    lines.append(PROMPT_PREFIX + clip_prompt(context.prompt, prompt_cols))
    return lines


def compose_screen(lines: list[str]) -> str:
    """Return one terminal write that repaints ``lines`` from the top-left."""
    body = "\r\n".join(f"{line}\033[K" for line in lines)
    return f"\033[H{body}\033[J"


__all__ = [
    "RenderContext",
    "clamp_list_start",
    "clip_prompt",
    "clip_text",
    "compose_screen",
    "display_width",
    "list_rows",
    "render_frame",
]
