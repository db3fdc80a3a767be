"""Prompt text and the view it implies.

The prompt is the only stored navigation state. The directory being listed
(the view path) and the partial name being typed (the abbreviation) are
derived from it on demand.
"""

from __future__ import annotations

import os

from .paths import SEPARATOR


class NavigationState:
    def __init__(self, prompt: str = "") -> None:
        self.prompt = prompt

    def set(self, path: str) -> None:
        """Replace the prompt verbatim; callers normalize beforehand."""
        self.prompt = path

    def at_directory(self) -> bool:
        return self.prompt.endswith(SEPARATOR)

    def view_path(self) -> str:
        if self.at_directory() and len(self.prompt) > 1:
            # List the directory itself rather than its parent.
            return self.prompt[: -len(SEPARATOR)]
        return os.path.dirname(self.prompt)

    def abbreviation(self) -> str:
        if self.at_directory():
            return ""
        return os.path.basename(self.prompt)

    def up_one_dir(self) -> None:
        """Drop the last path component, keeping the separator before it."""
        prompt = self.prompt
        if prompt == SEPARATOR:
            return
        if prompt.endswith(SEPARATOR):
            prompt = prompt[: -len(SEPARATOR)]
        cut = prompt.rfind(SEPARATOR)
        self.prompt = prompt[: cut + len(SEPARATOR)] if cut >= 0 else ""


__all__ = ["NavigationState"]
