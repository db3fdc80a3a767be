"""Read-only configuration providers.

Options live in a JSON object under the platform config directory. All access
is defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from platformdirs import user_config_dir

APP_NAME = "lazyexplorer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

ALWAYS_SHOW_DOT_FILES = "AlwaysShowDotFiles"
FILE_MASKS_KEY = "file_masks"

_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


class ConfigProvider(Protocol):
    def option_set(self, name: str) -> bool: ...

    def file_masks(self) -> list[str]: ...


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def coerce_flag(value: object) -> bool:
    """Interpret a boolean-like config value; unknown shapes are ``False``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().casefold() not in _FALSE_STRINGS
    return False


def coerce_masks(value: object) -> list[str]:
    """Accept a list of globs or one comma-separated string."""
    if isinstance(value, str):
        raw: Iterable[object] = value.split(",")
    elif isinstance(value, list):
        raw = value
    else:
        return []
    return [item.strip() for item in raw if isinstance(item, str) and item.strip()]


class JsonConfigProvider:
    """Options read once from the JSON config file."""

    def __init__(self) -> None:
        self.data = load_config()

    def option_set(self, name: str) -> bool:
        return coerce_flag(self.data.get(name))

    def file_masks(self) -> list[str]:
        return coerce_masks(self.data.get(FILE_MASKS_KEY))


class StaticConfigProvider:
    """In-memory options, optionally layered over another provider.

    Flags set here win; masks are appended to the fallback's masks.
    """

    def __init__(
        self,
        options: dict[str, object] | None = None,
        masks: Iterable[str] = (),
        fallback: ConfigProvider | None = None,
    ) -> None:
        self.options = dict(options or {})
        self.masks = [mask for mask in masks if mask.strip()]
        self.fallback = fallback

    def option_set(self, name: str) -> bool:
        if name in self.options:
            return coerce_flag(self.options[name])
        if self.fallback is not None:
            return self.fallback.option_set(name)
        return False

    def file_masks(self) -> list[str]:
        inherited = self.fallback.file_masks() if self.fallback is not None else []
        return [*inherited, *self.masks]


__all__ = [
    "ALWAYS_SHOW_DOT_FILES",
    "CONFIG_PATH",
    "ConfigProvider",
    "JsonConfigProvider",
    "StaticConfigProvider",
    "coerce_flag",
    "coerce_masks",
    "load_config",
]
