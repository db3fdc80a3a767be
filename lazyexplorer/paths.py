"""Path canonicalization for prompt text that is still being typed.

``normalize_path`` turns raw, possibly relative or half-typed input into an
absolute path string. It never raises: input the expansion step rejects is
handed back unchanged so a keystroke can never break the session.
"""

from __future__ import annotations

import logging
import os
import re

SEPARATOR = os.sep

_SEPARATOR_RUN_RE = re.compile(re.escape(SEPARATOR) + "{2,}")
_VARIABLE_RE = re.compile(r"\$(\w+)")

logger = logging.getLogger(__name__)


class PathExpansionError(ValueError):
    """Raised when a path cannot be expanded to an absolute form."""


def expand_path(path: str) -> str:
    """Expand ``~`` and make ``path`` absolute.

    Rejects embedded NUL bytes and ``~user`` tokens naming an unknown account,
    both of which ``os.path`` would otherwise pass through silently.
    """
    if "\x00" in path:
        raise PathExpansionError("path contains a NUL byte")
    expanded = os.path.expanduser(path)
    if expanded.startswith("~"):
        raise PathExpansionError(f"cannot expand home directory in {path!r}")
    try:
        return os.path.abspath(expanded)
    except OSError as exc:
        # Relative input while the working directory has been removed.
        raise PathExpansionError(str(exc)) from exc


def _expand_leading_tilde(path: str) -> str:
    # Only the ~token is expanded; the rest may not exist yet.
    token, sep, rest = path.partition(SEPARATOR)
    return expand_path(token) + sep + rest


def normalize_path(raw: str) -> str:
    collapsed = _SEPARATOR_RUN_RE.sub(SEPARATOR, raw)
    try:
        if "\x00" in collapsed:
            raise PathExpansionError("path contains a NUL byte")
        if collapsed.startswith("~"):
            collapsed = _expand_leading_tilde(collapsed)
            collapsed = _SEPARATOR_RUN_RE.sub(SEPARATOR, collapsed)

        if collapsed == SEPARATOR:
            return collapsed

        if collapsed.endswith(SEPARATOR):
            expanded = expand_path(collapsed)
            if expanded.endswith(SEPARATOR):
                return expanded
            return expanded + SEPARATOR

        dirname, basename = os.path.split(collapsed)
        dirname_expanded = expand_path(dirname)
        if dirname_expanded == SEPARATOR:
            return dirname_expanded + basename
        return dirname_expanded + SEPARATOR + basename
    except PathExpansionError as exc:
        logger.debug("keeping unexpanded path %r: %s", raw, exc)
        return raw


def expand_variables(raw: str) -> str:
    """Replace ``$NAME`` with the value of environment variable ``NAME``.

    Unset names and lone ``$`` characters are left as typed.
    """

    def replace(match: re.Match[str]) -> str:
        value = os.environ.get(match.group(1))
        return match.group(0) if value is None else value

    return _VARIABLE_RE.sub(replace, raw)


def join_view_path(view_path: str, name: str) -> str:
    """Join an entry name onto a view path without doubling the root separator."""
    if view_path.endswith(SEPARATOR):
        return view_path + name
    return view_path + SEPARATOR + name


__all__ = [
    "SEPARATOR",
    "PathExpansionError",
    "expand_path",
    "normalize_path",
    "expand_variables",
    "join_view_path",
]
