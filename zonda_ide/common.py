"""Helpers shared by the command-line tools."""

from __future__ import annotations

import os
import stat
from pathlib import Path

SHEBANG_LIMIT = 999


def file_type(name: str) -> str:
    """Return the text after the last dot of ``name``, or "" if there is none."""
    if not name:
        return ""
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot + 1:]


def is_dir(path: str | os.PathLike) -> bool:
    """Return True if ``path`` names an existing directory."""
    return os.path.isdir(path)


def has_shebang(path: str | os.PathLike) -> bool:
    """Return True if the first line of ``path`` is a usable ``#!`` line."""
    try:
        with open(path, "rb") as handle:
            first = handle.readline(SHEBANG_LIMIT)
    except OSError:
        return False
    first = first.split(b"\0", 1)[0]
    return len(first) > 2 and first.startswith(b"#!")


def is_executable(path: str | os.PathLike) -> bool:
    """Return True for non-directory files that can be executed or carry a shebang."""
    if os.fspath(path) in (".", ".."):
        return False
    try:
        info = os.stat(path)
    except OSError:
        return False
    if stat.S_ISDIR(info.st_mode):
        return False
    if os.access(path, os.X_OK):
        return True
    if not os.access(path, os.R_OK):
        return False
    return has_shebang(path)


def makefiles_dir(home: str | os.PathLike) -> Path:
    """Return the directory that holds the per-language makefiles."""
    return Path(home) / ".zonda.ide" / "makefiles"