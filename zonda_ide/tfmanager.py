"""Merge the .test files of a directory into all.test and split it back."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from zonda_ide.common import file_type

ALL_TEST = "all.test"
TITLE_MARK = "===== "
TITLE_END = " ====="


class TfManagerError(Exception):
    """Raised when merging or dividing test files fails."""


def test_files(directory: str | os.PathLike = ".") -> list[str]:
    """Return the sorted names of the regular .test files in ``directory``."""
    base = Path(directory)
    try:
        entries = list(base.iterdir())
    except OSError as exc:
        raise TfManagerError("Unable to open current directory...") from exc
    names = sorted(
        entry.name
        for entry in entries
        if file_type(entry.name) == "test" and entry.is_file()
    )
    if not names:
        raise TfManagerError("No .test files...")
    return names


def is_title(line: str | None) -> bool:
    """Return True if ``line`` is a section header of all.test."""
    if line is None or len(line) <= 12:
        return False
    return line.startswith(TITLE_MARK) and line[-6:] == TITLE_END


def get_title(line: str | None) -> str | None:
    """Return the file name of a header line, or None if it is not one."""
    if not is_title(line):
        return None
    return line[6:-6]


def merge(files: list[str], directory: str | os.PathLike = ".") -> None:
    """Concatenate ``files`` into all.test and remove them."""
    base = Path(directory)
    target = base / ALL_TEST
    if target.exists():
        raise TfManagerError("all.test exists, Stopped")
    try:
        with target.open("wb") as out:
            for name in files:
                try:
                    data = (base / name).read_bytes()
                except OSError as exc:
                    raise TfManagerError("Failed to read .test file...") from exc
                out.write(b"===== " + os.fsencode(name) + b" =====\n")
                out.write(data)
                out.write(b"\n")
    except TfManagerError:
        target.unlink(missing_ok=True)
        raise
    except OSError as exc:
        raise TfManagerError("Failed to write all .test into all.test...") from exc
    for name in files:
        (base / name).unlink(missing_ok=True)


def divide(directory: str | os.PathLike = ".") -> None:
    """Split all.test back into its files and remove it."""
    base = Path(directory)
    source = base / ALL_TEST
    try:
        handle = source.open("rb")
    except OSError as exc:
        raise TfManagerError("Failed to open all.test...") from exc
    count = 0
    current = None
    try:
        with handle:
            for raw in handle:
                line = raw[:-1] if raw.endswith(b"\n") else raw
                title = get_title(os.fsdecode(line))
                if title is not None:
                    if current is not None:
                        current.close()
                        current = None
                    try:
                        current = (base / title).open("wb")
                    except OSError as exc:
                        raise TfManagerError(f"Unable to write in {title}") from exc
                elif current is not None:
                    current.write(line + b"\n")
                count += 1
    finally:
        if current is not None:
            current.close()
    if count == 0:
        raise TfManagerError("all.test is empty...")
    source.unlink()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Invalid input...")
        return 1
    try:
        if args[0] == "-merge":
            merge(test_files())
        elif args[0] == "-divide":
            divide()
    except TfManagerError as exc:
        print(exc)
        return 1
    return 0