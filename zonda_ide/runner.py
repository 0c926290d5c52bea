"""Run the executables, scripts or typed files of the current directory."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from zonda_ide.common import SHEBANG_LIMIT, is_dir, is_executable
from zonda_ide.common import file_type as _file_type

ESC = "\x1b"
_FLAG_FIELDS = {"-test": "test", "-valgrind": "valgrind", "-char_ins": "char_ins"}


class UsageError(Exception):
    """Raised when the command cannot go on; the message is shown to the user."""


@dataclass(frozen=True)
class RunOptions:
    """What to run and how to wrap each command."""

    file_type: str | None = None
    test: bool = False
    valgrind: bool = False
    char_ins: bool = False


def split_stem(name: str) -> str | None:
    """Return ``name`` without its last extension, or None if it has none."""
    if not name:
        return None
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return None
    return name[:dot]


def sort_key(name: str) -> tuple[str, str]:
    """Order names by extension first, then by the whole name."""
    return _file_type(name), name


def parse_flags(args: list[str]) -> tuple[RunOptions, list[str]]:
    """Split the leading flags off ``args``; return the options and the rest."""
    args = list(args)
    positions: dict[str, int] = {}
    for position, arg in enumerate(args):
        field = _FLAG_FIELDS.get(arg)
        if field is None:
            if not arg.startswith("-"):
                break
            field = "file_type"
        if field in positions:
            raise UsageError("Invalid form...")
        positions[field] = position
    if positions.get("file_type", 0) != 0:
        raise UsageError("Invalid form...")
    type_position = positions.get("file_type")
    options = RunOptions(
        file_type=None if type_position is None else args[type_position][1:],
        test="test" in positions,
        valgrind="valgrind" in positions,
        char_ins="char_ins" in positions,
    )
    return options, args[len(positions):]


def _list_dir(directory: str | os.PathLike) -> list[Path]:
    try:
        return list(Path(directory).iterdir())
    except OSError as exc:
        raise UsageError("Failed to open current dir.") from exc


def executable_files(directory: str | os.PathLike = ".") -> list[str]:
    """Return the sorted names of the runnable files in ``directory``."""
    names = sorted(
        (entry.name for entry in _list_dir(directory) if is_executable(entry)),
        key=sort_key,
    )
    if not names:
        raise UsageError("No executable file...")
    return names


def files_of_type(file_type: str, directory: str | os.PathLike = ".") -> list[str]:
    """Return the sorted names of the entries in ``directory`` with extension ``file_type``."""
    names = sorted(
        (
            entry.name
            for entry in _list_dir(directory)
            if _file_type(entry.name) == file_type and os.path.exists(entry)
        ),
        key=sort_key,
    )
    if not names:
        raise UsageError(f"No .{file_type} type file...")
    return names


def _interpreter(path: str) -> str | None:
    try:
        with open(path, "rb") as handle:
            first = handle.readline(SHEBANG_LIMIT)
    except OSError as exc:
        raise UsageError(f'Failed to open file "{path}"') from exc
    first = first.split(b"\0", 1)[0]
    if len(first) <= 2 or not first.startswith(b"#!"):
        return None
    if first.endswith(b"\n"):
        first = first[:-1]
    return os.fsdecode(first[2:])


def build_command(path: str | os.PathLike, options: RunOptions) -> tuple[str, str] | None:
    """Return the title and shell command that run ``path``, or None if it is missing."""
    path = os.fspath(path)
    if not os.path.exists(path):
        return None
    stem = split_stem(path)
    pure = path if stem is None else stem
    use_test = options.test and os.path.exists(f"{pure}.test")
    prefix = "valgrind " if options.valgrind else ""
    suffix = f" < {pure}.test" if use_test else ""
    if options.char_ins:
        suffix += " | char_ins"
    if not is_dir(path) and os.access(path, os.X_OK):
        return path, f"{prefix}./{path}{suffix}"
    if pure and os.access(pure, os.X_OK):
        return pure, f"{prefix}./{pure}{suffix}"
    if not is_dir(path) and os.access(path, os.R_OK):
        interpreter = _interpreter(path)
        if interpreter is not None:
            return path, f"{prefix}{interpreter} {path}{suffix}"
    raise UsageError(f'"{path}" is not an executable file...')


def run_file(path: str | os.PathLike, options: RunOptions) -> bool:
    """Run ``path`` with a title line; False if it could not be started."""
    try:
        planned = build_command(path, options)
    except UsageError as exc:
        print(exc)
        return False
    if planned is None:
        return False
    title, command = planned
    print(f"{ESC}[33;1m===== {title} ====={ESC}[0m", flush=True)
    subprocess.run(command, shell=True)
    return True


def _run_all(names: list[str], options: RunOptions) -> int:
    for name in names:
        if not run_file(name, options):
            print("Stop")
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options, rest = parse_flags(args)
        if not rest:
            if options.file_type is None:
                return _run_all(executable_files(), options)
            return _run_all(files_of_type(options.file_type), options)
    except UsageError as exc:
        print(exc)
        return 1
    if options.file_type is not None:
        print("Invalid input!")
        return 1
    for path in rest:
        if not is_executable(path):
            print(f"{path} is not an executable file...")
        elif not run_file(path, options):
            print("Stop")
            return 1
    return 0