"""Build sources and project directories with the per-language makefiles."""

from __future__ import annotations

import os
import subprocess
import sys

from zonda_ide.common import file_type, is_dir, makefiles_dir

NORMAL = 1
PROJECT = 2
MAKEFILE_PREFIX = "~/.zonda.ide/makefiles/makefile"


def source_stem(name: str) -> str:
    """Return ``name`` without its last extension, or "" if it has no usable stem."""
    if not name:
        return ""
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[:dot]


def makefile_status(suffix: str, home: str | os.PathLike) -> int:
    """Return 1 if the plain makefile exists, plus 2 if the project one does."""
    base = makefiles_dir(home)
    normal = (base / f"makefile{suffix}").exists()
    project = (base / f"makefile{suffix}-prj").exists()
    return NORMAL * normal + PROJECT * project


def make_command(suffix: str, target: str | None) -> list[str]:
    """Return the make invocation for the makefile with ``suffix``."""
    command = ["make", "-f", os.path.expanduser(MAKEFILE_PREFIX + suffix)]
    if target:
        command.append(target)
    return command


def make(suffix: str, target: str | None) -> bool:
    """Run make with the makefile for ``suffix``; True if it succeeded."""
    return subprocess.run(make_command(suffix, target)).returncode == 0


def _report_missing(suffix: str) -> None:
    print(f"{MAKEFILE_PREFIX}{suffix} doesn't exist...")
    print(f"{MAKEFILE_PREFIX}{suffix}-prj doesn't exist...")


def _make_by_status(suffix: str, target: str | None, status: int) -> bool:
    if status == 0:
        _report_missing(suffix)
        return False
    if status & NORMAL:
        make(suffix, target)
    if status & PROJECT:
        make(f"{suffix}-prj", target)
    return True


def compile_path(path: str, home: str | os.PathLike) -> bool:
    """Build one source file or project directory; True if make succeeded."""
    name = source_stem(path)
    if not name:
        print(f"Unable to compile {path}...")
        return False
    suffix = f"-{file_type(path)}"
    status = makefile_status(suffix, home)
    if is_dir(path):
        if status < PROJECT:
            print(f"{MAKEFILE_PREFIX}{suffix}-prj doesn't exist...")
            return False
        return make(f"{suffix}-prj", name)
    if not status & NORMAL:
        print(f"{MAKEFILE_PREFIX}{suffix} doesn't exist...")
        return False
    return make(suffix, name)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    home = os.environ.get("HOME")
    if home is None:
        print('Environment Variable "HOME" haven\'t been defined!')
        return 1
    if len(args) == 2 and args[0].startswith("-") and args[1] == "clean":
        suffix = args[0]
        return 0 if _make_by_status(suffix, "clean", makefile_status(suffix, home)) else 1
    if len(args) == 1 and args[0].startswith("-"):
        suffix = args[0]
        if len(suffix) > 4 and suffix.endswith("-prj"):
            print("Invalid form...")
            return 1
        return 0 if _make_by_status(suffix, None, makefile_status(suffix, home)) else 1
    if args and not args[0].startswith("-"):
        for path in args:
            compile_path(path, home)
        return 0
    print("Invalid input!")
    return 1