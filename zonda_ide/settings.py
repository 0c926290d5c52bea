"""Install, reset and remove the makefiles used by the build tools."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

from zonda_ide.common import makefiles_dir

INSTALLED_COMMANDS = ("compile", "run", "settings", "char_ins", "tfmanager")


def _single_makefile(compiler: str, standard: str, ext: str, link_input: str) -> str:
    return "".join([
        ".SILENT:\n",
        f"CC = {compiler}\n",
        f"FLAGS = -std={standard} -Wall -Wextra -O2\n",
        "LDFLAGS = -lm\n",
        f"SRC1 = $(wildcard *.{ext})\n",
        f"SRC2 = $(wildcard *.{ext}/)\n",
        "PRJS = $(SRC2:/=)\n",
        "TARGETS = $(basename $(filter-out $(PRJS), $(SRC1)))\n\n",
        ".PHONY: all clean\n",
        "all: $(TARGETS)\n",
        "$(TARGETS): % : %.o\n",
        f"\t$(CC) $(FLAGS) {link_input} -o $@ $(LDFLAGS)\n",
        f"%.o: %.{ext}\n",
        "\t$(CC) $(FLAGS) -c $< -o $@\n\n",
        "clean:\n",
        "\trm -f $(TARGETS) *.o\n",
    ])


def _project_makefile(compiler: str, standard: str, ext: str) -> str:
    return "".join([
        ".SILENT:\n",
        f"CC = {compiler}\n",
        f"FLAGS = -std={standard} -Wall -Wextra -g -O2\n",
        "LDFLAGS = -lm\n",
        "ALL_DEPS =\n\n",
        f"DIR = $(sort $(patsubst %/,%,$(wildcard *.{ext}/)))\n",
        "TARGET = $(notdir $(basename $(DIR)))\n\n",
        "define TEMPLATE\n",
        f"_SOURCES = $(wildcard $(1).{ext}/*.{ext})\n",
        f"_OBJECTS = $$(_SOURCES:.{ext}=.o)\n",
        f"_DEPENDS = $$(_SOURCES:.{ext}=.d)\n\n",
        "$(1): $$(_OBJECTS)\n",
        "\t$$(CC) $$(FLAGS) $$^ -o $$@ $$(LDFLAGS)\n\n",
        f"$(1).{ext}/%.o: $(1).{ext}/%.{ext}\n",
        f"\t$$(CC) -I$(1).{ext} $$(FLAGS) -MMD -MP -MF $$(@:.o=.d) -c $$< -o $$@\n\n",
        "ALL_DEPS += $$(_DEPENDS)\n",
        "endef\n\n",
        "$(foreach proj_dir,$(TARGET),$(eval $(call TEMPLATE,$(proj_dir))))\n\n",
        ".PHONY: all clean\n",
        ".DEFAULT_GOAL = all\n\n",
        "all: $(TARGET)\n\n",
        "-include $(ALL_DEPS)\n\n",
        "clean:\n",
        "\trm -f $(TARGET)\n",
        "\t$(foreach dir,$(DIR), rm -f $(wildcard $(dir)/*.o) $(wildcard $(dir)/*.d);)\n",
    ])


def ensure_dirs(home: str | os.PathLike) -> Path:
    """Create the settings and makefile directories; return the makefile one."""
    base = Path(home) / ".zonda.ide"
    makefiles = makefiles_dir(home)
    for path, what in ((base, "infos"), (makefiles, "makefiles")):
        if not path.exists():
            try:
                path.mkdir(mode=0o755)
            except OSError as exc:
                raise OSError(f"Unable to make directory about {what}!") from exc
    return makefiles


def makefile_contents() -> dict[str, str]:
    """Return the default makefiles, keyed by file name."""
    return {
        "makefile-c": _single_makefile("gcc", "c11", "c", "$<"),
        "makefile-c-prj": _project_makefile("gcc", "c11", "c"),
        "makefile-cpp": _single_makefile("g++", "c++11", "cpp", "$^"),
        "makefile-cpp-prj": _project_makefile("g++", "c++11", "cpp"),
    }


def write_makefiles(home: str | os.PathLike) -> list[Path]:
    """Write the default makefiles under ``home``; return their paths."""
    directory = ensure_dirs(home)
    written = []
    for name, text in makefile_contents().items():
        path = directory / name
        path.write_text(text)
        written.append(path)
    return written


def confirm_reset(answer: str) -> bool:
    """Return False only when the answer starts with n or N."""
    return answer[:1] not in ("n", "N")


def confirm_uninstall(answer: str) -> bool | None:
    """Return True for yes (Y, y or a bare Enter), False for no, None otherwise."""
    first = answer[:1]
    if first in ("n", "N"):
        return False
    if first in ("\n", "Y", "y"):
        return True
    return None


def reset(home: str | os.PathLike) -> list[Path]:
    """Remove every visible makefile and write the defaults again."""
    directory = makefiles_dir(home)
    if directory.is_dir():
        for entry in directory.iterdir():
            if not entry.name.startswith(".") and not entry.is_dir():
                entry.unlink(missing_ok=True)
    return write_makefiles(home)


def uninstall(home: str | os.PathLike) -> None:
    """Remove the installed commands and the settings directory."""
    bin_dir = Path(home) / "bin"
    for name in INSTALLED_COMMANDS:
        target = bin_dir / name
        if not target.is_dir():
            target.unlink(missing_ok=True)
    shutil.rmtree(Path(home) / ".zonda.ide", ignore_errors=True)


def show_help(home: str | os.PathLike) -> bool:
    """Render the README with glow; False if it cannot be read."""
    readme = Path(home) / ".zonda.ide" / "README.md"
    if not os.access(readme, os.R_OK):
        return False
    subprocess.run(["glow", str(readme)])
    return True


def _ask(prompt: str) -> str:
    print(prompt, end="", flush=True)
    return sys.stdin.readline()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    home = os.environ.get("HOME")
    if home is None:
        print('Environment Variables "HOME" Undefined!')
        return 1
    if len(args) != 1:
        print("Invalid input!")
        return 1
    command = args[0]
    try:
        if command == "-initial":
            write_makefiles(home)
        elif command == "-reset":
            print("This will initialize the makefiles into only C and C++")
            if not confirm_reset(_ask("Second check for reset (Y/N) ")):
                print("Stopped")
                return 0
            reset(home)
        elif command == "--help":
            if not show_help(home):
                print("FILE: README.md lost...")
                return 1
        elif command == "-uninstall":
            choice = confirm_uninstall(_ask("Second check for uninstalling? (Y/N) "))
            if choice is False:
                print("Stopped")
            elif choice:
                print("Uninstalling...")
                uninstall(home)
                print("Thanks for using this.")
        else:
            print("Invalid input!")
            return 1
    except OSError as exc:
        print(exc)
        return 1
    return 0