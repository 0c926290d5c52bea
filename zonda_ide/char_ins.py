"""Show every character of standard input with its class made visible."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Iterable, Iterator

ESC = "\x1b"
LINE_LIMIT = 999_999
END_MARK = f"{ESC}[34m\\0{ESC}[0m\n".encode()
SEPARATOR = "=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-="


class CharClass(Enum):
    NEWLINE = "newline"
    TAB = "tab"
    CONTROL = "control"
    SPACE = "space"
    UNKNOWN = "unknown"
    NORMAL = "normal"


_FIELDS = {
    CharClass.NEWLINE: "newlines",
    CharClass.TAB: "tabs",
    CharClass.CONTROL: "controls",
    CharClass.SPACE: "spaces",
    CharClass.UNKNOWN: "unknowns",
    CharClass.NORMAL: "normals",
}


@dataclass
class Counts:
    """Tallies of the characters seen, by class."""

    newlines: int = 0
    tabs: int = 0
    controls: int = 0
    spaces: int = 0
    unknowns: int = 0
    normals: int = 0
    total: int = 0

    @property
    def lines(self) -> int:
        return self.newlines + 1

    def add(self, kind: CharClass) -> None:
        field = _FIELDS[kind]
        setattr(self, field, getattr(self, field) + 1)


def _code(char: int | str | bytes) -> int:
    code = char if isinstance(char, int) else ord(char)
    if not 0 <= code <= 255:
        raise ValueError(f"not a byte value: {code!r}")
    return code


def classify(char: int | str | bytes) -> CharClass:
    """Return the class of a single byte."""
    code = _code(char)
    if code == 10:
        return CharClass.NEWLINE
    if code == 9:
        return CharClass.TAB
    if code < 32 or code == 127:
        return CharClass.CONTROL
    if code == 32:
        return CharClass.SPACE
    if code >= 128:
        return CharClass.UNKNOWN
    return CharClass.NORMAL


def render_char(char: int | str | bytes) -> bytes:
    """Return the terminal representation of a single byte."""
    code = _code(char)
    kind = classify(code)
    raw = bytes([code])
    if kind is CharClass.NEWLINE:
        return f"{ESC}[34m\\n{ESC}[0m".encode()
    if kind is CharClass.TAB:
        return f"{ESC}[34m\\t{ESC}[0m".encode()
    if kind is CharClass.CONTROL:
        return f"{ESC}[45m(Ctrl ASCII: {code}){ESC}[0m".encode()
    if kind is CharClass.SPACE:
        return f"{ESC}[100m".encode() + raw + f"{ESC}[0m".encode()
    if kind is CharClass.UNKNOWN:
        signed = code - 256 if code >= 128 else code
        return f"{ESC}[41m".encode() + raw + f"(ASCII: {signed}){ESC}[0m".encode()
    return raw


def inspect(lines: Iterable[bytes], out: BinaryIO) -> Counts:
    """Write the rendering of ``lines`` to ``out`` and return the tallies."""
    counts = Counts()
    for line in lines:
        chunk = line.split(b"\0", 1)[0]
        for code in chunk:
            counts.add(classify(code))
            out.write(render_char(code))
        counts.total += len(chunk)
        out.write(END_MARK)
    return counts


def format_summary(counts: Counts) -> str:
    """Return the summary table printed after the input."""
    rows = [
        ("Tabs", counts.tabs),
        ("Spaces", counts.spaces),
        ("Ctrls ASCIIs", counts.controls),
        ("Alphabets, Numbers, Punctuations", counts.normals),
        ("Unknows", counts.unknowns),
    ]
    text = f"\n{SEPARATOR}\n"
    text += "".join(f"| {label:<32} : {value:<10}\n" for label, value in rows)
    text += f"{ESC}[33;1m| {'Total words':<32} : {counts.total:<10}{ESC}[0m\n"
    text += f"{ESC}[33;1m| {'Lines':<32} : {counts.lines:<10}{ESC}[0m\n\n"
    return text


def help_text() -> str:
    """Return the usage text."""
    return (
        "For stdout, please use pipeline, '|'\n"
        "For document, please use char_ins < 'file_name'\n"
        f"New-line, tab, and end of string will be represent by {ESC}[34m\\n{ESC}[0m, "
        f"{ESC}[34m\\t{ESC}[0m and {ESC}[34m\\0{ESC}[0m\n"
        f"Spaces will be represent by '{ESC}[100m {ESC}[0m'\n"
        f"Control ASCII will be shown as {ESC}[45m(Ctrl ASCII: ){ESC}[0m\n"
        "For all the others, excluding digits, alphabets and punctuations, "
        f"will be represent by {ESC}[41m(ASCII: ){ESC}[0m\n\n"
    )


def _read_chunks(stream: BinaryIO) -> Iterator[bytes]:
    return iter(lambda: stream.readline(LINE_LIMIT), b"")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args == ["--help"]:
        print(help_text(), end="")
        return 0
    if args:
        print("Invalid input!")
        return 1
    sys.stdout.flush()
    out = sys.stdout.buffer
    counts = inspect(_read_chunks(sys.stdin.buffer), out)
    out.write(format_summary(counts).encode())
    out.flush()
    return 0