import io
import sys

import pytest

from zonda_ide.char_ins import (
    CharClass,
    Counts,
    classify,
    format_summary,
    help_text,
    inspect,
    main,
    render_char,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        (10, CharClass.NEWLINE),
        (9, CharClass.TAB),
        (0, CharClass.CONTROL),
        (27, CharClass.CONTROL),
        (127, CharClass.CONTROL),
        (32, CharClass.SPACE),
        (ord("a"), CharClass.NORMAL),
        (ord("7"), CharClass.NORMAL),
        (ord("!"), CharClass.NORMAL),
        (200, CharClass.UNKNOWN),
    ],
)
def test_classify(code, expected):
    assert classify(code) is expected


def test_classify_accepts_strings_and_rejects_wide():
    assert classify("a") is CharClass.NORMAL
    assert classify(b"\t") is CharClass.TAB
    with pytest.raises(ValueError):
        classify(0x263A)


def test_render_char():
    assert render_char(ord("\n")) == b"\x1b[34m\\n\x1b[0m"
    assert render_char(ord("\t")) == b"\x1b[34m\\t\x1b[0m"
    assert render_char(ord(" ")) == b"\x1b[100m \x1b[0m"
    assert render_char(ord("a")) == b"a"
    assert render_char(1) == b"\x1b[45m(Ctrl ASCII: 1)\x1b[0m"


def test_render_unknown_uses_signed_value():
    rendered = render_char(0xC3)
    assert rendered.startswith(b"\x1b[41m\xc3(ASCII: ")
    assert b"(ASCII: -61)" in rendered


def test_inspect_counts_are_consistent():
    data = [b"ab c\n", b"\tx!\x01\n", b"\xc3z"]
    out = io.BytesIO()
    counts = inspect(data, out)
    joined = b"".join(data)
    assert counts.total == len(joined)
    assert counts.newlines == joined.count(b"\n")
    assert counts.tabs == joined.count(b"\t")
    assert counts.spaces == joined.count(b" ")
    assert counts.lines == counts.newlines + 1
    assert (
        counts.newlines + counts.tabs + counts.controls + counts.spaces
        + counts.unknowns + counts.normals
    ) == counts.total
    assert out.getvalue().count(b"\x1b[34m\\0\x1b[0m\n") == len(data)


def test_inspect_stops_at_nul():
    out = io.BytesIO()
    counts = inspect([b"ab\0cd\n"], out)
    assert counts.total == len(b"ab")
    assert b"cd" not in out.getvalue()
    assert out.getvalue() == b"ab\x1b[34m\\0\x1b[0m\n"


def test_format_summary():
    summary = format_summary(Counts(tabs=3, newlines=4))
    assert "| Tabs                             : 3         \n" in summary
    assert "| Lines                            : 5" in summary
    assert summary.endswith("\x1b[0m\n\n")


def test_help_text():
    assert help_text().startswith("For stdout, please use pipeline, '|'\n")


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "For document, please use char_ins" in capsys.readouterr().out


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert capsys.readouterr().out == "Invalid input!\n"


def test_main_reads_stdin(capsysbinary, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"hi\n")))
    assert main([]) == 0
    output = capsysbinary.readouterr().out
    assert output.startswith(b"hi\x1b[34m\\n\x1b[0m")
    assert b"| Total words" in output