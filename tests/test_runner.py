import os

import pytest

from zonda_ide.runner import (
    RunOptions,
    UsageError,
    build_command,
    executable_files,
    files_of_type,
    main,
    parse_flags,
    run_file,
    sort_key,
    split_stem,
)


def _script(path, body="#!/bin/sh\n", mode=0o755):
    path.write_text(body)
    path.chmod(mode)
    return path


def test_split_stem():
    assert split_stem("a.c") == "a"
    assert split_stem("dir.x.py") == "dir.x"
    assert split_stem("plain") is None
    assert split_stem("trail.") is None
    assert split_stem("") is None


def test_sort_key_orders_by_type_then_name():
    assert sort_key("b.py") == ("py", "b.py")
    assert sort_key("z") == ("", "z")
    assert sort_key("a.py") < sort_key("b.py")
    assert sort_key("b.py") < sort_key("a.sh")
    assert sort_key("z") < sort_key("a.py")


def test_parse_flags_reads_leading_flags():
    options, rest = parse_flags(["-c", "-test", "-char_ins", "x", "-valgrind"])
    assert options == RunOptions(file_type="c", test=True, char_ins=True)
    assert rest == ["x", "-valgrind"]


def test_parse_flags_without_flags():
    options, rest = parse_flags(["a", "b"])
    assert options == RunOptions()
    assert rest == ["a", "b"]


@pytest.mark.parametrize(
    "args",
    [["-test", "-test"], ["-c", "-py"], ["-test", "-c"], ["-valgrind", "-valgrind"]],
)
def test_parse_flags_rejects_bad_forms(args):
    with pytest.raises(UsageError, match="Invalid form"):
        parse_flags(args)


def test_build_command_for_executable(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _script(tmp_path / "hello.sh")
    assert build_command("hello.sh", RunOptions()) == ("hello.sh", "./hello.sh")
    wrapped = build_command("hello.sh", RunOptions(valgrind=True, char_ins=True))
    assert wrapped == ("hello.sh", "valgrind ./hello.sh | char_ins")


def test_build_command_uses_test_file_only_when_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _script(tmp_path / "hello.sh")
    assert build_command("hello.sh", RunOptions(test=True))[1] == "./hello.sh"
    (tmp_path / "hello.test").write_text("input\n")
    assert build_command("hello.sh", RunOptions(test=True))[1] == "./hello.sh < hello.test"


def test_build_command_prefers_compiled_program(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _script(tmp_path / "prog.c", "int main(void){return 0;}\n", 0o644)
    _script(tmp_path / "prog")
    assert build_command("prog.c", RunOptions()) == ("prog", "./prog")


def test_build_command_uses_shebang(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _script(tmp_path / "s.py", "#!/usr/bin/env python3\nprint()\n", 0o644)
    title, command = build_command("s.py", RunOptions())
    assert title == "s.py"
    assert command == "/usr/bin/env python3 s.py"


def test_build_command_rejects_plain_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _script(tmp_path / "notes.txt", "hello\n", 0o644)
    with pytest.raises(UsageError, match="not an executable file"):
        build_command("notes.txt", RunOptions())


def test_build_command_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert build_command("absent.sh", RunOptions()) is None
    assert run_file("absent.sh", RunOptions()) is False


def test_executable_files(tmp_path):
    _script(tmp_path / "b.sh")
    _script(tmp_path / "a.py", "#!/usr/bin/env python3\n", 0o644)
    _script(tmp_path / "data.txt", "data\n", 0o644)
    (tmp_path / "d.dir").mkdir()
    assert executable_files(tmp_path) == ["a.py", "b.sh"]


def test_executable_files_empty(tmp_path):
    with pytest.raises(UsageError, match="No executable file"):
        executable_files(tmp_path)


def test_files_of_type(tmp_path):
    for name in ("x.c", "a.c", "y.h"):
        (tmp_path / name).write_text("")
    assert files_of_type("c", tmp_path) == ["a.c", "x.c"]
    with pytest.raises(UsageError, match=r"No \.rs type file"):
        files_of_type("rs", tmp_path)


def test_run_file_executes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _script(tmp_path / "hi.sh", "#!/bin/sh\necho ran > marker.txt\n")
    assert run_file("hi.sh", RunOptions()) is True
    assert (tmp_path / "marker.txt").read_text().strip() == "ran"
    assert "===== hi.sh =====" in capsys.readouterr().out


def test_main_runs_by_type(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _script(tmp_path / "hi.sh", "#!/bin/sh\necho ran > marker.txt\n")
    assert main(["-sh"]) == 0
    assert os.path.exists(tmp_path / "marker.txt")


def test_main_invalid_form(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-test", "-test"]) == 1
    assert "Invalid form..." in capsys.readouterr().out


def test_main_type_with_files_is_invalid(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-sh", "x"]) == 1
    assert "Invalid input!" in capsys.readouterr().out


def test_main_reports_non_executable(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "x.txt").write_text("plain\n")
    assert main(["x.txt"]) == 0
    assert "x.txt is not an executable file..." in capsys.readouterr().out