import io
import sys

import pytest

from myshell.cli import main


def test_cli_exec_outputs(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["exec", "echo hi"])
    assert exc.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == "hi\n"


def test_cli_exec_exit_builtin():
    with pytest.raises(SystemExit) as exc:
        main(["exec", "exit 5"])
    assert exc.value.code == 5


def test_cli_shell_repl(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("echo hello\n\nexit 3\necho never\n"))
    with pytest.raises(SystemExit) as exc:
        main(["shell"])
    assert exc.value.code == 3
    captured = capsys.readouterr()
    assert captured.out == "$ hello\n$ $ "


def test_cli_shell_is_default_and_eof_is_a_read_failure(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("nonexistent_cmd_xyz\n"))
    with pytest.raises(SystemExit) as exc:
        main(["--prompt", "> "])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == "> nonexistent_cmd_xyz: command not found\n> "
    assert "Error reading input: EOF" in captured.err


def test_cli_shell_read_failure_exits_with_one(monkeypatch, capsys):
    class BrokenInput(io.StringIO):
        def readline(self, *args):
            raise OSError("input gone")

    monkeypatch.setattr(sys, "stdin", BrokenInput())
    with pytest.raises(SystemExit) as exc:
        main(["shell"])
    assert exc.value.code == 1
    assert "input gone" in capsys.readouterr().err


def test_cli_shell_undecodable_input_exits_with_one(monkeypatch, capsys):
    raw = io.TextIOWrapper(io.BytesIO(b"echo \xff\n"), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", raw)
    with pytest.raises(SystemExit) as exc:
        main(["shell"])
    assert exc.value.code == 1
    assert "Error reading input" in capsys.readouterr().err
