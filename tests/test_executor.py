import io
import os
import signal

import pytest

from minihell.environment import Environment
from minihell.executor import (
    PipeSet,
    create_only,
    exit_status,
    find_executable,
    heredoc_delimiter,
    open_input,
    output_target,
    read_heredoc,
    run_external,
)


def _script(directory, name, body):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(0o755)
    return path


def test_pipe_carries_data_and_closes_writer():
    with PipeSet(1) as pipes:
        os.write(pipes.write_end(0), b"x")
        pipes.close_used(0)
        assert os.read(pipes.read_end(0), 10) == b"x"
        assert os.read(pipes.read_end(0), 10) == b""


def test_write_end_past_last_pipe_is_none():
    with PipeSet(2) as pipes:
        assert pipes.write_end(2) is None
        assert len(pipes) == 2


def test_read_end_out_of_range():
    with PipeSet(1) as pipes:
        with pytest.raises(IndexError):
            pipes.read_end(1)


def test_exit_status_plain_codes():
    assert exit_status(0) == 0
    assert exit_status(3) == 3


def test_exit_status_signal():
    assert exit_status(-int(signal.SIGTERM)) == 128 + int(signal.SIGTERM)


def test_find_absolute(tmp_path):
    script = _script(tmp_path, "prog", "exit 0")
    assert find_executable(str(script), Environment([]), str(tmp_path)) == str(script)


def test_find_absolute_not_executable(tmp_path):
    path = tmp_path / "plain"
    path.write_text("data")
    path.chmod(0o644)
    assert find_executable(str(path), Environment([]), str(tmp_path)) is None


def test_find_in_path(tmp_path):
    _script(tmp_path, "prog", "exit 0")
    env = Environment([f"PATH={tmp_path}:"])
    assert find_executable("prog", env, "/") == f"{tmp_path}/prog"


def test_last_path_directory_is_not_searched(tmp_path):
    _script(tmp_path, "prog", "exit 0")
    env = Environment([f"PATH={tmp_path}"])
    assert find_executable("prog", env, "/") is None


def test_find_without_path_variable(tmp_path):
    _script(tmp_path, "prog", "exit 0")
    assert find_executable("prog", Environment(["HOME=/"]), str(tmp_path)) is None


def test_find_relative(tmp_path):
    _script(tmp_path, "prog", "exit 0")
    found = find_executable("./prog", Environment([]), str(tmp_path))
    assert found == f"{tmp_path}/prog"


def test_heredoc_delimiter_with_extras():
    assert heredoc_delimiter("EOF extra ") == ("EOF", ["extra"])


def test_heredoc_delimiter_empty():
    with pytest.raises(ValueError):
        heredoc_delimiter("   ")


def test_read_heredoc_stops_at_delimiter():
    echo = io.StringIO()
    text = read_heredoc("EOF", io.StringIO("a\nb\nEOF\nc\n"), echo)
    assert text == "a\nb\n"
    assert echo.getvalue() == ">" * 3


def test_read_heredoc_matches_prefix():
    assert read_heredoc("EOF", io.StringIO("x\nEOFX\ny\n"), None) == "x\n"


def test_read_heredoc_until_end_of_input():
    assert read_heredoc("EOF", io.StringIO("a\nb\n"), None) == "a\nb\n"


def test_output_target_chain():
    parts = ["echo a ", ">", "f1 ", ">", "f2", ""]
    assert output_target(parts, 0) == ("f2", False, ["f1"])


def test_output_target_append():
    parts = ["echo a ", ">>", "log", ""]
    assert output_target(parts, 0) == ("log", True, [])


def test_output_target_none_without_redirect():
    assert output_target(["echo a ", "|", "cat", ""], 0) is None


def test_open_input_reads_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"content\n")
    with open_input(["cat ", "<", f"{path} ", ""], 0) as handle:
        assert handle.read() == b"content\n"


def test_open_input_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_input(["cat ", "<", str(tmp_path / "absent"), ""], 0)


def test_create_only_reports_extra_word(tmp_path):
    path = tmp_path / "made"
    message = create_only([">", f"{path} extra", ""], 0)
    assert path.exists()
    assert message == "extra: command not found"


def test_create_only_single_word(tmp_path):
    path = tmp_path / "made"
    assert create_only([">", str(path), ""], 0) is None
    assert path.read_bytes() == b""


def test_run_external_status(tmp_path):
    script = _script(tmp_path, "prog", "exit 3")
    env = Environment([f"PATH={os.environ.get('PATH', '/usr/bin:/bin')}"])
    assert run_external([str(script)], env, None, None, str(tmp_path)) == 3


def test_run_external_writes_to_file(tmp_path):
    script = _script(tmp_path, "prog", "echo hello")
    out = tmp_path / "out"
    with open(out, "wb") as handle:
        status = run_external([str(script)], Environment([]), None, handle, str(tmp_path))
    assert status == 0
    assert out.read_bytes() == b"hello\n"


def test_run_external_reads_stdin(tmp_path):
    script = _script(tmp_path, "prog", "read line; echo \"$line\"")
    source = tmp_path / "in"
    source.write_bytes(b"fed\n")
    out = tmp_path / "out"
    with open(source, "rb") as stdin, open(out, "wb") as stdout:
        run_external([str(script)], Environment([]), stdin, stdout, str(tmp_path))
    assert out.read_bytes() == b"fed\n"


def test_run_external_not_found(tmp_path, capsys):
    env = Environment([f"PATH={tmp_path}:"])
    status = run_external(["nosuchcmd-xyz"], env, None, None, str(tmp_path))
    assert status == 127
    assert capsys.readouterr().out == "nosuchcmd-xyz: command not found \n"