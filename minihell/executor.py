"""Running one command: locating programs, wiring pipes, redirections and here-documents."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager, suppress
from typing import IO, TextIO, Union

from minihell.environment import Environment, command_candidates, count_paths

Stream = Union[int, IO[bytes], None]


def _part(parts: Sequence[str], index: int) -> str | None:
    return parts[index] if 0 <= index < len(parts) else None


class PipeSet:
    """The pipes that connect the commands of one line, in order."""

    def __init__(self, count: int) -> None:
        self._pipes: list[tuple[int, int]] = [os.pipe() for _ in range(count)]
        self._open: set[int] = {fd for pair in self._pipes for fd in pair}

    def __len__(self) -> int:
        return len(self._pipes)

    def __enter__(self) -> PipeSet:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _pair(self, index: int) -> tuple[int, int]:
        if not 0 <= index < len(self._pipes):
            raise IndexError(f"no pipe at {index}")
        return self._pipes[index]

    def _close_fd(self, fd: int) -> None:
        if fd in self._open:
            self._open.discard(fd)
            os.close(fd)

    def read_end(self, index: int) -> int:
        """Descriptor a command reads from when pipe *index* feeds it."""
        return self._pair(index)[0]

    def write_end(self, index: int) -> int | None:
        """Descriptor a command writes to, or None past the last pipe."""
        if index >= len(self._pipes):
            return None
        return self._pair(index)[1]

    def close_used(self, index: int) -> None:
        """Close the read end of the previous pipe and the write end of pipe *index*."""
        if 0 < index <= len(self._pipes):
            self._close_fd(self._pipes[index - 1][0])
        if 0 <= index < len(self._pipes):
            self._close_fd(self._pipes[index][1])

    def close(self) -> None:
        """Close every descriptor still open."""
        for fd in sorted(self._open):
            self._close_fd(fd)


def find_executable(command: str, env: Environment, cwd: str) -> str | None:
    """Locate *command* the way the shell does, or return None.

    An absolute name is used as it is; a name starting with '.' has that
    character replaced by *cwd*; anything else is searched in PATH, where
    only as many directories are tried as the value has ':' separators.
    """
    if command.startswith("/"):
        return command if os.access(command, os.X_OK) else None
    if command.startswith("."):
        path = cwd + command[1:]
        return path if os.access(path, os.X_OK) else None
    path_value = env.path_value()
    if path_value is None:
        return None
    directories = [item for item in path_value.split(":") if item]
    directories = directories[: count_paths(path_value)]
    for candidate in command_candidates(directories, command):
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def exit_status(returncode: int) -> int:
    """Turn a process return code into a shell status; a signal gives 128 plus its number."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def heredoc_delimiter(segment: str) -> tuple[str, list[str]]:
    """Split the text after '<<' into the delimiter and any extra words."""
    words = [word for word in segment.split(" ") if word]
    if not words:
        raise ValueError("missing here-document delimiter")
    return words[0], words[1:]


def read_heredoc(delimiter: str, stream: TextIO, echo: TextIO | None) -> str:
    """Collect lines from *stream* until one starts with *delimiter* or input ends."""
    lines: list[str] = []
    while True:
        if echo is not None:
            echo.write(">")
            echo.flush()
        line = stream.readline()
        if not line or line.startswith(delimiter):
            break
        lines.append(line)
    return "".join(lines)


def output_target(parts: Sequence[str], index: int) -> tuple[str, bool, list[str]] | None:
    """Where the command at *index* writes: (file, append, files only to create).

    Returns None when the command is not followed by '>' or '>>'. In a chain
    of redirections every file but the last is only created; whether the last
    is appended to depends on the first operator.
    """
    operator = _part(parts, index + 1)
    if operator not in (">", ">>"):
        return None
    created: list[str] = []
    position = index
    while _part(parts, position + 3) in (">", ">>"):
        position += 2
        created.append((_part(parts, position) or "").strip(" "))
    position += 2
    target = (_part(parts, position) or "").strip(" ")
    return target, operator == ">>", created


def open_input(parts: Sequence[str], index: int) -> IO[bytes]:
    """Open the file named after '<' for the command at *index*."""
    name = (_part(parts, index + 2) or "").strip(" ")
    return open(name, "rb")


def create_only(parts: Sequence[str], index: int) -> str | None:
    """Create the file named after a leading redirection.

    Returns the message for a word that follows the file name, if any.
    """
    words = [word for word in (_part(parts, index + 1) or "").split(" ") if word]
    if not words:
        return None
    with suppress(OSError):
        os.close(os.open(words[0], os.O_CREAT | os.O_RDONLY, 0o664))
    if len(words) > 1:
        return f"{words[1]}: command not found"
    return None


def _announcer(message: str):
    def handler(signum: int, frame: object) -> None:
        os.write(1, message.encode())

    return handler


@contextmanager
def _foreground_signals() -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous: dict[int, object] = {}
    for name, message in (("SIGINT", "\n"), ("SIGQUIT", "Quit (core dumped)\n")):
        signum = getattr(signal, name, None)
        if signum is not None:
            previous[signum] = signal.signal(signum, _announcer(message))
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def _emit(target: Stream, text: str) -> None:
    if target is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    fd = target if isinstance(target, int) else target.fileno()
    os.write(fd, text.encode())


def _env_dict(env: Environment) -> dict[str, str]:
    variables: dict[str, str] = {}
    for entry in env:
        key, sep, value = entry.partition("=")
        if sep:
            variables[key] = value
    return variables


def run_external(
    argv: Sequence[str], env: Environment, stdin: Stream, stdout: Stream, cwd: str
) -> int:
    """Run a program and return its shell status; 127 when it cannot be found."""
    path = find_executable(argv[0], env, cwd)
    if path is not None:
        sys.stdout.flush()
        try:
            with _foreground_signals():
                completed = subprocess.run(
                    list(argv),
                    executable=path,
                    env=_env_dict(env),
                    stdin=stdin,
                    stdout=stdout,
                    cwd=cwd,
                    check=False,
                )
            return exit_status(completed.returncode)
        except OSError as error:
            print(f"execve: {error.strerror}", file=sys.stderr)
    _emit(stdout, f"{argv[0]}: command not found \n")
    return 127