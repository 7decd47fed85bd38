"""Running a chain of commands connected by pipes."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Any, Mapping, Optional, Sequence, Union

from .paths import PipexError, resolve_command
from .textutils import split

Stream = Union[IO[Any], int, None]

_NOT_FOUND = "pipex: command not found: "


def split_command(command: str) -> list[str]:
    """Split a command line into words on spaces, dropping empty words."""
    return split(command, " ")


def _fileno(stream: Stream) -> Optional[int]:
    if stream is None or isinstance(stream, int):
        return stream
    return stream.fileno()


def _report(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()


def _start(
    argv: list[str],
    stdin_fd: Optional[int],
    stdout_fd: Optional[int],
    env: Mapping[str, str],
) -> Optional[subprocess.Popen]:
    """Start one command, or report why it cannot start and return None."""
    name = argv[0] if argv else ""
    try:
        path = resolve_command(name, env)
    except PipexError as exc:
        _report(f"{exc}\n")
        return None
    if not name:
        _report(_NOT_FOUND)
        return None
    if "/" not in path:
        # An unresolved name is executed relative to the working directory.
        path = os.path.join(os.curdir, path)
    try:
        return subprocess.Popen(
            argv,
            executable=path,
            stdin=stdin_fd,
            stdout=stdout_fd,
            env=dict(env),
        )
    except OSError:
        _report(f"{_NOT_FOUND}{name}\n")
        return None


def run_pipeline(
    commands: Sequence[str],
    stdin: Stream = None,
    stdout: Stream = None,
    env: Optional[Mapping[str, str]] = None,
) -> list[int]:
    """Run ``commands`` with each one's output feeding the next one's input.

    The first command reads ``stdin`` and the last writes ``stdout``; None
    means the current process's own stream. Returns the exit status of every
    command in order; a command that could not be started counts as 1.
    """
    if not commands:
        raise ValueError("at least one command is required")
    environment = os.environ if env is None else env
    upstream = _fileno(stdin)
    sink = _fileno(stdout)
    last_index = len(commands) - 1
    children: list[Optional[subprocess.Popen]] = []
    for index, command in enumerate(commands):
        if index == last_index:
            read_end, write_end = None, sink
        else:
            read_end, write_end = os.pipe()
        try:
            children.append(
                _start(split_command(command), upstream, write_end, environment)
            )
        except BaseException:
            if read_end is not None:
                os.close(read_end)
            raise
        finally:
            if read_end is not None:
                os.close(write_end)
            if index > 0 and upstream is not None:
                os.close(upstream)
        upstream = read_end
    return [child.wait() if child is not None else 1 for child in children]