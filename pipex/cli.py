"""Command-line entry point: run commands between an input and an output file."""

from __future__ import annotations

import os
import sys
import tempfile
from typing import BinaryIO, Optional, Sequence, TextIO

from .lines import LineReader
from .paths import FileMode, PipexError, open_file
from .pipeline import run_pipeline

USAGE = "./pipex infile cmd1 cmd2 ... cmdn outfile\n"
HEREDOC_USAGE = "./pipex here_doc LIMITER cmd cmd1 file\n"
HEREDOC = "here_doc"


def read_heredoc(
    limiter: str, source: BinaryIO, prompt: Optional[TextIO] = None
) -> bytes:
    """Collect lines from ``source`` up to a line equal to ``limiter``.

    A "> " prompt is written to ``prompt`` before each line is read. The
    limiter line is not part of the result; end of input also ends it.
    """
    terminator = os.fsencode(limiter) + b"\n"
    reader = LineReader(source)
    body = bytearray()
    while True:
        if prompt is not None:
            prompt.write("> ")
            prompt.flush()
        line = reader.read_line()
        if line is None or line == terminator:
            break
        body += line
    return bytes(body)


def _fail(message: str, status: int = 1) -> int:
    sys.stderr.write(message)
    sys.stderr.flush()
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; ``argv`` excludes the program name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 4:
        return _fail(USAGE)
    try:
        if args[0] == HEREDOC:
            if len(args) < 5:
                return _fail(HEREDOC_USAGE)
            with open_file(args[-1], FileMode.APPEND) as outfile:
                body = read_heredoc(args[1], sys.stdin.buffer, sys.stdout)
                with tempfile.TemporaryFile() as infile:
                    infile.write(body)
                    infile.seek(0)
                    run_pipeline(args[2:-1], infile, outfile, os.environ)
        else:
            with open_file(args[0], FileMode.READ) as infile, open_file(
                args[-1], FileMode.WRITE
            ) as outfile:
                run_pipeline(args[1:-1], infile, outfile, os.environ)
    except PipexError as exc:
        return _fail(f"{exc}\n", exc.status)
    return 0