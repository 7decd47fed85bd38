"""Locating commands on the search path and opening redirection files."""

from __future__ import annotations

import enum
import os
from typing import BinaryIO, Mapping

from .textutils import split


class PipexError(Exception):
    """A fatal error; ``status`` is the exit status to use."""

    def __init__(self, message: str, status: int = 1):
        super().__init__(message)
        self.status = status


class FileMode(enum.Enum):
    """How a redirection file is opened."""

    WRITE = "write"
    READ = "read"
    APPEND = "append"


_OPEN_FLAGS = {
    FileMode.WRITE: (os.O_CREAT | os.O_WRONLY | os.O_TRUNC, "wb"),
    FileMode.READ: (os.O_RDONLY, "rb"),
    FileMode.APPEND: (os.O_CREAT | os.O_WRONLY | os.O_APPEND, "ab"),
}


def search_dirs(env: Mapping[str, str]) -> list[str] | None:
    """Return the directories of PATH, starting at its first '/'.

    Returns None when PATH is unset or holds no absolute directory.
    """
    value = env.get("PATH")
    if value is None:
        return None
    slash = value.find("/")
    if slash < 0:
        return None
    return split(value[slash:], ":")


def resolve_command(name: str, env: Mapping[str, str]) -> str:
    """Return the first executable ``dir/name`` on PATH, else ``name`` itself."""
    dirs = search_dirs(env)
    if dirs is None:
        raise PipexError("Error: Path not found.")
    if not name:
        return name
    for directory in dirs:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return name


def open_file(path: str, mode: FileMode) -> BinaryIO:
    """Open ``path`` for redirection; created files get mode 0644."""
    flags, file_mode = _OPEN_FLAGS[mode]
    try:
        fd = os.open(path, flags, 0o644)
    except OSError as exc:
        raise PipexError(f"pipex: {path}: {exc.strerror}") from exc
    return os.fdopen(fd, file_mode)