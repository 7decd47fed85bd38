"""Reading a stream one line at a time in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 4


class LineReader(Generic[AnyStr]):
    """Return lines, newline included, from a stream read in chunks.

    Data read past the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or self._newline not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, bytes) else "\n"  # type: ignore[assignment]
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline)  # type: ignore[arg-type]
        if cut < 0:
            self._pending = None
            return pending
        line, rest = pending[: cut + 1], pending[cut + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line