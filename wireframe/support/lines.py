"""Reading a stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Splits what a stream yields into lines, each keeping its newline.

    Works on text and binary streams alike; the line type follows what the
    stream's ``read`` returns. The last line comes back without a newline
    when the stream does not end with one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._eof = False

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                cut = self._pending.find(newline)  # type: ignore[arg-type]
                if cut >= 0:
                    line = self._pending[: cut + 1]
                    self._pending = self._pending[cut + 1 :]
                    return line
                if self._eof:
                    line = self._pending
                    self._pending = self._pending[:0]
                    return line
            elif self._eof:
                return None
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                continue
            self._pending = chunk if self._pending is None else self._pending + chunk


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, newlines kept."""
    yield from LineReader(stream)