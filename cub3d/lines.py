"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Iterator

BUFFER_SIZE = 100


class LineReader:
    """Reads lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None
        self._newline = None

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                index = self._pending.find(self._newline)
                if index >= 0:
                    line = self._pending[:index + 1]
                    self._pending = self._pending[index + 1:]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                line, self._pending = self._pending, None
                return line or None
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(path: str | os.PathLike, count: int) -> list[str | None]:
    """Read ``count`` lines from the file at ``path``.

    Lines past the end of the file come back as None, so the result always
    has ``count`` items.
    """
    if count < 0:
        raise ValueError(f"negative line count: {count}")
    with open(path, encoding="utf-8", newline="") as stream:
        reader = LineReader(stream)
        return [reader.readline() for _ in range(count)]