"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional


def _find_newline(data: AnyStr) -> int:
    """Return the index of the first newline in ``data``, or -1."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream``, pulling ``buffer_size`` units per read.

    Each line keeps its trailing newline; the final line of a stream that
    does not end in a newline is returned as it is. Text and binary streams
    are both supported, and lines come back as the stream's own type.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> None:
        """Read until the pending data holds a newline or the stream ends."""
        while self._pending is None or _find_newline(self._pending) < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        position = _find_newline(pending)
        if position < 0:
            self._pending = None
            return pending
        line = pending[: position + 1]
        self._pending = pending[position + 1 :] or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line