"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Protocol

BUFFER_SIZE = 5


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = ...) -> AnyStr: ...


def _find_newline(data: AnyStr) -> int:
    """Return the index of the first newline in *data*, or -1 if there is none."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


class LineReader(Generic[AnyStr]):
    """Split the data read from *stream* into lines.

    The stream is read *buffer_size* characters (or bytes) at a time. Data
    read beyond the end of a line is kept for the next call. Each line keeps
    its trailing newline; the last line may have none. Works with text and
    binary streams alike.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def readline(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        chunks: list[AnyStr] = []
        if self._stash:
            chunks.append(self._stash)
        self._stash = None

        if not (chunks and _find_newline(chunks[0]) >= 0):
            while True:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                chunks.append(chunk)
                if _find_newline(chunk) >= 0:
                    break

        if not chunks:
            return None
        data = chunks[0][:0].join(chunks)
        if not data:
            return None
        end = _find_newline(data)
        if end < 0:
            return data
        self._stash = data[end + 1:]
        return data[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line