"""Line-by-line reading from a stream using fixed-size reads."""

from __future__ import annotations

from typing import Any, Iterator


class LineReader:
    """Read lines from ``stream`` in chunks of ``buffer_size``.

    Works with both binary and text streams. Each line keeps its trailing
    newline; the last line may lack one.
    """

    def __init__(self, stream: Any, buffer_size: int = 10) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None

    def read_line(self):
        """Return the next line, or ``None`` once the stream is exhausted."""
        pieces = []
        chunk = self._pending
        self._pending = None
        while True:
            if not chunk:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    if not pieces:
                        return None
                    return pieces[0][:0].join(pieces)
            newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            index = chunk.find(newline)
            if index == -1:
                pieces.append(chunk)
                chunk = None
                continue
            pieces.append(chunk[:index + 1])
            self._pending = chunk[index + 1:] or None
            return chunk[:0].join(pieces)

    def __iter__(self) -> Iterator:
        while (line := self.read_line()) is not None:
            yield line