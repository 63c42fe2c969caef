"""Read a text stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

BUFFER_SIZE = 7


class LineReader:
    """Split the text read from ``stream`` into lines.

    The stream is read ``buffer_size`` characters at a time. Each line is
    returned with its trailing newline; the last line of the stream is
    returned without one when the stream does not end in a newline.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def next_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def get_next_line(reader: LineReader) -> str | None:
    """Return the next line from ``reader``, or None at the end of its stream."""
    return reader.next_line()