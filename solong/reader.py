"""Line-by-line reading of a text stream, keeping each line's newline."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

BUFFER_SIZE = 1


class LineReader:
    """Read a text stream in chunks of ``buffer_size`` and hand out whole lines.

    Each line keeps its trailing newline; the last line may lack one.
    Unread text stays buffered in the reader between calls.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending = ""

    def _fill(self) -> None:
        chunks = [self._pending]
        while True:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
            if "\n" in chunk:
                break
        self._pending = "".join(chunks)

    def next_line(self) -> Optional[str]:
        """Return the next line, or None once the stream is exhausted."""
        if "\n" not in self._pending:
            self._fill()
        if not self._pending:
            return None
        line, newline, rest = self._pending.partition("\n")
        self._pending = rest
        return line + newline

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_text(stream: TextIO) -> str:
    """Read the whole of ``stream`` line by line and return it as one string."""
    return "".join(LineReader(stream))