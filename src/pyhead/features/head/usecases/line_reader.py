"""
Summary: Read one line, terminator included, from an input stream.
Why: Keep buffer reuse and end-of-stream versus error handling in one place.
"""

from __future__ import annotations

from pyhead.config.settings import LINE_TERMINATOR, READ_CHUNK_SIZE

from ..domain import ReadError
from .ports import InputStreamPort


class LineReader:
    """Read lines into a buffer that is reused for every line and input."""

    _buffer: bytearray
    _chunk_size: int

    def __init__(self, chunk_size: int = READ_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._buffer = bytearray()
        self._chunk_size = chunk_size

    def read_line(self, stream: InputStreamPort) -> tuple[bytes, bool]:
        """Read the next line from ``stream``.

        Args:
            stream: Input to read from.

        Returns:
            tuple[bytes, bool]: The line bytes and whether a line was found.
            A last line without terminator is returned unchanged; ``(b"", False)``
            means clean end of stream.

        Raises:
            ReadError: The stream reported an I/O error. Pending bytes are dropped.
        """
        buffer = self._buffer
        buffer.clear()
        while True:
            try:
                chunk = stream.readline(self._chunk_size)
            except OSError as exc:
                buffer.clear()
                raise ReadError("read", stream.name, cause=exc) from exc
            if not chunk:
                break
            buffer += chunk
            if chunk.endswith(LINE_TERMINATOR):
                break

        if not buffer:
            return b"", False
        return bytes(buffer), True


__all__ = ["LineReader"]
