"""Stream adapters over real files and the process standard streams."""

from __future__ import annotations

import sys
from typing import BinaryIO, final

from pyhead.config.settings import STDIN_DISPLAY_NAME


@final
class FileInputStream:
    """Binary input that remembers whether a read has failed."""

    name: str
    _raw: BinaryIO
    _owned: bool
    _error: bool

    def __init__(self, raw: BinaryIO, name: str, *, owned: bool = True) -> None:
        self.name = name
        self._raw = raw
        self._owned = owned
        self._error = False

    def readline(self, size: int = -1, /) -> bytes:
        try:
            return self._raw.readline(size)
        except OSError:
            self._error = True
            raise

    def error_indicator(self) -> bool:
        return self._error

    def close(self) -> None:
        # Standard input belongs to the process.
        if self._owned:
            self._raw.close()


@final
class BinaryOutputStream:
    """Binary output reporting the number of bytes accepted."""

    _raw: BinaryIO

    def __init__(self, raw: BinaryIO) -> None:
        self._raw = raw

    def write(self, data: bytes, /) -> int:
        written = self._raw.write(data)
        # Non-blocking raw streams report None when nothing was accepted.
        return 0 if written is None else written

    def flush(self) -> None:
        self._raw.flush()


@final
class LocalStreamProvider:
    """Open paths with ``open`` and expose ``sys.stdin``/``sys.stdout`` buffers."""

    def open_input(self, path: str) -> FileInputStream:
        return FileInputStream(open(path, "rb"), path)

    def stdin(self) -> FileInputStream:
        return FileInputStream(sys.stdin.buffer, STDIN_DISPLAY_NAME, owned=False)

    def stdout(self) -> BinaryOutputStream:
        return BinaryOutputStream(sys.stdout.buffer)


__all__ = ["BinaryOutputStream", "FileInputStream", "LocalStreamProvider"]
