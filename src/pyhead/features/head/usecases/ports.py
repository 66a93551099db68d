"""
Summary: Ports describing the byte streams the head use cases consume.
Why: Decouple use cases from real files so tests can inject I/O failures.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class InputStreamPort(Protocol):
    """Port for a readable byte stream."""

    name: str

    def readline(self, size: int = -1, /) -> bytes:
        """Return up to ``size`` bytes ending at the first newline; ``b""`` at EOF.

        Raises:
            OSError: The underlying read failed.
        """
        ...

    def error_indicator(self) -> bool:
        """Return True once the stream has observed an I/O error."""
        ...

    def close(self) -> None:
        """Release the stream.

        Raises:
            OSError: Closing failed.
        """
        ...


@runtime_checkable
class OutputStreamPort(Protocol):
    """Port for the byte stream receiving output."""

    def write(self, data: bytes, /) -> int:
        """Write ``data`` and return how many bytes were accepted."""
        ...

    def flush(self) -> None:
        """Push buffered bytes to the underlying file."""
        ...


@runtime_checkable
class StreamProviderPort(Protocol):
    """Port for opening inputs and reaching the standard streams."""

    def open_input(self, path: str) -> InputStreamPort:
        """Open ``path`` for binary reading.

        Raises:
            OSError: The path cannot be opened.
        """
        ...

    def stdin(self) -> InputStreamPort:
        """Return standard input; it is already open and never closed."""
        ...

    def stdout(self) -> OutputStreamPort:
        """Return standard output."""
        ...


__all__ = ["InputStreamPort", "OutputStreamPort", "StreamProviderPort"]
