"""
Summary: Write line bytes, separators and banners to the output stream.
Why: Treat short writes exactly like failed writes, with no retry.
"""

from __future__ import annotations

import os
from typing import Final

from pyhead.config.settings import LINE_TERMINATOR

from ..domain import WriteError
from .ports import OutputStreamPort

BANNER_PREFIX: Final[bytes] = b"==> "
BANNER_SUFFIX: Final[bytes] = b" <==" + LINE_TERMINATOR


def format_banner(name: str) -> bytes:
    """Return the ``==> name <==`` banner line for ``name``."""

    return BANNER_PREFIX + os.fsencode(name) + BANNER_SUFFIX


class HeadWriter:
    """Write raw bytes to an output stream, raising on any shortfall."""

    _output: OutputStreamPort

    def __init__(self, output: OutputStreamPort) -> None:
        self._output = output

    def write_line(self, data: bytes, target: str) -> None:
        """Write one line read from ``target``.

        Raises:
            WriteError: Fewer than ``len(data)`` bytes were accepted.
        """
        self._write(data, target)

    def write_separator(self) -> None:
        """Write the blank line printed between per-input outputs."""

        self._write(LINE_TERMINATOR, "<NL>")

    def write_banner(self, name: str) -> None:
        """Write the header line that precedes ``name``'s body."""

        self._write(format_banner(name), "file header")

    def flush(self) -> None:
        try:
            self._output.flush()
        except OSError as exc:
            raise WriteError("flush", "standard output", cause=exc) from exc

    def _write(self, data: bytes, target: str) -> None:
        try:
            written = self._output.write(data)
        except OSError as exc:
            raise WriteError("write", target, cause=exc) from exc
        if written != len(data):
            raise WriteError(
                "write",
                target,
                detail=f"short write ({written} of {len(data)} bytes)",
            )


__all__ = ["BANNER_PREFIX", "BANNER_SUFFIX", "HeadWriter", "format_banner"]
