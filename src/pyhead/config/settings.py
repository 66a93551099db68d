"""Where: src/pyhead/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Invalid values fall back to defaults instead of failing the run.
"""

from __future__ import annotations

from typing import Final

from pyhead.config.config import (
    READ_CHUNK_SIZE_DEFAULT,
    STDIN_MARKER_DEFAULT,
    config as app_config,
)

# Command line defaults -------------------------------------------------------

PROGRAM_NAME: Final[str] = "pyhead"

# Lines printed per input when -n is absent.
DEFAULT_LINE_LIMIT: Final[int] = 10

# Largest accepted -n value (unsigned 64-bit).
LINE_LIMIT_MAX: Final[int] = 2**64 - 1


# Stream handling -------------------------------------------------------------

LINE_TERMINATOR: Final[bytes] = b"\n"

# Name used in diagnostics for standard input.
STDIN_DISPLAY_NAME: Final[str] = "standard input"

_stdin_marker = getattr(app_config, "stdin_marker", STDIN_MARKER_DEFAULT)
STDIN_MARKER: str = (
    _stdin_marker
    if isinstance(_stdin_marker, str) and _stdin_marker
    else STDIN_MARKER_DEFAULT
)

_read_chunk_size = getattr(app_config, "read_chunk_size", READ_CHUNK_SIZE_DEFAULT)
READ_CHUNK_SIZE: int = (
    _read_chunk_size
    if isinstance(_read_chunk_size, int)
    and not isinstance(_read_chunk_size, bool)
    and _read_chunk_size > 0
    else READ_CHUNK_SIZE_DEFAULT
)


__all__ = [
    "DEFAULT_LINE_LIMIT",
    "LINE_LIMIT_MAX",
    "LINE_TERMINATOR",
    "PROGRAM_NAME",
    "READ_CHUNK_SIZE",
    "STDIN_DISPLAY_NAME",
    "STDIN_MARKER",
]
