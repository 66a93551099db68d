"""Rich console handler for diagnostic lines.

Where: platform/logging/handlers.py
What: Render log records as single ``program: message`` lines on stderr.
Why: Keep diagnostics greppable while still routing them through Rich.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


class DiagnosticRichHandler(RichHandler):
    """Rich handler that prints each record on one unadorned line."""

    program_name: str

    def __init__(self, *args: Any, program_name: str = "pyhead", **kwargs: Any) -> None:
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_level", False)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)
        self.program_name = program_name

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        return Text(f"{self.program_name}: {message}")

    @override
    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self.console.print(
                self.render_message(record, message),
                soft_wrap=True,
                highlight=False,
            )
        except Exception:
            self.handleError(record)


def make_console() -> Console:
    """Create the stderr console used for diagnostics."""

    return Console(stderr=True, soft_wrap=True, highlight=False)


__all__ = ["DiagnosticRichHandler", "make_console"]
