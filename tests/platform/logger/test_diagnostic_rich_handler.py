"""Tests for ``DiagnosticRichHandler`` and logger setup."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path

from rich.console import Console
from rich.text import Text

from pyhead.platform.logging import DiagnosticRichHandler, setup_logger


def _make_handler() -> tuple[DiagnosticRichHandler, StringIO]:
    """Create a handler writing to an in-memory, colourless console."""

    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, no_color=True, width=20)
    return DiagnosticRichHandler(console=console, program_name="pyhead"), buffer


def _build_record(msg: str, level: int = logging.ERROR) -> logging.LogRecord:
    return logging.LogRecord(
        name="pyhead",
        level=level,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_render_message_prefixes_program_name() -> None:
    handler, _ = _make_handler()

    rendered = handler.render_message(_build_record("x"), "open: a: gone")

    assert isinstance(rendered, Text)
    assert rendered.plain == "pyhead: open: a: gone"


def test_emit_prints_single_unwrapped_line() -> None:
    """Long diagnostics are not wrapped to the console width."""

    handler, buffer = _make_handler()
    message = "open: /a/very/long/path/that/exceeds/twenty/columns.txt: No such file or directory"

    handler.emit(_build_record(message))

    assert buffer.getvalue() == f"pyhead: {message}\n"


def test_emit_keeps_markup_literal() -> None:
    handler, buffer = _make_handler()

    handler.emit(_build_record("open: [bold]x[/bold]: denied"))

    assert buffer.getvalue() == "pyhead: open: [bold]x[/bold]: denied\n"


def test_setup_logger_replaces_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "pyhead.log"

    logger = setup_logger(log_file=log_file)
    logger = setup_logger(log_file=log_file)

    kinds = [type(h) for h in logger.handlers]
    assert kinds == [DiagnosticRichHandler, logging.handlers.RotatingFileHandler]
    assert logger.handlers[0].level == logging.WARNING
    assert log_file.parent.is_dir()

    logger = setup_logger()
    assert [type(h) for h in logger.handlers] == [DiagnosticRichHandler]
