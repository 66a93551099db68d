# /*
# Where: features/head/usecases/file_processor.py
# What: Copy up to the line limit from one input to the output.
# Why: Own the open/read/write/close lifecycle of a single input.
# Assumptions:
# - Standard input is already open and is never closed here.
# - Failures are reported into the shared RunState and never re-raised.
# */

from __future__ import annotations

import logging

from pyhead.config.settings import STDIN_MARKER

from ..domain import (
    CloseError,
    OpenError,
    ReadError,
    RunState,
    WriteError,
)
from .diagnostics import report_failure
from .head_writer import HeadWriter
from .line_reader import LineReader
from .ports import InputStreamPort, StreamProviderPort

LOGGER = logging.getLogger(__name__)


class FileProcessor:
    """Process one input at a time with a shared reader and writer."""

    streams: StreamProviderPort
    reader: LineReader
    writer: HeadWriter
    state: RunState
    stdin_marker: str

    def __init__(
        self,
        streams: StreamProviderPort,
        reader: LineReader,
        writer: HeadWriter,
        state: RunState,
        *,
        stdin_marker: str = STDIN_MARKER,
    ) -> None:
        self.streams = streams
        self.reader = reader
        self.writer = writer
        self.state = state
        self.stdin_marker = stdin_marker

    def process_input(self, name: str, limit: int) -> None:
        """Process the input named on the command line.

        Args:
            name: Path text, or the stdin marker for standard input.
            limit: Maximum number of lines to copy.
        """
        if name == self.stdin_marker:
            self.process_stdin(limit)
            return

        try:
            stream = self.streams.open_input(name)
        except OSError as exc:
            report_failure(self.state, OpenError("open", name, cause=exc))
            return

        try:
            self.process(stream, limit)
        finally:
            try:
                stream.close()
            except OSError as exc:
                report_failure(self.state, CloseError("close", name, cause=exc))

    def process_stdin(self, limit: int) -> None:
        self.process(self.streams.stdin(), limit)

    def process(self, stream: InputStreamPort, limit: int) -> None:
        """Copy at most ``limit`` lines from ``stream``.

        Stops early on end of stream, a read error or a write error. The
        input's error indicator and the output are checked after the loop
        however it ended.
        """
        LOGGER.debug("Processing %s (limit=%d)", stream.name, limit)
        read_failed = False
        write_failed = False
        copied = 0

        for _ in range(limit):
            try:
                line, found = self.reader.read_line(stream)
            except ReadError as error:
                report_failure(self.state, error)
                read_failed = True
                break
            if not found:
                break
            try:
                self.writer.write_line(line, stream.name)
            except WriteError as error:
                report_failure(self.state, error)
                write_failed = True
                break
            copied += 1

        if not read_failed and stream.error_indicator():
            report_failure(
                self.state,
                ReadError("read", stream.name, detail="file error indicator set"),
            )

        if not write_failed:
            try:
                self.writer.flush()
            except WriteError as error:
                report_failure(self.state, error)

        LOGGER.debug("Copied %d line(s) from %s", copied, stream.name)


__all__ = ["FileProcessor"]
