"""
Summary: Iterate every input, print banners and aggregate failures.
Why: One input's failure must not stop the remaining inputs.
"""

from __future__ import annotations

import logging

from pyhead.config.settings import READ_CHUNK_SIZE, STDIN_MARKER

from ..domain import RunConfig, RunState, WriteError
from .diagnostics import report_failure
from .file_processor import FileProcessor
from .head_writer import HeadWriter
from .line_reader import LineReader
from .ports import StreamProviderPort

LOGGER = logging.getLogger(__name__)


class MultiFileRunner:
    """Run the head loop over the configured inputs."""

    state: RunState
    writer: HeadWriter
    processor: FileProcessor

    def __init__(
        self,
        streams: StreamProviderPort,
        state: RunState | None = None,
        *,
        chunk_size: int = READ_CHUNK_SIZE,
        stdin_marker: str = STDIN_MARKER,
    ) -> None:
        self.state = state if state is not None else RunState()
        self.writer = HeadWriter(streams.stdout())
        self.processor = FileProcessor(
            streams,
            LineReader(chunk_size),
            self.writer,
            self.state,
            stdin_marker=stdin_marker,
        )

    def run(self, config: RunConfig) -> int:
        """Process every input of ``config`` and return the exit status.

        With more than one input each body is preceded by a banner, and every
        banner after the first by a blank line.
        """
        limit = config.line_limit
        inputs = config.inputs

        if not inputs:
            self.processor.process_stdin(limit)
            return self.state.exit_status

        show_banners = len(inputs) > 1
        for index, name in enumerate(inputs):
            if show_banners and not self._write_header(index, name):
                LOGGER.debug("Skipping %s after header failure", name)
                continue
            self.processor.process_input(name, limit)

        return self.state.exit_status

    def _write_header(self, index: int, name: str) -> bool:
        try:
            if index > 0:
                self.writer.write_separator()
            self.writer.write_banner(name)
        except WriteError as error:
            report_failure(self.state, error)
            return False
        return True


__all__ = ["MultiFileRunner"]
