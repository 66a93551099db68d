"""Summary: Head feature exports for reading leading lines of inputs.
Why: Offer a stable import path for the CLI and tests.
"""

from .domain import (
    CloseError,
    HeadError,
    HeadErrorKind,
    InvalidArgumentError,
    OpenError,
    ReadError,
    RunConfig,
    RunState,
    WriteError,
)
from .usecases import (
    FileProcessor,
    HeadWriter,
    LineReader,
    MultiFileRunner,
    report_failure,
)

__all__ = [
    "CloseError",
    "FileProcessor",
    "HeadError",
    "HeadErrorKind",
    "HeadWriter",
    "InvalidArgumentError",
    "LineReader",
    "MultiFileRunner",
    "OpenError",
    "ReadError",
    "RunConfig",
    "RunState",
    "WriteError",
    "report_failure",
]
