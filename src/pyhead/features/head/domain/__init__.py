"""Domain types for the head feature."""

from .errors import (
    CloseError,
    HeadError,
    HeadErrorKind,
    InvalidArgumentError,
    OpenError,
    ReadError,
    WriteError,
)
from .models import RunConfig, RunState

__all__ = [
    "CloseError",
    "HeadError",
    "HeadErrorKind",
    "InvalidArgumentError",
    "OpenError",
    "ReadError",
    "RunConfig",
    "RunState",
    "WriteError",
]
