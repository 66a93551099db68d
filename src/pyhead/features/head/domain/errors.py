"""Summary: Error kinds raised while parsing arguments and copying lines.
Why: Give every failure a kind, an operation and a target for diagnostics.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class HeadErrorKind(str, Enum):
    """Represent the categories of failure a run can record."""

    INVALID_ARGUMENT = "invalid_argument"
    OPEN = "open"
    READ = "read"
    WRITE = "write"
    CLOSE = "close"


class HeadError(Exception):
    """Base failure carrying the operation, its target and the reason.

    Rendered as ``operation: target: reason`` with absent parts omitted.
    """

    kind: ClassVar[HeadErrorKind]

    operation: str
    target: str | None
    cause: OSError | None
    detail: str | None

    def __init__(
        self,
        operation: str,
        target: str | None = None,
        *,
        cause: OSError | None = None,
        detail: str | None = None,
    ) -> None:
        self.operation = operation
        self.target = target
        self.cause = cause
        self.detail = detail
        super().__init__(self._render())

    @property
    def reason(self) -> str | None:
        """Human readable reason, preferring the OS error description."""

        if self.cause is not None:
            return self.cause.strerror or str(self.cause)
        return self.detail

    def _render(self) -> str:
        parts = [self.operation]
        if self.target is not None:
            parts.append(self.target)
        reason = self.reason
        if reason:
            parts.append(reason)
        return ": ".join(parts)


class InvalidArgumentError(HeadError):
    kind = HeadErrorKind.INVALID_ARGUMENT


class OpenError(HeadError):
    kind = HeadErrorKind.OPEN


class ReadError(HeadError):
    kind = HeadErrorKind.READ


class WriteError(HeadError):
    kind = HeadErrorKind.WRITE


class CloseError(HeadError):
    kind = HeadErrorKind.CLOSE


__all__ = [
    "CloseError",
    "HeadError",
    "HeadErrorKind",
    "InvalidArgumentError",
    "OpenError",
    "ReadError",
    "WriteError",
]
