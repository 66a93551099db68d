"""
Summary: Report failures to the diagnostic stream and the run state.
Why: Every error is handled where it is detected, then the run continues.
"""

from __future__ import annotations

import logging

from ..domain import HeadError, RunState

LOGGER = logging.getLogger(__name__)


def report_failure(state: RunState, error: HeadError) -> None:
    """Log ``error`` as one diagnostic line and mark the run as failed."""

    state.mark_failed(error.kind)
    LOGGER.error("%s", error, extra={"head_error_kind": error.kind.value})


__all__ = ["report_failure"]
