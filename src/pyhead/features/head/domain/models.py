"""Summary: Run configuration and aggregate run state.
Why: Share one immutable config and one failure flag across the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from pyhead.config.settings import DEFAULT_LINE_LIMIT

from .errors import HeadErrorKind

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1


@dataclass(slots=True, frozen=True)
class RunConfig:
    """Parsed command line: line limit and ordered inputs."""

    line_limit: int = DEFAULT_LINE_LIMIT
    inputs: tuple[str, ...] = ()


@dataclass(slots=True)
class RunState:
    """Failure flag for one invocation; once set it is never cleared."""

    exit_failed: bool = False
    failures: list[HeadErrorKind] = field(default_factory=list)

    def mark_failed(self, kind: HeadErrorKind) -> None:
        self.exit_failed = True
        self.failures.append(kind)

    @property
    def exit_status(self) -> int:
        return EXIT_FAILURE if self.exit_failed else EXIT_SUCCESS


__all__ = ["EXIT_FAILURE", "EXIT_SUCCESS", "RunConfig", "RunState"]
