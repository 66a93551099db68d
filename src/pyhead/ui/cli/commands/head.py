"""src/pyhead/ui/cli/commands/head.py
What: Wire argument parsing to the multi-file runner.
Why: Keep the CLI entry point free of stream and state plumbing.
"""

from collections.abc import Sequence
from typing import final

from pyhead.features.head import MultiFileRunner, RunState
from pyhead.features.head.usecases import StreamProviderPort
from pyhead.platform.streams import LocalStreamProvider
from pyhead.ui.cli.args import ArgumentParser


@final
class HeadCommand:
    """Parse arguments, then copy the leading lines of every input."""

    streams: StreamProviderPort
    state: RunState

    def __init__(self, streams: StreamProviderPort | None = None) -> None:
        """Initialize the command.

        Args:
            streams: Stream provider; the real filesystem when omitted.
        """
        self.streams = streams if streams is not None else LocalStreamProvider()
        self.state = RunState()

    def execute(self, args_list: Sequence[str] | None = None) -> int:
        """Run the command and return the process exit status."""

        config = ArgumentParser.process_args(args_list, self.state)
        if self.state.exit_failed:
            return self.state.exit_status

        return MultiFileRunner(self.streams, self.state).run(config)
