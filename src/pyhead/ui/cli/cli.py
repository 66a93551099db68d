"""Command line interface for pyhead."""

from collections.abc import Sequence
from typing import final

from pyhead.features.head.domain.models import EXIT_FAILURE
from pyhead.platform.logging import logger
from pyhead.ui.cli.commands import HeadCommand

EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            return HeadCommand().execute(args_list)
        except KeyboardInterrupt:
            logger.warning("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return EXIT_FAILURE


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()
