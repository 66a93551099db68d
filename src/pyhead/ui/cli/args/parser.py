"""Command line argument parser."""

import argparse
import errno
import os
import sys
from collections.abc import Sequence
from typing import NoReturn, final

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from pyhead.config.config import Config
from pyhead.config.settings import DEFAULT_LINE_LIMIT, LINE_LIMIT_MAX, PROGRAM_NAME
from pyhead.features.head import InvalidArgumentError, RunConfig, RunState, report_failure
from pyhead.platform.logging import setup_logger

# Digits in LINE_LIMIT_MAX; longer values cannot fit even before int().
_LINE_LIMIT_MAX_DIGITS = len(str(LINE_LIMIT_MAX))


def split_option_tokens(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Normalize arguments the way getopt reads them.

    Everything after the first ``--`` is an operand. Before it, ``-n`` takes
    the rest of its token or the next token verbatim (even ``--`` or ``-x``)
    and is rewritten as ``-n=VALUE`` for argparse; any other token starting
    with ``-`` except ``-`` itself is an unknown option.

    Args:
        args: Raw command line arguments.

    Returns:
        tuple[list[str], list[str]]: Tokens for argparse and trailing operands.

    Raises:
        InvalidArgumentError: ``-n`` lacks a value or unknown options were given.
    """
    tokens: list[str] = []
    trailing: list[str] = []
    unrecognized: list[str] = []
    index = 0
    while index < len(args):
        arg = args[index]
        index += 1
        if arg == "--":
            trailing = list(args[index:])
            break
        if arg == "-" or not arg.startswith("-"):
            tokens.append(arg)
            continue
        if arg.startswith("-n"):
            value = arg[2:]
            if not value:
                if index >= len(args):
                    raise InvalidArgumentError("argument -n: expected one argument")
                value = args[index]
                index += 1
            tokens.append(f"-n={value}")
            continue
        unrecognized.append(arg)

    if unrecognized:
        raise InvalidArgumentError(f"unrecognized arguments: {' '.join(unrecognized)}")
    return tokens, trailing


class _RaisingArgumentParser(argparse.ArgumentParser):
    """``argparse`` parser that raises instead of exiting on bad input."""

    @override
    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(message)


def parse_line_count(text: str) -> int:
    """Parse the ``-n`` value as an unsigned 64-bit decimal integer.

    Args:
        text: Raw option value.

    Returns:
        int: The line limit.

    Raises:
        InvalidArgumentError: ``not a number`` for empty or non-digit text,
            ``out of range`` when the value exceeds ``2**64 - 1``.
    """
    if not text or not text.isascii() or not text.isdigit():
        raise InvalidArgumentError("not a number", text)

    significant = text.lstrip("0") or "0"
    if len(significant) > _LINE_LIMIT_MAX_DIGITS or int(significant) > LINE_LIMIT_MAX:
        raise InvalidArgumentError(
            "out of range",
            text,
            detail=os.strerror(errno.ERANGE),
        )
    return int(significant)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Parser accepting ``[-n count] [file ...]``.
        """
        parser = _RaisingArgumentParser(
            prog=PROGRAM_NAME,
            description="Print the first lines of each file.",
            usage="%(prog)s [-n count] [file ...]",
            add_help=False,
            allow_abbrev=False,
        )
        _ = parser.add_argument(
            "-n",
            dest="line_counts",
            action="append",
            default=None,
            metavar="count",
            help=f"Number of lines to print from each file (default: {DEFAULT_LINE_LIMIT})",
        )
        _ = parser.add_argument(
            "files",
            nargs="*",
            metavar="file",
            help="Files to read; standard input when none are given",
        )
        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None,
        state: RunState,
    ) -> RunConfig:
        """Process command line arguments.

        Every ``-n`` value is validated and each bad value reported; the last
        one wins. Failures mark ``state`` and the returned config must then be
        ignored.

        Args:
            args_list: List of command line arguments (for testing).
            state: Run state receiving parse failures.

        Returns:
            RunConfig: Parsed line limit and inputs.
        """
        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, program_name=PROGRAM_NAME)

        args = list(sys.argv[1:] if args_list is None else args_list)
        parser = ArgumentParser.create_parser()
        try:
            tokens, trailing = split_option_tokens(args)
            parsed_args = parser.parse_intermixed_args(tokens)
        except InvalidArgumentError as error:
            report_failure(state, error)
            return RunConfig()

        line_limit = DEFAULT_LINE_LIMIT
        for text in parsed_args.line_counts or ():
            try:
                line_limit = parse_line_count(text)
            except InvalidArgumentError as error:
                report_failure(state, error)

        return RunConfig(line_limit=line_limit, inputs=(*parsed_args.files, *trailing))
