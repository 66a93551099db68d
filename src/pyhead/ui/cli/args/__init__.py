"""Command line argument handling package."""

from pyhead.ui.cli.args.parser import ArgumentParser, parse_line_count, split_option_tokens

__all__ = ["ArgumentParser", "parse_line_count", "split_option_tokens"]
