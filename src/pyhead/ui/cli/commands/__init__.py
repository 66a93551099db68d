"""Command execution package for CLI."""

from pyhead.ui.cli.commands.head import HeadCommand

__all__ = ["HeadCommand"]
