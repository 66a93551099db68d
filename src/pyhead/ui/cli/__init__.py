"""Command line interface package."""

from pyhead.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
