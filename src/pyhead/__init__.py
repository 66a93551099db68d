"""pyhead: print the first lines of files."""

__version__ = "0.1.0"
