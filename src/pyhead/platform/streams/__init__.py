"""Byte stream adapters backed by the local filesystem and process streams."""

from .local import BinaryOutputStream, FileInputStream, LocalStreamProvider

__all__ = ["BinaryOutputStream", "FileInputStream", "LocalStreamProvider"]
