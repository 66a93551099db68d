"""Summary: Use cases that copy the leading lines of each input.
Why: Group reader, writer and runners behind one package import.
"""

from .diagnostics import report_failure
from .file_processor import FileProcessor
from .head_writer import HeadWriter
from .line_reader import LineReader
from .multi_file_runner import MultiFileRunner
from .ports import InputStreamPort, OutputStreamPort, StreamProviderPort

__all__ = [
    "FileProcessor",
    "HeadWriter",
    "InputStreamPort",
    "LineReader",
    "MultiFileRunner",
    "OutputStreamPort",
    "StreamProviderPort",
    "report_failure",
]
