"""Decoder for scanned seven-segment bank account numbers."""

from ._version import __version__
from .checksum import alternate_digits, find_adjacent, is_checksum_valid
from .config import Settings, configure_logging
from .input_handler import FileLineSource, iter_stream_lines, iter_text_lines
from .interfaces import LineSource, ResultSink
from .models import (
    BadChecksum,
    BadDigits,
    EntryBadDigits,
    EntryError,
    EntryIncomplete,
    EntryResult,
    EntrySuccess,
    InvalidCharacter,
    LineStatus,
    ParseError,
    Success,
)
from .parser import LineParser
from .pipeline import Processor, process_lines
from .register import EntryRegister
from .report import JsonlReportSink, TextReportSink, format_result, write_results
from .segments import ILLEGIBLE, close_matches, decode, encode, render

__all__ = [
    "BadChecksum",
    "BadDigits",
    "EntryBadDigits",
    "EntryError",
    "EntryIncomplete",
    "EntryRegister",
    "EntryResult",
    "EntrySuccess",
    "FileLineSource",
    "ILLEGIBLE",
    "InvalidCharacter",
    "JsonlReportSink",
    "LineParser",
    "LineSource",
    "LineStatus",
    "ParseError",
    "Processor",
    "ResultSink",
    "Settings",
    "Success",
    "TextReportSink",
    "__version__",
    "alternate_digits",
    "close_matches",
    "configure_logging",
    "decode",
    "encode",
    "find_adjacent",
    "format_result",
    "is_checksum_valid",
    "iter_stream_lines",
    "iter_text_lines",
    "process_lines",
    "render",
    "write_results",
]
