# io/__init__.py
"""Record sources, bounded chunk reading and result sinks."""

from .records import iter_records, iter_file_records
from .chunks import iter_chunks, iter_file_chunks, last_whitespace
from .sinks import (
    FileSink,
    ListSink,
    ResultSink,
    format_median,
    format_frequency_row,
)

__all__ = [
    # Record source
    "iter_records",
    "iter_file_records",
    # Bounded chunks
    "iter_chunks",
    "iter_file_chunks",
    "last_whitespace",
    # Sinks
    "ResultSink",
    "FileSink",
    "ListSink",
    "format_median",
    "format_frequency_row",
]
