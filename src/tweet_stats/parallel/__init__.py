# parallel/__init__.py
"""Whitespace-aligned partitioning of in-memory chunks."""

from .types import ByteRange
from .partitioning import partition_buffer, align_to_whitespace, format_ranges_summary

__all__ = [
    "ByteRange",
    "partition_buffer",
    "align_to_whitespace",
    "format_ranges_summary",
]
