# parallel/partitioning.py
"""Split an in-memory chunk into whitespace-aligned worker ranges."""

from __future__ import annotations

import re
from typing import List, Optional

from tweet_stats.errors import PartitionAlignmentError
from tweet_stats.parallel.types import ByteRange

__all__ = ["align_to_whitespace", "partition_buffer", "format_ranges_summary"]

_WHITESPACE_RE = re.compile(rb"[ \t\n\r\x0b\x0c]")


def align_to_whitespace(
    buffer: bytes,
    pos: int,
    *,
    max_token_bytes: Optional[int] = None,
) -> int:
    """
    Move pos forward to the nearest offset that does not split a token.

    An offset is a safe cut when it is 0, len(buffer), or either neighbouring
    byte is whitespace. Otherwise the cut moves to the next whitespace byte
    (or the end of the buffer).

    Args:
        buffer: Chunk being partitioned
        pos: Nominal cut position
        max_token_bytes: Largest distance the cut may move; None for no limit

    Returns:
        Aligned cut offset, >= pos

    Raises:
        PartitionAlignmentError: If the cut would have to move further than
            max_token_bytes.
    """
    size = len(buffer)
    if pos <= 0:
        return 0
    if pos >= size:
        return size
    if _WHITESPACE_RE.match(buffer, pos - 1, pos) or _WHITESPACE_RE.match(buffer, pos):
        return pos

    match = _WHITESPACE_RE.search(buffer, pos)
    aligned = match.start() if match else size

    if max_token_bytes is not None and aligned - pos > max_token_bytes:
        raise PartitionAlignmentError(
            f"Token crosses the cut by more than {max_token_bytes:,} bytes",
            offset=pos,
        )
    return aligned


def partition_buffer(
    buffer: bytes,
    num_partitions: int,
    *,
    max_token_bytes: Optional[int] = None,
) -> List[ByteRange]:
    """
    Divide buffer into num_partitions contiguous ranges in source order.

    Nominal cuts are placed at equal byte intervals and then pushed forward
    to the next whitespace. Every byte lands in exactly one range; a range
    is empty when a long token swallows its whole share.

    Args:
        buffer: Chunk to split
        num_partitions: Number of ranges to produce (one per worker)
        max_token_bytes: Passed to align_to_whitespace

    Returns:
        List of exactly num_partitions ByteRange objects

    Example:
        >>> [(r.start, r.end) for r in partition_buffer(b"aa bb cc dd", 2)]
        [(0, 5), (5, 11)]
    """
    if num_partitions < 1:
        raise ValueError(f"num_partitions must be >= 1, got {num_partitions}")

    size = len(buffer)
    ranges: List[ByteRange] = []
    start = 0

    for i in range(num_partitions):
        if i == num_partitions - 1:
            end = size
        else:
            nominal = (size * (i + 1)) // num_partitions
            end = max(
                start,
                align_to_whitespace(buffer, nominal, max_token_bytes=max_token_bytes),
            )
        ranges.append(ByteRange(index=i, start=start, end=end))
        start = end

    return ranges


def format_ranges_summary(ranges: List[ByteRange]) -> str:
    """
    Format a summary of worker ranges for display.

    Example:
        >>> print(format_ranges_summary(partition_buffer(b"aa bb cc dd", 2)))
        Created 2 partitions:
          part 0: 0 → 5 (5 bytes)
          part 1: 5 → 11 (6 bytes)
    """
    lines = [f"Created {len(ranges)} partitions:"]
    for r in ranges:
        lines.append(f"  part {r.index}: {r.start} → {r.end} ({len(r)} bytes)")
    return "\n".join(lines)
