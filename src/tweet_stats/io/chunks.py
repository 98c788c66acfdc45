# tweet_stats/io/chunks.py
"""Bounded, whitespace-aligned chunk reading.

This is the only place chunk edges are aligned. Every chunk except possibly
the last ends on a whitespace byte, so no token is ever split between two
chunks.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from tweet_stats.errors import PartitionAlignmentError, ResourceExhaustionError

logger = logging.getLogger(__name__)

__all__ = ["WHITESPACE", "last_whitespace", "iter_chunks", "iter_file_chunks"]

# Same byte set bytes.split() treats as whitespace.
WHITESPACE = b" \t\n\r\x0b\x0c"


def last_whitespace(buf: bytes) -> int:
    """Index of the last whitespace byte in buf, or -1 if there is none."""
    return max(buf.rfind(bytes((c,))) for c in WHITESPACE)


def iter_chunks(stream: BinaryIO, chunk_bytes: int) -> Iterator[bytes]:
    """
    Yield consecutive chunks of at most chunk_bytes from a binary stream.

    The tail after the last whitespace of a full chunk is carried into the
    next read. A full chunk with no whitespace at all means a single token
    is larger than the memory budget; that raises PartitionAlignmentError.

    Raises
    ------
    ResourceExhaustionError
        If a chunk buffer cannot be allocated.
    """
    if chunk_bytes < 1:
        raise ValueError(f"chunk_bytes must be >= 1, got {chunk_bytes}")

    carry = b""
    offset = 0  # absolute offset of carry[0]
    chunks = 0

    while True:
        try:
            data = stream.read(chunk_bytes - len(carry))
            buf = carry + data if carry else data
        except MemoryError as exc:
            raise ResourceExhaustionError(chunk_bytes) from exc

        if not data:
            if buf:
                chunks += 1
                logger.debug("Chunk %d: %s bytes (final)", chunks, f"{len(buf):,}")
                yield buf
            return

        cut = last_whitespace(buf)
        if cut < 0:
            if len(buf) < chunk_bytes:
                # Short read; keep filling before deciding.
                carry = buf
                continue
            raise PartitionAlignmentError(
                f"No whitespace within a {chunk_bytes:,}-byte chunk; "
                "a token is longer than the chunk size",
                offset=offset,
            )

        chunk, carry = buf[: cut + 1], buf[cut + 1:]
        chunks += 1
        logger.debug("Chunk %d: %s bytes at offset %s",
                     chunks, f"{len(chunk):,}", f"{offset:,}")
        offset += len(chunk)
        yield chunk


def iter_file_chunks(path: Union[str, Path], chunk_bytes: int) -> Iterator[bytes]:
    """
    iter_chunks over a file opened in binary mode.

    The read size is capped at the file size so a small file never
    allocates a full chunk_bytes buffer.
    """
    p = Path(path)
    size = p.stat().st_size
    chunk_bytes = min(chunk_bytes, size + 1)
    with p.open("rb") as fh:
        yield from iter_chunks(fh, chunk_bytes)
