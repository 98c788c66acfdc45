# parallel/types.py
"""Shared types for parallel processing."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ByteRange"]


@dataclass(frozen=True)
class ByteRange:
    """A half-open slice [start, end) of a chunk assigned to one worker."""

    index: int
    """Position of this range in source order"""

    start: int
    """First byte offset (inclusive)"""

    end: int
    """Last byte offset (exclusive)"""

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def slice(self, buffer: bytes) -> bytes:
        return buffer[self.start:self.end]
