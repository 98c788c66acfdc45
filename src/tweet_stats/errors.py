# tweet_stats/errors.py
"""Error taxonomy for the tweet statistics pipelines.

Every error here is fatal to a run: the drivers abort on the first one and
never emit partial results.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "TweetStatsError",
    "DomainError",
    "PartitionAlignmentError",
    "ResourceExhaustionError",
]


class TweetStatsError(Exception):
    """Base class for all pipeline failures."""


class DomainError(TweetStatsError, ValueError):
    """A distinct-word count fell outside the tracker's histogram domain."""

    def __init__(
        self,
        value: int,
        domain_size: int,
        *,
        record_index: Optional[int] = None,
    ) -> None:
        self.value = value
        self.domain_size = domain_size
        self.record_index = record_index
        where = f" at record {record_index}" if record_index is not None else ""
        super().__init__(
            f"Distinct-word count {value}{where} is outside the domain "
            f"[0, {domain_size})"
        )


class PartitionAlignmentError(TweetStatsError):
    """A chunk or worker boundary could not be aligned on whitespace."""

    def __init__(self, message: str, *, offset: Optional[int] = None) -> None:
        self.offset = offset
        if offset is not None:
            message = f"{message} (offset {offset:,})"
        super().__init__(message)


class ResourceExhaustionError(TweetStatsError):
    """An in-memory chunk of the requested size could not be allocated."""

    def __init__(self, requested_bytes: int) -> None:
        self.requested_bytes = requested_bytes
        super().__init__(
            f"Could not allocate a {requested_bytes:,}-byte chunk; "
            "lower chunk_bytes and rerun"
        )
