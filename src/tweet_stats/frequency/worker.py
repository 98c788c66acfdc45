# tweet_stats/frequency/worker.py
from __future__ import annotations

import logging
import threading
from collections import Counter

from tweet_stats.frequency.counter import SharedCounter
from tweet_stats.parallel.types import ByteRange

logger = logging.getLogger(__name__)

__all__ = ["tokenize_range", "count_range"]


def tokenize_range(data: bytes) -> Counter:
    """
    Tally the whitespace-delimited tokens of one byte range.

    Tokens stay raw bytes: two byte-distinct tokens are always separate
    keys, even when neither is valid UTF-8. Pure function; safe in threads
    or processes.
    """
    return Counter(data.split())


def count_range(
    buffer: bytes,
    byte_range: ByteRange,
    counter: SharedCounter,
) -> int:
    """
    Tokenize byte_range of buffer and merge its tally into counter.

    Returns:
        Number of tokens seen in the range.
    """
    if byte_range.is_empty:
        return 0

    local = tokenize_range(byte_range.slice(buffer))
    counter.update(local)
    tokens = sum(local.values())

    logger.debug(
        "Worker %s (%s): range %d-%d, %s tokens, %s distinct",
        byte_range.index,
        threading.current_thread().name,
        byte_range.start,
        byte_range.end,
        f"{tokens:,}",
        f"{len(local):,}",
    )
    return tokens
