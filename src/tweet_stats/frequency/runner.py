# tweet_stats/frequency/runner.py
"""Fork-join tokenization of one in-memory chunk."""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import List, Optional, Type

from tweet_stats.frequency.counter import SharedCounter
from tweet_stats.frequency.worker import count_range, tokenize_range
from tweet_stats.parallel.partitioning import format_ranges_summary, partition_buffer
from tweet_stats.parallel.types import ByteRange

logger = logging.getLogger(__name__)

__all__ = ["ChunkResult", "process_chunk"]


@dataclass(frozen=True)
class ChunkResult:
    """Outcome of one chunk's fork-join round."""

    tokens: int
    ranges: List[ByteRange]


def process_chunk(
    chunk: bytes,
    counter: SharedCounter,
    *,
    workers: int,
    executor_class: Type = ThreadPoolExecutor,  # ThreadPoolExecutor | ProcessPoolExecutor
    max_token_bytes: Optional[int] = None,
) -> ChunkResult:
    """
    Partition chunk into `workers` ranges, tally them concurrently, and join.

    With threads, each worker merges straight into the shared counter. With
    processes, workers return their local tallies and the caller's thread
    merges them, since the counter cannot cross a process boundary.

    The call returns only after every worker has finished. The first worker
    failure (in source order) is logged with its range and re-raised; the
    counter may then hold a partial tally and must be discarded.
    """
    ranges = partition_buffer(chunk, workers, max_token_bytes=max_token_bytes)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(format_ranges_summary(ranges))

    use_processes = issubclass(executor_class, ProcessPoolExecutor)

    with executor_class(max_workers=workers) as executor:
        if use_processes:
            futures = {
                executor.submit(tokenize_range, r.slice(chunk)): r
                for r in ranges
                if not r.is_empty
            }
        else:
            futures = {
                executor.submit(count_range, chunk, r, counter): r
                for r in ranges
                if not r.is_empty
            }

        # Join barrier: nothing from this chunk is read until all are done.
        wait(futures)

    tokens = 0
    for fut, r in sorted(futures.items(), key=lambda kv: kv[1].index):
        try:
            result = fut.result()
        except Exception as exc:
            logger.error(
                "Worker %d failed on range %d-%d: %s", r.index, r.start, r.end, exc
            )
            raise
        if use_processes:
            counter.update(result)
            tokens += sum(result.values())
        else:
            tokens += result

    return ChunkResult(tokens=tokens, ranges=ranges)
