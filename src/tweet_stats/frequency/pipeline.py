# tweet_stats/frequency/pipeline.py
from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Optional

from tqdm import tqdm

from tweet_stats.config import FrequencyConfig
from tweet_stats.frequency.counter import SharedCounter
from tweet_stats.frequency.runner import process_chunk
from tweet_stats.io.sinks import ResultSink, format_frequency_row

logger = logging.getLogger(__name__)

__all__ = ["FrequencyResult", "count_tokens", "run_frequency_pipeline"]


@dataclass(frozen=True)
class FrequencyResult:
    chunks: int
    tokens: int
    distinct: int


def count_tokens(
    chunks: Iterable[bytes],
    config: Optional[FrequencyConfig] = None,
    counter: Optional[SharedCounter] = None,
) -> SharedCounter:
    """
    Tally every chunk into one run-scoped counter and return it.

    Chunks are processed one at a time; each is fully joined before the
    next is partitioned.
    """
    config = config or FrequencyConfig()
    counter = counter if counter is not None else SharedCounter()
    executor_class = ThreadPoolExecutor if config.use_threads else ProcessPoolExecutor

    for n, chunk in enumerate(
        tqdm(chunks, desc="Chunks", unit="chunk", ncols=100, disable=not config.progress),
        start=1,
    ):
        result = process_chunk(
            chunk,
            counter,
            workers=config.num_workers,
            executor_class=executor_class,
            max_token_bytes=config.max_token_bytes,
        )
        logger.info(
            "Chunk %d: %s bytes, %s tokens, table size %s",
            n,
            f"{len(chunk):,}",
            f"{result.tokens:,}",
            f"{len(counter):,}",
        )

    return counter


def run_frequency_pipeline(
    chunks: Iterable[bytes],
    sink: ResultSink,
    config: Optional[FrequencyConfig] = None,
) -> FrequencyResult:
    """
    Count tokens across all chunks, then write the sorted table to sink once.

    Nothing is written until every chunk has been tallied.
    """
    config = config or FrequencyConfig()
    counter = SharedCounter()

    chunk_count = 0

    def _counted(it: Iterable[bytes]) -> Iterable[bytes]:
        nonlocal chunk_count
        for chunk in it:
            chunk_count += 1
            yield chunk

    count_tokens(_counted(chunks), config, counter)

    items = counter.sorted_items()
    for token, n in items:
        sink.write(
            format_frequency_row(token, n, config.token_width, errors=config.encoding_errors)
        )

    result = FrequencyResult(
        chunks=chunk_count,
        tokens=sum(n for _, n in items),
        distinct=len(items),
    )
    logger.info(
        "Frequency pipeline: %d chunks, %s tokens, %s distinct",
        result.chunks,
        f"{result.tokens:,}",
        f"{result.distinct:,}",
    )
    return result
