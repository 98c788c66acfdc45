# tweet_stats/median/pipeline.py
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from tqdm import tqdm

from tweet_stats.config import MedianConfig
from tweet_stats.errors import DomainError
from tweet_stats.io.sinks import ResultSink, format_median
from tweet_stats.median.tracker import MedianTracker
from tweet_stats.median.unique import count_unique_words

logger = logging.getLogger(__name__)

__all__ = ["iter_running_medians", "run_median_pipeline"]


def iter_running_medians(
    records: Iterable[Union[bytes, str]],
    tracker: Optional[MedianTracker] = None,
) -> Iterator[float]:
    """
    Yield the running median after each record, strictly in input order.

    A DomainError is re-raised with the offending record's index attached.
    """
    if tracker is None:
        tracker = MedianTracker()

    for index, record in enumerate(records):
        count = count_unique_words(record)
        try:
            median = tracker.observe(count)
        except DomainError as exc:
            logger.error("Record %d: %s", index, exc)
            raise DomainError(
                exc.value, exc.domain_size, record_index=index
            ) from exc
        yield median


def run_median_pipeline(
    records: Iterable[Union[bytes, str]],
    sink: ResultSink,
    config: Optional[MedianConfig] = None,
) -> int:
    """
    Write one formatted running median per record to sink.

    Single-threaded by necessity: the tracker state depends on record order.

    Returns:
        Number of records processed.
    """
    config = config or MedianConfig()
    tracker = MedianTracker(config.domain_size)

    stream = tqdm(
        records,
        desc="Records",
        unit="rec",
        ncols=100,
        disable=not config.progress,
    )
    processed = 0
    for median in iter_running_medians(stream, tracker):
        sink.write(format_median(median))
        processed += 1

    logger.info(
        "Median pipeline: %s records, final median %s",
        f"{processed:,}",
        "n/a" if tracker.median is None else format_median(tracker.median),
    )
    return processed
