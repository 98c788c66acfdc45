# tweet_stats/pipeline/orchestrate.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterator, Optional

from setproctitle import setproctitle

from tweet_stats.config import FrequencyConfig, MedianConfig, RunConfig
from tweet_stats.frequency.pipeline import run_frequency_pipeline
from tweet_stats.io.chunks import iter_file_chunks
from tweet_stats.io.records import iter_file_records
from tweet_stats.io.sinks import FileSink
from tweet_stats.median.pipeline import run_median_pipeline
from tweet_stats.pipeline.report import log_run_summary, print_run_summary
from tweet_stats.utilities.display import format_duration_ms

logger = logging.getLogger(__name__)

__all__ = ["RunResult", "run_median_unique", "run_words_tweeted"]


@dataclass(frozen=True)
class RunResult:
    program: str
    output_path: Path
    items: int  # records for the median run, tokens for the word count
    distinct: Optional[int]
    elapsed: timedelta


def _require_input(path: Path) -> int:
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.stat().st_size


@contextmanager
def _output_sink(path: Path, *, errors: str = "strict") -> Iterator[FileSink]:
    """Open a FileSink; remove the file again if the run fails."""
    try:
        with FileSink(path, errors=errors) as sink:
            yield sink
    except BaseException:
        logger.error("Run failed; removing partial output %s", path)
        path.unlink(missing_ok=True)
        raise


def _report_completion(result: RunResult, *, verbose: bool) -> None:
    logger.info(
        "%s finished in %s: %s items -> %s",
        result.program,
        format_duration_ms(result.elapsed),
        f"{result.items:,}",
        result.output_path,
    )
    if not verbose:
        return
    print("\033[32m\nProcessing completed!\033[0m")
    print(f"Items processed: {result.items:,}")
    if result.distinct is not None:
        print(f"Distinct words: {result.distinct:,}")
    print(f"Output: {result.output_path}")
    print(f"\033[34mexecution time in ms: {int(result.elapsed.total_seconds() * 1000)}\033[0m")


def run_median_unique(
    config: RunConfig,
    median_config: Optional[MedianConfig] = None,
    *,
    verbose: bool = True,
) -> RunResult:
    """
    Write the running median of distinct words per tweet, one line per tweet.

    Process
    -------
    1. Check the input file and print a run summary
    2. Stream records through the median pipeline into the output file
    3. Report elapsed time; on failure the partial output is removed
    """
    setproctitle("tws:median")
    median_config = median_config or MedianConfig()
    start_time = datetime.now()

    input_bytes = _require_input(config.input_path)
    summary = dict(
        program="Median Unique Words",
        input_path=config.input_path,
        output_path=config.median_output_path,
        start_time=start_time,
        input_bytes=input_bytes,
        domain_size=median_config.domain_size,
    )
    if verbose:
        print_run_summary(**summary)
    log_run_summary(**summary)

    with _output_sink(config.median_output_path) as sink:
        records = run_median_pipeline(
            iter_file_records(config.input_path), sink, median_config
        )

    result = RunResult(
        program="median_unique",
        output_path=config.median_output_path,
        items=records,
        distinct=None,
        elapsed=datetime.now() - start_time,
    )
    _report_completion(result, verbose=verbose)
    return result


def run_words_tweeted(
    config: RunConfig,
    frequency_config: Optional[FrequencyConfig] = None,
    *,
    verbose: bool = True,
) -> RunResult:
    """
    Write the sorted frequency table of every word in the corpus.

    Process
    -------
    1. Check the input file and print a run summary
    2. Read bounded chunks, tally each with parallel workers
    3. Write the sorted table once; on failure the partial output is removed
    """
    setproctitle("tws:words")
    frequency_config = frequency_config or FrequencyConfig()
    start_time = datetime.now()

    input_bytes = _require_input(config.input_path)
    summary = dict(
        program="Words Tweeted",
        input_path=config.input_path,
        output_path=config.words_output_path,
        start_time=start_time,
        input_bytes=input_bytes,
        workers=frequency_config.num_workers,
        executor_name="threads" if frequency_config.use_threads else "processes",
        chunk_bytes=frequency_config.chunk_bytes,
    )
    if verbose:
        print_run_summary(**summary)
    log_run_summary(**summary)

    chunks = iter_file_chunks(config.input_path, frequency_config.chunk_bytes)
    with _output_sink(
        config.words_output_path, errors=frequency_config.encoding_errors
    ) as sink:
        freq = run_frequency_pipeline(chunks, sink, frequency_config)

    result = RunResult(
        program="words_tweeted",
        output_path=config.words_output_path,
        items=freq.tokens,
        distinct=freq.distinct,
        elapsed=datetime.now() - start_time,
    )
    _report_completion(result, verbose=verbose)
    return result
