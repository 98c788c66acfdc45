"""
Parallel word-frequency counting over a line-oriented corpus.

Main entry point:
    run_frequency_pipeline() - chunks → partitions → workers → sorted table

Key components:
    - counter: lock-striped shared FrequencyTable and sorted emission
    - worker: tokenization of one byte range
    - runner: fork-join over the partitions of one chunk
    - pipeline: chunk loop and output
"""

from tweet_stats.frequency.counter import SharedCounter
from tweet_stats.frequency.worker import count_range, tokenize_range
from tweet_stats.frequency.runner import ChunkResult, process_chunk
from tweet_stats.frequency.pipeline import (
    FrequencyResult,
    count_tokens,
    run_frequency_pipeline,
)

__all__ = [
    "SharedCounter",
    "count_range",
    "tokenize_range",
    "ChunkResult",
    "process_chunk",
    "FrequencyResult",
    "count_tokens",
    "run_frequency_pipeline",
]
