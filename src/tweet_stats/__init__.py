"""
Streaming statistics over a line-oriented tweet corpus.

Two independent pipelines:
    - median: running median of distinct words per record
    - frequency: parallel, chunked word-frequency table

Main entry points:
    run_median_pipeline(), run_frequency_pipeline() - core pipelines
    run_median_unique(), run_words_tweeted() - file-level runs
"""

from tweet_stats.config import MAX_DISTINCT, FrequencyConfig, MedianConfig, RunConfig
from tweet_stats.errors import (
    DomainError,
    PartitionAlignmentError,
    ResourceExhaustionError,
    TweetStatsError,
)
from tweet_stats.frequency import SharedCounter, run_frequency_pipeline
from tweet_stats.median import MedianTracker, count_unique_words, run_median_pipeline
from tweet_stats.pipeline import run_median_unique, run_words_tweeted

__all__ = [
    "MAX_DISTINCT",
    "MedianConfig",
    "FrequencyConfig",
    "RunConfig",
    "TweetStatsError",
    "DomainError",
    "PartitionAlignmentError",
    "ResourceExhaustionError",
    "MedianTracker",
    "count_unique_words",
    "run_median_pipeline",
    "SharedCounter",
    "run_frequency_pipeline",
    "run_median_unique",
    "run_words_tweeted",
]
