"""
Run orchestration for the tweet statistics programs.

Main entry points:
    run_median_unique() - running median of distinct words per tweet (ft2.txt)
    run_words_tweeted() - sorted word-frequency table (ft1.txt)
"""

from tweet_stats.pipeline.orchestrate import (
    RunResult,
    run_median_unique,
    run_words_tweeted,
)

__all__ = ["RunResult", "run_median_unique", "run_words_tweeted"]
