# tweet_stats/cli.py
"""Command line entry point: tweet-stats {median,words,all} RUN_DIR."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tweet_stats.config import MAX_DISTINCT, FrequencyConfig, MedianConfig, RunConfig
from tweet_stats.errors import TweetStatsError
from tweet_stats.pipeline.logger import setup_run_logging
from tweet_stats.pipeline.orchestrate import run_median_unique, run_words_tweeted

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tweet-stats",
        description="Word frequencies and running median of unique words per tweet.",
    )
    p.add_argument("command", choices=("median", "words", "all"),
                   help="median: ft2.txt, words: ft1.txt, all: both")
    p.add_argument("run_dir", type=Path,
                   help="Directory holding tweet_input/ and tweet_output/")
    p.add_argument("--workers", type=int, default=5,
                   help="Tokenizer workers per chunk (default: 5)")
    p.add_argument("--processes", action="store_true",
                   help="Use worker processes instead of threads")
    p.add_argument("--chunk-mb", type=int, default=2000,
                   help="Max chunk held in memory, in MB (default: 2000)")
    p.add_argument("--max-token-bytes", type=int, default=None,
                   help="Fail if a partition boundary must move further than this")
    p.add_argument("--max-distinct", type=int, default=MAX_DISTINCT,
                   help=f"Largest distinct-word count per tweet (default: {MAX_DISTINCT})")
    p.add_argument("--progress", action="store_true", help="Show progress bars")
    p.add_argument("--log-dir", type=Path, default=None,
                   help="Directory for the log file (default: RUN_DIR/logs)")
    p.add_argument("--no-log-file", action="store_true", help="Do not write a log file")
    p.add_argument("--log-console", action="store_true", help="Also log to stderr")
    p.add_argument("--rotate-logs", action="store_true",
                   help="Rotate the log file when it grows past --log-max-mb")
    p.add_argument("--log-max-mb", type=int, default=10,
                   help="Log size that triggers rotation, in MB (default: 10)")
    p.add_argument("--log-backups", type=int, default=3,
                   help="Rotated log files to keep (default: 3)")
    p.add_argument("--quiet", action="store_true", help="Suppress the stdout summary")
    p.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        run_config = RunConfig(
            run_dir=args.run_dir,
            log_dir=args.log_dir,
            log_to_file=not args.no_log_file,
            console_log=args.log_console,
            rotate_logs=args.rotate_logs,
            log_max_bytes=args.log_max_mb * 1024 * 1024,
            log_backup_count=args.log_backups,
        )
    except ValueError as exc:
        print(f"Invalid option: {exc}", file=sys.stderr)
        return 2
    if not run_config.input_path.is_file():
        print(f"Input file not found: {run_config.input_path}", file=sys.stderr)
        return 2

    if run_config.log_to_file or run_config.console_log:
        setup_run_logging(
            run_config,
            level=logging.DEBUG if args.verbose else logging.INFO,
            force=True,
        )

    try:
        median_config = MedianConfig(
            domain_size=args.max_distinct + 1, progress=args.progress
        )
        frequency_config = FrequencyConfig(
            num_workers=args.workers,
            use_threads=not args.processes,
            chunk_bytes=args.chunk_mb * 1_000_000,
            max_token_bytes=args.max_token_bytes,
            progress=args.progress,
        )
    except ValueError as exc:
        print(f"Invalid option: {exc}", file=sys.stderr)
        return 2

    verbose = not args.quiet
    try:
        if args.command in ("words", "all"):
            run_words_tweeted(run_config, frequency_config, verbose=verbose)
        if args.command in ("median", "all"):
            run_median_unique(run_config, median_config, verbose=verbose)
    except TweetStatsError as exc:
        logger.error("Run aborted: %s", exc)
        print(f"\033[31mRun aborted: {exc}\033[0m", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
