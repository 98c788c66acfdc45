# tweet_stats/config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

__all__ = [
    "MAX_DISTINCT",
    "DEFAULT_TOKEN_WIDTH",
    "DEFAULT_ENCODING_ERRORS",
    "MedianConfig",
    "FrequencyConfig",
    "RunConfig",
]

# A 140-character record holds at most 70 single-character tokens.
MAX_DISTINCT = 70

DEFAULT_TOKEN_WIDTH = 30

# Invalid UTF-8 in a token round-trips to the output file unchanged.
DEFAULT_ENCODING_ERRORS = "surrogateescape"


# Running-median options
@dataclass(frozen=True)
class MedianConfig:
    domain_size: int = MAX_DISTINCT + 1  # histogram buckets, counts 0..domain_size-1
    progress: bool = False

    def __post_init__(self) -> None:
        if self.domain_size < 1:
            raise ValueError(f"domain_size must be >= 1, got {self.domain_size}")


# Word-frequency options
@dataclass(frozen=True)
class FrequencyConfig:
    """Parallel token-frequency configuration.

    chunk_bytes bounds how much of the corpus is held in memory at once;
    lower it if a run fails with ResourceExhaustionError.
    """
    # Parallelism
    num_workers: int = 5
    use_threads: bool = True

    # Memory budget
    chunk_bytes: int = 2_000 * 1_000_000
    max_token_bytes: Optional[int] = None  # None: no limit on how far a boundary may move

    # Output
    token_width: int = DEFAULT_TOKEN_WIDTH
    encoding_errors: str = DEFAULT_ENCODING_ERRORS  # decode and file-write handler

    progress: bool = False

    def __post_init__(self) -> None:
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}")
        if self.chunk_bytes < 1:
            raise ValueError(f"chunk_bytes must be >= 1, got {self.chunk_bytes}")
        if self.max_token_bytes is not None and self.max_token_bytes < 1:
            raise ValueError(
                f"max_token_bytes must be >= 1 or None, got {self.max_token_bytes}"
            )
        if self.token_width < 0:
            raise ValueError(f"token_width must be >= 0, got {self.token_width}")


# File locations for one run
@dataclass(frozen=True)
class RunConfig:
    run_dir: Path
    input_name: str = "tweet_input/tweets.txt"
    words_output_name: str = "tweet_output/ft1.txt"
    median_output_name: str = "tweet_output/ft2.txt"

    # Logging
    log_dir: Optional[Union[str, Path]] = None  # None: run_dir/logs
    log_to_file: bool = True
    console_log: bool = False
    rotate_logs: bool = False
    log_max_bytes: int = 10 * 1024 * 1024
    log_backup_count: int = 3

    def __post_init__(self) -> None:
        if self.log_max_bytes < 1:
            raise ValueError(f"log_max_bytes must be >= 1, got {self.log_max_bytes}")
        if self.log_backup_count < 0:
            raise ValueError(
                f"log_backup_count must be >= 0, got {self.log_backup_count}"
            )

    @property
    def input_path(self) -> Path:
        return Path(self.run_dir) / self.input_name

    @property
    def words_output_path(self) -> Path:
        return Path(self.run_dir) / self.words_output_name

    @property
    def median_output_path(self) -> Path:
        return Path(self.run_dir) / self.median_output_name

    @property
    def resolved_log_dir(self) -> Path:
        if self.log_dir is not None:
            return Path(self.log_dir)
        return Path(self.run_dir) / "logs"
