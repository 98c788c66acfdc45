# tweet_stats/pipeline/report.py
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from tweet_stats.utilities.display import format_bytes

logger = logging.getLogger(__name__)


def _abbrev(s: str, width: int = 80) -> str:
    """Return s truncated with an ellipsis if it exceeds width."""
    return s if len(s) <= width else (s[: max(0, width - 1)] + "…")


def format_run_summary(
    *,
    program: str,
    input_path: Path | str,
    output_path: Path | str,
    start_time: datetime,
    input_bytes: Optional[int] = None,
    workers: Optional[int] = None,
    executor_name: str = "threads",
    chunk_bytes: Optional[int] = None,
    domain_size: Optional[int] = None,
    color: bool = True,
) -> str:
    """
    Build a formatted, human-readable summary of the planned run.
    """
    heading = f"Start Time: {start_time:%Y-%m-%d %H:%M:%S}"
    if color:
        heading = f"\033[31m{heading}\033[0m"

    title = f"{program} Configuration"
    lines = [
        heading,
        f"\033[4m{title}\033[0m" if color else title,
        f"Input file:                 {_abbrev(str(input_path))}",
        f"Output file:                {_abbrev(str(output_path))}",
    ]

    if input_bytes is not None:
        lines.append(f"Input size:                 {format_bytes(input_bytes)}")
    if domain_size is not None:
        lines.append(f"Distinct-word domain:       0 to {domain_size - 1}")
    if chunk_bytes is not None:
        lines.append(f"Chunk size limit:           {format_bytes(chunk_bytes)}")
    if workers is not None:
        lines.append(f"Worker processes/threads:   {workers} ({executor_name})")

    return "\n".join(lines) + "\n"


def print_run_summary(**kwargs) -> None:
    """Print the run summary to stdout (CLI usage)."""
    print(format_run_summary(**kwargs), end="")


def log_run_summary(*, color: bool = False, **kwargs) -> None:
    """Log the run summary at INFO level (pipelines using logging)."""
    summary = format_run_summary(color=color, **kwargs)
    for line in summary.rstrip("\n").splitlines():
        logger.info(line)
