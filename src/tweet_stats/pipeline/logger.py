# tweet_stats/pipeline/logger.py
from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from tweet_stats.config import RunConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def log_file_path(config: RunConfig, *, prefix: str = "tweet_stats") -> Path:
    """Timestamped log file under the run's log directory (not created)."""
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return config.resolved_log_dir.expanduser() / f"{prefix}_{ts}.log"


def _file_handler(path: Path, config: RunConfig) -> logging.Handler:
    if config.rotate_logs:
        return RotatingFileHandler(
            path,
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(path, mode="w", encoding="utf-8")


def setup_run_logging(
    config: RunConfig,
    *,
    level: int = logging.INFO,
    prefix: str = "tweet_stats",
    force: bool = False,
) -> Optional[Path]:
    """
    Configure root logging for one run.

    A file handler is attached when config.log_to_file is set, a rotating one
    when config.rotate_logs is also set; a stderr handler when
    config.console_log is set. With force, existing root handlers are removed
    first. Returns the log file path, or None when no file is written.
    """
    root = logging.getLogger()
    if force:
        for h in list(root.handlers):
            root.removeHandler(h)
    root.setLevel(level)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers = []
    log_path = None

    if config.log_to_file:
        log_path = log_file_path(config, prefix=prefix)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_file_handler(log_path, config))
    if config.console_log:
        handlers.append(logging.StreamHandler())

    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        root.addHandler(h)

    if log_path is not None:
        root.info("Logging to: %s", log_path)
        if config.rotate_logs:
            root.info(
                "Log rotation: %d bytes x %d backups",
                config.log_max_bytes,
                config.log_backup_count,
            )
    root.info("Run directory: %s", Path(config.run_dir).resolve())
    return log_path
