# tweet_stats/io/sinks.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Protocol, TextIO, Union

from tweet_stats.config import DEFAULT_ENCODING_ERRORS, DEFAULT_TOKEN_WIDTH

logger = logging.getLogger(__name__)

__all__ = [
    "ResultSink",
    "FileSink",
    "ListSink",
    "format_median",
    "format_frequency_row",
]


def format_median(value: float) -> str:
    """
    Render a running median with two decimals.

    Examples:
        >>> format_median(3)
        '3.00'
        >>> format_median(2.5)
        '2.50'
    """
    return f"{value:.2f}"


def format_frequency_row(
    token: Union[bytes, str],
    count: int,
    width: int = DEFAULT_TOKEN_WIDTH,
    *,
    errors: str = DEFAULT_ENCODING_ERRORS,
) -> str:
    """
    Render one frequency-table row: token left-justified in width, then count.

    Byte tokens are decoded as UTF-8 here, at output time only. With the
    default "surrogateescape", invalid bytes survive as lone surrogates and
    are restored by a sink opened with the same errors handler. Tokens
    longer than width are written in full and push the count right.

    Examples:
        >>> format_frequency_row(b"abc", 2, width=6)
        'abc   2'
    """
    if isinstance(token, bytes):
        token = token.decode("utf-8", errors)
    return f"{token:<{width}}{count}"


class ResultSink(Protocol):
    def write(self, line: str) -> None: ...


class ListSink:
    """Collect output lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)


class FileSink:
    """
    Write one output line per call to a UTF-8 text file.

    Use as a context manager; the parent directory is created on open.
    Pass errors="surrogateescape" to write tokens that were not valid UTF-8
    back out as their original bytes.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.errors = errors
        self.lines_written = 0
        self._fh: Optional[TextIO] = None

    def __enter__(self) -> "FileSink":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open(
            "w", encoding=self.encoding, errors=self.errors, newline="\n"
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write(self, line: str) -> None:
        if self._fh is None:
            raise RuntimeError(f"FileSink for {self.path} is not open")
        self._fh.write(line)
        self._fh.write("\n")
        self.lines_written += 1

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None
            logger.info("Wrote %s lines to %s", f"{self.lines_written:,}", self.path)
