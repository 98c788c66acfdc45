# tweet_stats/io/records.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

logger = logging.getLogger(__name__)

__all__ = ["iter_records", "iter_file_records"]


def iter_records(lines: Iterable[bytes]) -> Iterator[bytes]:
    """
    Yield one record per input line with the line terminator removed.

    Works on any iterable of byte lines (an open binary file, a list in
    tests). A final line without a trailing newline is still a record; a
    trailing newline does not produce an extra empty record.
    """
    for raw in lines:
        yield raw.rstrip(b"\r\n")


def iter_file_records(path: Union[str, Path]) -> Iterator[bytes]:
    """Lazily read records from a file; restart by calling again."""
    p = Path(path)
    logger.debug("Reading records from %s", p)
    with p.open("rb") as fh:
        yield from iter_records(fh)

