# tweet_stats/frequency/counter.py
"""Concurrent token → count table shared by all tokenizer workers.

Tokens are kept as raw bytes so equality is byte-exact; decoding happens
only when a row is formatted for output.

Keys are spread over a fixed number of stripes, each a plain dict guarded by
its own lock. Insert-or-increment on one key is atomic; keys on different
stripes update without contending.
"""

from __future__ import annotations

import threading
from collections import defaultdict
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

__all__ = ["SharedCounter", "DEFAULT_STRIPES"]

DEFAULT_STRIPES = 64


class SharedCounter:
    """
    Thread-safe frequency table scoped to one pipeline run.

    Args:
        num_stripes: Number of independently locked shards.

    Example:
        >>> c = SharedCounter()
        >>> c.increment(b"a"); c.increment(b"b"); c.increment(b"a")
        >>> c.sorted_items()
        [(b'a', 2), (b'b', 1)]
    """

    def __init__(self, num_stripes: int = DEFAULT_STRIPES) -> None:
        if num_stripes < 1:
            raise ValueError(f"num_stripes must be >= 1, got {num_stripes}")
        self._locks = [threading.Lock() for _ in range(num_stripes)]
        self._tables: List[Dict[bytes, int]] = [{} for _ in range(num_stripes)]

    def _stripe(self, token: bytes) -> int:
        return hash(token) % len(self._locks)

    def increment(self, token: bytes, n: int = 1) -> None:
        """Insert token with count n, or add n to its existing count."""
        i = self._stripe(token)
        with self._locks[i]:
            table = self._tables[i]
            table[token] = table.get(token, 0) + n

    def update(self, counts: Mapping[bytes, int]) -> None:
        """Merge a local tally, taking each stripe lock once."""
        grouped: Dict[int, List[Tuple[bytes, int]]] = defaultdict(list)
        for token, n in counts.items():
            grouped[self._stripe(token)].append((token, n))

        for i, items in grouped.items():
            with self._locks[i]:
                table = self._tables[i]
                for token, n in items:
                    table[token] = table.get(token, 0) + n

    def get(self, token: bytes, default: Optional[int] = None) -> Optional[int]:
        i = self._stripe(token)
        with self._locks[i]:
            return self._tables[i].get(token, default)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, bytes) and self.get(token) is not None

    def __len__(self) -> int:
        return sum(len(t) for t in self._tables)

    def total(self) -> int:
        """Sum of all counts (total tokens tallied)."""
        return sum(sum(t.values()) for t in self._tables)

    def snapshot(self) -> Dict[bytes, int]:
        """Plain-dict copy of the table."""
        merged: Dict[bytes, int] = {}
        for lock, table in zip(self._locks, self._tables):
            with lock:
                merged.update(table)
        return merged

    def sorted_items(self) -> List[Tuple[bytes, int]]:
        """(token, count) pairs in byte order, independent of locale.

        For valid UTF-8, byte order equals codepoint order.
        """
        return sorted(self.snapshot().items())

    def __iter__(self) -> Iterator[bytes]:
        return iter(sorted(self.snapshot()))
