# tweet_stats/median/tracker.py
"""Streaming median over a small bounded integer domain.

The sorted multiset of observed counts is kept as a histogram. Alongside it
the tracker remembers the current median value and the inclusive window
[lower, upper] of sorted ranks that hold that value. Each new observation
either leaves the median rank inside the window, moves it exactly one rank
past an edge (slide to the next non-empty bucket), or lands it half a rank
past an edge (report the average of the two neighbouring values and leave
the state alone).

Per observation this is O(1) amortized; sliding past empty buckets costs at
most O(domain_size).
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from tweet_stats.config import MAX_DISTINCT
from tweet_stats.errors import DomainError

logger = logging.getLogger(__name__)

__all__ = ["MedianTracker"]


class MedianTracker:
    """
    Running median of distinct-word counts, observed in corpus order.

    Args:
        domain_size: Number of histogram buckets. Valid counts are
            0 <= count < domain_size.

    Example:
        >>> t = MedianTracker()
        >>> [t.observe(c) for c in (3, 1, 4, 1, 5)]
        [3.0, 2.0, 3.0, 2.0, 3.0]
    """

    def __init__(self, domain_size: int = MAX_DISTINCT + 1) -> None:
        if domain_size < 1:
            raise ValueError(f"domain_size must be >= 1, got {domain_size}")
        self.domain_size = domain_size
        self._hist = np.zeros(domain_size, dtype=np.int64)

        # Zero-based index of the latest record; -1 before the first one.
        self._index = -1
        self._current = 0
        self._lower = 0
        self._upper = 0
        self._median: Optional[float] = None

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def records_seen(self) -> int:
        return self._index + 1

    @property
    def current_value(self) -> int:
        return self._current

    @property
    def bounds(self) -> Tuple[int, int]:
        """Inclusive window of sorted ranks holding current_value."""
        return self._lower, self._upper

    @property
    def median(self) -> Optional[float]:
        """Last reported median, None before the first observation."""
        return self._median

    def histogram(self) -> np.ndarray:
        return self._hist.copy()

    def __repr__(self) -> str:
        return (
            f"MedianTracker(records={self.records_seen}, value={self._current}, "
            f"bounds=({self._lower}, {self._upper}), median={self._median})"
        )

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def observe(self, count: int) -> float:
        """
        Add one record's distinct-word count and return the running median.

        Raises:
            DomainError: If count is outside [0, domain_size).
        """
        if not 0 <= count < self.domain_size:
            raise DomainError(count, self.domain_size)

        self._hist[count] += 1
        self._index += 1

        if self._index == 0:
            self._current = count
            self._lower = self._upper = 0
            self._median = float(count)
            return self._median

        # Ranks are compared doubled so the half-rank case stays integral:
        # twice_pos == 2 * (index / 2).
        twice_pos = self._index
        current = self._current

        if count < current:
            # Inserted below the window: every rank in it moves up by one.
            self._lower += 1
            self._upper += 1

            if twice_pos >= 2 * self._lower:
                median = float(current)
            elif twice_pos == 2 * (self._lower - 1):
                current = self._next_below(current)
                self._upper = self._lower - 1
                self._lower = self._upper - int(self._hist[current]) + 1
                self._current = current
                median = float(current)
            else:
                median = (current + self._next_below(current)) / 2

        elif count > current:
            if twice_pos <= 2 * self._upper:
                median = float(current)
            elif twice_pos == 2 * (self._upper + 1):
                current = self._next_above(current)
                self._lower = self._upper + 1
                self._upper = self._upper + int(self._hist[current])
                self._current = current
                median = float(current)
            else:
                median = (current + self._next_above(current)) / 2

        else:
            self._upper += 1
            median = float(current)

        self._median = median
        return median

    def _next_below(self, value: int) -> int:
        """Largest non-empty bucket strictly below value."""
        return int(np.flatnonzero(self._hist[:value])[-1])

    def _next_above(self, value: int) -> int:
        """Smallest non-empty bucket strictly above value."""
        return value + 1 + int(np.flatnonzero(self._hist[value + 1:])[0])
