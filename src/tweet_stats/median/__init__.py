# median/__init__.py
"""Running median of distinct words per record."""

from .unique import count_unique_words
from .tracker import MedianTracker
from .pipeline import iter_running_medians, run_median_pipeline

__all__ = [
    "count_unique_words",
    "MedianTracker",
    "iter_running_medians",
    "run_median_pipeline",
]
