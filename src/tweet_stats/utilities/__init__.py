# utilities/__init__.py
"""Display helpers for run summaries."""

from .display import format_bytes, format_duration_ms

__all__ = [
    "format_bytes",
    "format_duration_ms",
]
