# utilities/display.py
"""Display formatting shared by the run summaries."""

from datetime import timedelta

__all__ = ["format_bytes", "format_duration_ms"]


def format_bytes(num_bytes: int) -> str:
    """Convert bytes to human-readable format.

    Examples:
        >>> format_bytes(1024)
        '1.00 KB'
        >>> format_bytes(2_000_000_000)
        '1.86 GB'
    """
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if abs(num_bytes) < 1024.0:
            return f"{num_bytes:.2f} {unit}"
        num_bytes /= 1024.0
    return f"{num_bytes:.2f} PB"


def format_duration_ms(elapsed: timedelta) -> str:
    """
    Examples:
        >>> format_duration_ms(timedelta(seconds=1.5))
        '1,500 ms'
    """
    return f"{int(elapsed.total_seconds() * 1000):,} ms"

