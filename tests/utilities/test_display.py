# tests/utilities/test_display.py
from datetime import timedelta

from tweet_stats.utilities.display import format_bytes, format_duration_ms


def test_format_bytes_units():
    assert format_bytes(512) == "512.00 B"
    assert format_bytes(1024) == "1.00 KB"
    assert format_bytes(3 * 1024 * 1024) == "3.00 MB"
    assert format_bytes(2_000_000_000) == "1.86 GB"


def test_format_duration_ms():
    assert format_duration_ms(timedelta(milliseconds=250)) == "250 ms"
    assert format_duration_ms(timedelta(seconds=12.3456)) == "12,345 ms"
