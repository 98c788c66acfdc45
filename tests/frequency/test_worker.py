# tests/frequency/test_worker.py
import logging

from tweet_stats.frequency.counter import SharedCounter
from tweet_stats.frequency.worker import count_range, tokenize_range
from tweet_stats.parallel.types import ByteRange


def test_tokenize_splits_on_spaces_and_newlines():
    tally = tokenize_range(b"a a b\nb c\n")
    assert dict(tally) == {b"a": 2, b"b": 2, b"c": 1}


def test_tokenize_ignores_runs_of_whitespace():
    tally = tokenize_range(b"  a \t\t a\r\n\n b  ")
    assert dict(tally) == {b"a": 2, b"b": 1}


def test_tokenize_keeps_utf8_bytes():
    tally = tokenize_range("naïve café naïve".encode("utf-8"))
    assert tally["naïve".encode("utf-8")] == 2
    assert tally["café".encode("utf-8")] == 1


def test_distinct_invalid_utf8_tokens_are_not_merged():
    tally = tokenize_range(b"ok \xff \xfe \xff\n")
    assert tally[b"ok"] == 1
    assert tally[b"\xff"] == 2
    assert tally[b"\xfe"] == 1
    assert len(tally) == 3


def test_count_range_merges_into_counter(caplog):
    caplog.set_level(logging.DEBUG, logger="tweet_stats.frequency.worker")
    buf = b"x y x | z z z"
    counter = SharedCounter()
    n = count_range(buf, ByteRange(index=0, start=0, end=5), counter)
    assert n == 3
    assert counter.snapshot() == {b"x": 2, b"y": 1}
    n = count_range(buf, ByteRange(index=1, start=5, end=len(buf)), counter)
    assert n == 4
    assert counter.get(b"z") == 3
    assert counter.get(b"|") == 1
    assert any("Worker 1" in r.getMessage() for r in caplog.records)


def test_count_range_empty_range_is_noop():
    counter = SharedCounter()
    assert count_range(b"abc", ByteRange(index=0, start=2, end=2), counter) == 0
    assert len(counter) == 0
