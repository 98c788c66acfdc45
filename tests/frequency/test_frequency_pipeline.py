# tests/frequency/test_frequency_pipeline.py
import io

import pytest

from tweet_stats.config import FrequencyConfig
from tweet_stats.errors import PartitionAlignmentError
from tweet_stats.frequency.pipeline import count_tokens, run_frequency_pipeline
from tweet_stats.io.chunks import iter_chunks
from tweet_stats.io.sinks import ListSink


def test_small_scenario_sorted_table():
    sink = ListSink()
    result = run_frequency_pipeline([b"a a b\nb c\n"], sink, FrequencyConfig(num_workers=2))
    assert sink.lines == [
        "a" + " " * 29 + "2",
        "b" + " " * 29 + "2",
        "c" + " " * 29 + "1",
    ]
    assert (result.chunks, result.tokens, result.distinct) == (1, 5, 3)


def test_table_accumulates_across_chunks_and_is_emitted_once():
    data = b"b a\nc a\nb b\n" * 20
    chunks = list(iter_chunks(io.BytesIO(data), chunk_bytes=7))
    assert len(chunks) > 1

    sink = ListSink()
    result = run_frequency_pipeline(chunks, sink, FrequencyConfig(num_workers=3, token_width=2))
    assert sink.lines == ["a 40", "b 60", "c 20"]
    assert result.chunks == len(chunks)
    assert result.tokens == len(data.split())


@pytest.mark.parametrize("workers", [1, 2, 3, 5, 8])
@pytest.mark.parametrize("chunk_bytes", [16, 64, 10_000])
def test_totals_independent_of_workers_and_chunking(workers, chunk_bytes):
    lines = [f"w{i % 7} w{i % 3} #t{i % 5} w{i % 7}" for i in range(60)]
    data = ("\n".join(lines) + "\n").encode()
    config = FrequencyConfig(num_workers=workers, chunk_bytes=chunk_bytes)

    counter = count_tokens(iter_chunks(io.BytesIO(data), chunk_bytes), config)
    baseline = count_tokens([data], FrequencyConfig(num_workers=1))

    assert counter.total() == len(data.split())
    assert counter.sorted_items() == baseline.sorted_items()


def test_process_workers_config():
    config = FrequencyConfig(num_workers=2, use_threads=False)
    counter = count_tokens([b"x y x\n", b"y z\n"], config)
    assert counter.snapshot() == {b"x": 2, b"y": 2, b"z": 1}


def test_empty_input_writes_nothing():
    sink = ListSink()
    result = run_frequency_pipeline([], sink)
    assert sink.lines == []
    assert result.tokens == 0 and result.distinct == 0


def test_failure_writes_no_partial_table():
    sink = ListSink()
    config = FrequencyConfig(num_workers=4, max_token_bytes=2)
    with pytest.raises(PartitionAlignmentError):
        run_frequency_pipeline([b"a b c d e f\n", b"x" * 50 + b" y\n"], sink, config)
    assert sink.lines == []


def test_long_tokens_are_not_truncated():
    sink = ListSink()
    token = "x" * 40
    run_frequency_pipeline([token.encode()], sink)
    assert sink.lines == [token + "1"]


def test_distinct_invalid_utf8_tokens_get_separate_rows():
    counter = count_tokens([b"\xff \xfe\n"], FrequencyConfig(num_workers=1))
    assert len(counter) == 2

    sink = ListSink()
    run_frequency_pipeline([b"\xff \xfe \xff\n"], sink, FrequencyConfig(token_width=2))
    assert len(sink.lines) == 2
    raw = [line.encode("utf-8", "surrogateescape") for line in sink.lines]
    assert raw == [b"\xfe 1", b"\xff 2"]
