# tests/io/test_sinks.py
import pytest

from tweet_stats.io.sinks import FileSink, ListSink, format_frequency_row, format_median


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0.00"), (3, "3.00"), (3.0, "3.00"), (2.5, "2.50"), (69.5, "69.50")],
)
def test_format_median(value, expected):
    assert format_median(value) == expected


def test_format_frequency_row_default_width():
    row = format_frequency_row(b"#hashtag", 12)
    assert row == "#hashtag" + " " * 22 + "12"
    assert len(row) == 32


def test_format_frequency_row_custom_width_and_long_token():
    assert format_frequency_row(b"ab", 1, width=4) == "ab  1"
    assert format_frequency_row(b"abcdef", 7, width=4) == "abcdef7"


def test_list_sink_collects():
    sink = ListSink()
    sink.write("a")
    sink.write("b")
    assert sink.lines == ["a", "b"]
    assert len(sink) == 2


def test_file_sink_creates_parent_and_writes_lines(tmp_path):
    out = tmp_path / "tweet_output" / "ft2.txt"
    with FileSink(out) as sink:
        sink.write("1.00")
        sink.write("1.50")
    assert out.read_text(encoding="utf-8") == "1.00\n1.50\n"
    assert sink.lines_written == 2


def test_file_sink_requires_open(tmp_path):
    sink = FileSink(tmp_path / "x.txt")
    with pytest.raises(RuntimeError):
        sink.write("nope")


def test_format_frequency_row_decodes_utf8_and_accepts_str():
    assert format_frequency_row("café".encode("utf-8"), 3, width=6) == "café  3"
    assert format_frequency_row("café", 3, width=6) == "café  3"


def test_format_frequency_row_escapes_invalid_bytes():
    assert format_frequency_row(b"\xff", 1, width=2) == "\udcff 1"
    assert format_frequency_row(b"\xfe", 1, width=2) != format_frequency_row(b"\xff", 1, width=2)
    assert format_frequency_row(b"\xff", 1, width=2, errors="replace") == "\ufffd 1"


def test_file_sink_restores_escaped_bytes(tmp_path):
    out = tmp_path / "ft1.txt"
    with FileSink(out, errors="surrogateescape") as sink:
        sink.write(format_frequency_row(b"\xfe", 1, width=2))
        sink.write(format_frequency_row(b"\xff", 2, width=2))
    assert out.read_bytes() == b"\xfe 1\n\xff 2\n"


def test_file_sink_strict_by_default(tmp_path):
    with FileSink(tmp_path / "ft1.txt") as sink:
        with pytest.raises(UnicodeEncodeError):
            sink.write(format_frequency_row(b"\xff", 1))
