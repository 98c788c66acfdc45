# tests/median/test_unique.py
import pytest

from tweet_stats.median.unique import count_unique_words


@pytest.mark.parametrize(
    "record, expected",
    [
        (b"", 0),
        (b"   ", 0),
        (b"one", 1),
        (b"a b c", 3),
        (b"a a a", 1),
        (b"  a   b  a  ", 2),
        (b"a\tb\x0bc", 3),
        (b"Word word WORD", 3),          # byte-exact, case-sensitive
        ("café cafe café".encode("utf-8"), 2),
    ],
)
def test_counts_distinct_tokens(record, expected):
    assert count_unique_words(record) == expected


def test_accepts_text_records():
    assert count_unique_words("the cat the hat") == 3


def test_repeatable_and_order_invariant():
    rec = b"x y z x y"
    assert count_unique_words(rec) == count_unique_words(rec)
    assert count_unique_words(rec) == count_unique_words(b"y x x z y")


def test_maximal_record_fits_default_domain():
    # 140 characters: 70 distinct one-letter tokens separated by spaces
    letters = [chr(c).encode() for c in range(ord("!"), ord("!") + 70)]
    record = b" ".join(letters)
    assert len(record) == 139
    assert count_unique_words(record) == 70
