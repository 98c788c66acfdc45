# tweet_stats/median/unique.py
from __future__ import annotations

from typing import Union

__all__ = ["count_unique_words"]


def count_unique_words(record: Union[bytes, str]) -> int:
    """
    Return the number of distinct whitespace-delimited tokens in a record.

    Repeated runs of whitespace, and leading or trailing whitespace, never
    produce empty tokens. Tokens compare byte-for-byte (or codepoint-for-
    codepoint for str), so "Word" and "word" are distinct.

    Examples:
        >>> count_unique_words(b"a b a")
        2
        >>> count_unique_words(b"   ")
        0
    """
    return len(set(record.split()))
