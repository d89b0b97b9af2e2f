"""String puzzles: word splitting, vowel handling, subsequences and run-length compression."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence
from itertools import groupby

_VOWELS = frozenset("aeiouAEIOU")


def split_words(s: str, separator: str) -> list[str]:
    """Split ``s`` on ``separator``, grouping consecutive separators.

    Empty pieces are never produced, so leading, trailing and repeated
    separators are all ignored.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in s.split(separator) if piece]


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed(split_words(s, " ")))


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether one word can become the other by swapping positions or letters.

    That holds when both use the same set of characters and their character
    counts form the same multiset.
    """
    counts1 = Counter(word1)
    counts2 = Counter(word2)
    if Counter(counts1.values()) != Counter(counts2.values()):
        return False
    return counts1.keys() == counts2.keys()


def is_vowel(c: str) -> bool:
    """Tell whether ``c`` is an English vowel, in either case."""
    return c in _VOWELS


def reverse_vowels(s: str) -> str:
    """Return ``s`` with the order of its vowels reversed and everything else kept."""
    vowels = [ch for ch in s if is_vowel(ch)]
    return "".join(vowels.pop() if is_vowel(ch) else ch for ch in s)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be had by deleting characters from ``t``."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def compress(chars: MutableSequence[str]) -> int:
    """Run-length compress ``chars`` in place and return its new length.

    Each run becomes its character, followed by the run length in decimal
    digits when the run is longer than one.
    """
    encoded: list[str] = []
    for ch, run in groupby(chars):
        length = sum(1 for _ in run)
        encoded.append(ch)
        if length > 1:
            encoded.extend(str(length))
    chars[:] = encoded
    return len(encoded)