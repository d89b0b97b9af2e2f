"""Sliding-window puzzles over arrays and strings."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_VOWELS = frozenset("aeiou")


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones possible after flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    best = 0
    start = 0
    flipped: deque[int] = deque()
    for i, value in enumerate(nums):
        if value != 1:
            flipped.append(i)
            if len(flipped) > k:
                # Give up the earliest flipped zero and start just after it.
                start = flipped.popleft() + 1
        best = max(best, i - start + 1)
    return best


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the longest run of ones after deleting exactly one element.

    An empty input gives -1, as there is nothing to delete.
    """
    # The best window holding at most one zero loses one element: the zero
    # if it holds one, otherwise a one that must be deleted anyway.
    return longest_ones(nums, 1) - 1


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest mean of any ``k`` consecutive elements."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the length of nums")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def max_vowels(s: str, k: int) -> int:
    """Return the most lowercase vowels in any substring of length ``k``."""
    if not 0 <= k <= len(s):
        raise ValueError("k must be between 0 and the length of s")
    count = sum(ch in _VOWELS for ch in s[:k])
    best = count
    for leaving, entering in zip(s, s[k:]):
        count += (entering in _VOWELS) - (leaving in _VOWELS)
        best = max(best, count)
    return best