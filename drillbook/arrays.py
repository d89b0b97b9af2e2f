"""Array puzzles: two pointers, prefix sums, counting and greedy scans."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate


def max_area(heights: Sequence[int]) -> int:
    """Return the largest water area held between two of the given lines."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        width = right - left
        # Always move the lower line inward; the area is bounded by it.
        if heights[right] <= heights[left]:
            height = heights[right]
            right -= 1
        else:
            height = heights[left]
            left += 1
        best = max(best, height * width)
    return best


def unique_occurrences(arr: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(counts) == len(set(counts))


def max_operations(nums: Iterable[int], k: int) -> int:
    """Return how many disjoint pairs summing to ``k`` can be removed."""
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    pairs = 0
    while left < right:
        total = ordered[left] + ordered[right]
        if total == k:
            left += 1
            right -= 1
            pairs += 1
        elif total < k:
            left += 1
        else:
            right -= 1
    return pairs


def largest_altitude(gain: Iterable[int]) -> int:
    """Return the highest altitude reached starting from zero."""
    return max(accumulate(gain, initial=0))


def find_difference(
    nums1: Iterable[int], nums2: Iterable[int]
) -> list[list[int]]:
    """Return the distinct values only in ``nums1`` and only in ``nums2``."""
    first, second = set(nums1), set(nums2)
    return [list(first - second), list(second - first)]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    prefix = list(accumulate(nums[:-1], lambda a, b: a * b, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), lambda a, b: a * b, initial=1))
    return [p * s for p, s in zip(prefix, reversed(suffix))]


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping the others in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def increasing_triplet(nums: Iterable[int]) -> bool:
    """Tell whether some i < j < k have nums[i] < nums[j] < nums[k]."""
    smallest = middle = float("inf")
    for value in nums:
        if value <= smallest:
            smallest = value
        elif value <= middle:
            middle = value
        else:
            return True
    return False


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit with no two in adjacent plots."""
    bed = list(flowerbed)
    planted = 0
    last = len(bed) - 1
    for i, plot in enumerate(bed):
        if plot != 0:
            continue
        left_empty = i == 0 or bed[i - 1] == 0
        right_empty = i == last or bed[i + 1] == 0
        if left_empty and right_empty:
            bed[i] = 1
            planted += 1
    return planted >= n


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums match, or -1."""
    total = sum(nums)
    left_sum = 0
    for i, value in enumerate(nums):
        if left_sum == total - left_sum - value:
            return i
        left_sum += value
    return -1