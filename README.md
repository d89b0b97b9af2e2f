# drillbook

Small, dependency-free functions for well-known interview-style problems on
arrays, strings, sliding windows and singly linked lists.

## Installation

```
pip install drillbook
```

Install with the test extra to run the test suite:

```
pip install "drillbook[test]"
pytest
```

## Modules

### `drillbook.arrays`

| Function | What it returns |
| --- | --- |
| `max_area(heights)` | Largest water area between two lines |
| `unique_occurrences(arr)` | `True` if every distinct value occurs a different number of times |
| `max_operations(nums, k)` | Number of disjoint pairs summing to `k` |
| `largest_altitude(gain)` | Highest altitude reached, starting from 0 |
| `find_difference(nums1, nums2)` | Two lists: distinct values only in `nums1`, and distinct values only in `nums2` (in no particular order) |
| `product_except_self(nums)` | Product of all other elements, per position |
| `move_zeroes(nums)` | Moves zeroes to the end in place, keeping the order of the rest; returns `None` |
| `increasing_triplet(nums)` | `True` if a strictly increasing subsequence of length 3 exists |
| `can_place_flowers(flowerbed, n)` | `True` if `n` more flowers fit with no two adjacent; the input is not modified |
| `pivot_index(nums)` | Leftmost index where left and right sums match, or `-1` |

### `drillbook.sliding_window`

| Function | What it returns |
| --- | --- |
| `longest_ones(nums, k)` | Longest run of ones after flipping at most `k` zeroes |
| `longest_subarray(nums)` | Longest run of ones after deleting exactly one element (`-1` for an empty input) |
| `find_max_average(nums, k)` | Largest mean of `k` consecutive elements, as a float |
| `max_vowels(s, k)` | Most lowercase vowels (`a e i o u`) in any substring of length `k` |

`longest_ones` raises `ValueError` for a negative `k`; `find_max_average`
requires `1 <= k <= len(nums)` and `max_vowels` requires `0 <= k <= len(s)`,
raising `ValueError` otherwise.

### `drillbook.strings`

| Function | What it returns |
| --- | --- |
| `split_words(s, separator)` | Pieces of `s` split on a one-character `separator`, empty pieces dropped |
| `reverse_words(s)` | Space-separated words of `s` in reverse order, joined by single spaces |
| `close_strings(word1, word2)` | `True` if both words use the same characters and their character counts form the same multiset |
| `is_vowel(c)` | `True` for `a e i o u` in either case |
| `reverse_vowels(s)` | `s` with its vowels in reverse order |
| `is_subsequence(s, t)` | `True` if `s` is a subsequence of `t` |
| `compress(chars)` | Run-length compresses a list of characters in place and returns its new length |

`split_words` raises `ValueError` if `separator` is not exactly one character.
`compress` writes each run as its character followed by the run length in
decimal digits when the run is longer than one, so `["a", "a", "b"]` becomes
`["a", "2", "b"]`.

### `drillbook.linked_list`

`ListNode` is a singly linked list node with `val` (default `0`) and `next`
(default `None`). `ListNode.from_values([...])` builds a list and returns its
head, or `None` for no values. Iterating over a node yields its value and
those of every node after it.

| Function | What it does |
| --- | --- |
| `delete_node(node)` | Removes `node` from its list, given only that node, by copying in its successor |
| `remove_nth_from_end(head, n)` | Removes the `n`-th node from the end and returns the new head |

`delete_node` raises `ValueError` when given the last node.
`remove_nth_from_end` raises `ValueError` when `n` is less than 1 or greater
than the length of the list.

## Example

```python
from drillbook.arrays import product_except_self
from drillbook.strings import reverse_words
from drillbook.linked_list import ListNode, remove_nth_from_end

product_except_self([1, 2, 3, 4])      # [24, 12, 8, 6]
reverse_words("  the sky  is blue ")   # "blue is sky the"

head = ListNode.from_values([1, 2, 3, 4, 5])
list(remove_nth_from_end(head, 2))     # [1, 2, 3, 5]
```

## Scope

drillbook is a library only: it has no command-line tool, and every function
works on values passed in from Python.