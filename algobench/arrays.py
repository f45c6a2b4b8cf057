"""Array and string problems: triplets, profits, merging, water, pairs and windows."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import accumulate, combinations, pairwise
from typing import Optional


def find_increasing_triplet(nums: Sequence[int]) -> Optional[tuple[int, int, int]]:
    """Find a subsequence a < b < c in one pass; None when there is none."""
    if len(nums) < 3:
        return None
    min_num = nums[0]
    store_min = min_num
    max_seq: Optional[int] = None
    for value in nums[1:]:
        if value == min_num:
            continue
        if value < min_num:
            min_num = value
            continue
        if max_seq is None or value < max_seq:
            max_seq = value
            store_min = min_num
        elif value > max_seq:
            return (store_min, max_seq, value)
    return None


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from any number of buy/sell transactions: sum of every rise."""
    return sum(later - earlier for earlier, later in pairwise(prices) if later > earlier)


def equilibrium_indices(values: Sequence[int]) -> list[int]:
    """Indices whose left-side sum equals their right-side sum, highest first."""
    left_sums = list(accumulate(values[:-1], initial=0)) if values else []
    found = []
    right = 0
    for index in reversed(range(len(values))):
        if left_sums[index] == right:
            found.append(index)
        right += values[index]
    return found


def merge_into_vacant(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """Merge sorted ``y`` into the vacant (zero) cells of sorted ``x``.

    The non-zero values of ``x`` and all of ``y`` come out as one sorted list
    of the same length as ``x``. The number of zeros in ``x`` must equal
    ``len(y)``.
    """
    if not x:
        return []
    filled = [value for value in x if value != 0]
    if len(x) - len(filled) != len(y):
        raise ValueError("number of vacant cells must equal the length of y")
    return list(heapq.merge(filled, y))


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between the bars."""
    if not heights:
        return 0
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        max(min(lmax, rmax) - height, 0)
        for lmax, rmax, height in list(zip(left, right, heights))[1:-1]
    )


def find_pair(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """First pair (in index order) summing to ``target``; None when there is none."""
    return next(
        ((a, b) for a, b in combinations(nums, 2) if a + b == target),
        None,
    )


def sort_binary(values: Sequence[int]) -> list[int]:
    """Sort a 0/1 array by counting; any non-zero value becomes 1."""
    zeros = sum(1 for value in values if value == 0)
    return [0] * zeros + [1] * (len(values) - zeros)


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best