"""General array problems."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps in place."""
    size = len(nums)
    if size == 0:
        return
    k %= size
    nums[:] = list(nums[size - k:]) + list(nums[: size - k])


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements."""
    result: list[int] = []
    running = 1
    for value in nums:
        result.append(running)
        running *= value
    running = 1
    for index in range(len(nums) - 1, -1, -1):
        result[index] *= running
        running *= nums[index]
    return result


def first_missing_positive(nums: Iterable[int]) -> int:
    """Return the smallest positive integer absent from ``nums``."""
    values = list(nums)
    size = len(values)
    for index in range(size):
        while 1 <= values[index] <= size and values[index] != values[values[index] - 1]:
            target = values[index] - 1
            values[target], values[index] = values[index], values[target]
    for expected, value in enumerate(values, start=1):
        if value != expected:
            return expected
    return size + 1


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_sub_array() needs at least one number")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(current, value) if current < 0 else current + value
        best = max(best, current)
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals into a sorted list."""
    merged: list[list[int]] = []
    for start, end in sorted(list(pair) for pair in intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        elif end > merged[-1][1]:
            merged[-1][1] = end
    return merged


def find_median_sorted_arrays(nums1: Iterable[int], nums2: Iterable[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        raise ValueError("cannot take the median of two empty arrays")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2