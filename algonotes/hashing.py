"""Problems solved with hash maps and hash sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair summing to ``target``.

    The pair is found scanning left to right, so the second index is the
    smallest one that completes a pair. An empty list means no pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        current = start
        length = 1
        while current + 1 in values:
            current += 1
            length += 1
        longest = max(longest, length)
    return longest


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups appear in the order their first member is met, and words keep
    their input order within a group.
    """
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Count contiguous subarrays whose elements sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += prefix_counts[prefix - k]
        prefix_counts[prefix] += 1
    return count