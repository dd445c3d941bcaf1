"""Sliding-window problems over sequences and strings."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    result: list[int] = []
    candidates: deque[int] = deque()
    for index, value in enumerate(nums):
        while candidates and nums[candidates[-1]] <= value:
            candidates.pop()
        candidates.append(index)
        if candidates[0] <= index - k:
            candidates.popleft()
        if index >= k - 1:
            result.append(nums[candidates[0]])
    return result


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if char in last_seen:
            start = max(start, last_seen[char] + 1)
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def find_anagrams(s: str, p: str) -> list[int]:
    """Return the start indices of every anagram of ``p`` inside ``s``."""
    width = len(p)
    if len(s) < width:
        return []
    goal = Counter(p)
    window = Counter(s[:width])
    result = [0] if window == goal else []
    for start in range(1, len(s) - width + 1):
        window[s[start + width - 1]] += 1
        window[s[start - 1]] -= 1
        if window == goal:
            result.append(start)
    return result


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing every character of ``t``.

    Characters of ``t`` count with multiplicity. An empty string means no such
    substring exists.
    """
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    left = right = 0
    best_start, best_len = 0, None
    size = len(s)
    while right < size:
        while missing and right < size:
            char = s[right]
            right += 1
            if need[char] > 0:
                missing -= 1
            need[char] -= 1
        while not missing:
            if best_len is None or right - left < best_len:
                best_start, best_len = left, right - left
            char = s[left]
            left += 1
            need[char] += 1
            if need[char] > 0:
                missing += 1
    if best_len is None:
        return ""
    return s[best_start:best_start + best_len]