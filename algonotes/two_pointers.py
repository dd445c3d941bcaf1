"""Problems solved with two converging or chasing indices."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the given walls."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triplet that sums to zero."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, size - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right - 1] == values[right]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping other elements' order."""
    slow = 0
    for value in list(nums):
        if value != 0:
            nums[slow] = value
            slow += 1
    for index in range(slow, len(nums)):
        nums[index] = 0


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    total = 0
    left, right = 0, len(height) - 1
    wall_left = wall_right = 0
    while left < right:
        wall_left = max(wall_left, height[left])
        wall_right = max(wall_right, height[right])
        if height[left] < height[right]:
            total += max(min(wall_left, wall_right) - height[left], 0)
            left += 1
        else:
            total += max(min(wall_left, wall_right) - height[right], 0)
            right -= 1
    return total