"""Two-pointer exercises."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Optional


def max_area(height: Sequence[int]) -> int:
    """The most water a container made of two of the lines can hold."""
    if not height:
        raise ValueError("height must not be empty")
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct sorted triplet of values that adds up to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for idx, first in enumerate(values):
        if idx > 0 and first == values[idx - 1]:
            continue
        left, right = idx + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                left += 1
                right -= 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    left, right = 0, len(height) - 1
    water = max_left = max_right = 0
    while left <= right:
        if max_left <= max_right:
            water += max(max_left - height[left], 0)
            max_left = max(max_left, height[left])
            left += 1
        else:
            water += max(max_right - height[right], 0)
            max_right = max(max_right, height[right])
            right -= 1
    return water


def two_sum_sorted(numbers: Sequence[int], target: int) -> Optional[list[int]]:
    """One-based indices of two values of a sorted list adding to ``target``, or None."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return None


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[write], nums[read] = value, nums[write]
            write += 1


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)