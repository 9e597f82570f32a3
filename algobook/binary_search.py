"""Binary search exercises."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """The median of two sorted lists taken together."""
    total = len(nums1) + len(nums2)
    if total == 0:
        raise ValueError("both lists are empty")
    if len(nums1) < len(nums2):
        long, short = nums2, nums1
    else:
        long, short = nums1, nums2
    half = total // 2

    lo, hi = 0, len(short) - 1
    while True:
        i = (lo + hi) // 2
        j = half - i - 2
        short_left = short[i] if i >= 0 else -math.inf
        short_right = short[i + 1] if i + 1 < len(short) else math.inf
        long_left = long[j] if j >= 0 else -math.inf
        long_right = long[j + 1] if j + 1 < len(long) else math.inf

        if short_left <= long_right and long_left <= short_right:
            if total % 2 == 0:
                return (max(short_left, long_left) + min(short_right, long_right)) / 2
            return float(min(short_right, long_right))
        if short_left > long_right:
            hi = i - 1
        else:
            lo = i + 1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted list of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        else:
            if nums[mid] < target <= nums[hi]:
                lo = mid + 1
            else:
                hi = mid - 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """True if ``target`` is in a matrix whose rows, read in turn, are sorted."""
    if not matrix:
        return False
    row_idx = bisect_right(matrix, target, key=lambda row: row[0]) - 1
    if row_idx < 0:
        return False
    row = matrix[row_idx]
    col = bisect_left(row, target)
    return col < len(row) and row[col] == target


def find_min(nums: Sequence[int]) -> int:
    """The smallest value of a rotated sorted list."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        if nums[lo] < nums[hi]:
            best = min(best, nums[lo])
            break
        mid = (lo + hi) // 2
        best = min(best, nums[mid])
        if nums[mid] >= nums[lo]:
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted list, or -1."""
    idx = bisect_left(nums, target)
    return idx if idx < len(nums) and nums[idx] == target else -1


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """The slowest eating speed that finishes every pile within ``h`` hours; 0 if none does."""
    if not piles:
        raise ValueError("piles must not be empty")
    best = 0
    lo, hi = 1, max(piles)
    while lo <= hi:
        speed = (lo + hi) // 2
        hours = sum(-(-pile // speed) for pile in piles)
        if hours <= h:
            best = speed
            hi = speed - 1
        else:
            lo = speed + 1
    return best


class TimeMap:
    """A key-value store that remembers each value with its timestamp."""

    def __init__(self) -> None:
        self._data: dict[str, tuple[list[int], list[str]]] = {}

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Store ``value`` for ``key`` at ``timestamp``; timestamps come in increasing order."""
        times, values = self._data.setdefault(key, ([], []))
        times.append(timestamp)
        values.append(value)

    def get(self, key: str, timestamp: int) -> str:
        """The latest value set at or before ``timestamp``, or an empty string."""
        entry = self._data.get(key)
        if entry is None:
            return ""
        times, values = entry
        idx = bisect_right(times, timestamp)
        return values[idx - 1] if idx else ""