"""Array and hash-map exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate
from operator import mul
from typing import Optional

_BOX = 3


def two_sum(nums: Sequence[int], target: int) -> Optional[list[int]]:
    """Indices ``[later, earlier]`` of two values adding to ``target``, or None."""
    wanted: dict[int, int] = {}
    for idx, num in enumerate(nums):
        if num in wanted:
            return [idx, wanted[num]]
        wanted[target - num] = idx
    return None


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """True if no digit repeats in a row, a column or a 3x3 box; ``.`` is empty."""
    rows: dict[int, set[str]] = {}
    cols: dict[int, set[str]] = {}
    boxes: dict[tuple[int, int], set[str]] = {}
    for row, line in enumerate(board):
        for col, value in enumerate(line):
            if value == ".":
                continue
            seen_row = rows.setdefault(row, set())
            seen_col = cols.setdefault(col, set())
            seen_box = boxes.setdefault((row // _BOX, col // _BOX), set())
            if value in seen_row or value in seen_col or value in seen_box:
                return False
            seen_row.add(value)
            seen_col.add(value)
            seen_box.add(value)
    return True


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group the strings that are anagrams of each other, in order of first appearance."""
    groups: dict[tuple[str, ...], list[str]] = {}
    for word in strs:
        groups.setdefault(tuple(sorted(word)), []).append(word)
    return list(groups.values())


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    present = set(nums)
    best = 0
    for num in present:
        if num - 1 in present:
            continue
        end = num
        while end + 1 in present:
            end += 1
        best = max(best, end - num + 1)
    return best


def contains_duplicate(nums: Sequence[int]) -> bool:
    """True if some value appears more than once."""
    return len(set(nums)) != len(nums)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other values."""
    if not nums:
        return []
    prefix = list(accumulate(nums[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def is_anagram(s: str, t: str) -> bool:
    """True if ``t`` uses exactly the letters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first."""
    return [value for value, _ in Counter(nums).most_common(k)]