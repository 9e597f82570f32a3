"""Sliding-window exercises."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for idx, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = idx
        best = max(best, idx - start + 1)
    return best


def min_window(s: str, t: str) -> str:
    """The shortest substring of ``s`` containing every character of ``t``; "" if none."""
    need = Counter(t)
    if not need:
        return ""
    window: Counter[str] = Counter()
    have, required = 0, len(need)
    best: tuple[int, int] | None = None
    left = 0
    for right, ch in enumerate(s):
        if ch in need:
            window[ch] += 1
            if window[ch] == need[ch]:
                have += 1
        while have == required:
            if best is None or right + 1 - left < best[1] - best[0]:
                best = (left, right + 1)
            dropped = s[left]
            if dropped in need:
                window[dropped] -= 1
                if window[dropped] < need[dropped]:
                    have -= 1
            left += 1
    return "" if best is None else s[best[0]:best[1]]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """The maximum of each window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    candidates: deque[int] = deque()
    result: list[int] = []
    for right, value in enumerate(nums):
        while candidates and value > nums[candidates[-1]]:
            candidates.pop()
        candidates.append(right)
        if candidates[0] <= right - k:
            candidates.popleft()
        if right + 1 >= k:
            result.append(nums[candidates[0]])
    return result


def character_replacement(s: str, k: int) -> int:
    """Longest run of one character reachable by replacing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    left = max_freq = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        max_freq = max(max_freq, counts[ch])
        if right - left + 1 - max_freq > k:
            counts[s[left]] -= 1
            left += 1
    return len(s) - left


def check_inclusion(s1: str, s2: str) -> bool:
    """True if some permutation of ``s1`` is a substring of ``s2``."""
    size = len(s1)
    if size > len(s2):
        return False
    need = Counter(s1)
    window = Counter(s2[:size])
    if window == need:
        return True
    for right in range(size, len(s2)):
        window[s2[right]] += 1
        window[s2[right - size]] -= 1
        if window == need:
            return True
    return False