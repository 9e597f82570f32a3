"""Interval exercises."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate, chain, pairwise
from operator import attrgetter


@dataclass(frozen=True)
class Interval:
    """A meeting from ``start`` to ``end``."""

    start: int
    end: int


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals; touching ones merge too."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda iv: iv[0]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert into sorted, non-overlapping intervals, merging where needed."""
    result: list[list[int]] = []
    new_start, new_end = new_interval
    for idx, (start, end) in enumerate(intervals):
        if new_end < start:
            result.append([new_start, new_end])
            result.extend([s, e] for s, e in intervals[idx:])
            return result
        if new_start > end:
            result.append([start, end])
        else:
            new_start, new_end = min(new_start, start), max(new_end, end)
    result.append([new_start, new_end])
    return result


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """The fewest intervals to remove so that the rest do not overlap."""
    if not intervals:
        return 0
    ordered = sorted(intervals, key=lambda iv: iv[0])
    removed = 0
    prev_end = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= prev_end:
            prev_end = end
        else:
            removed += 1
            prev_end = min(prev_end, end)
    return removed


def min_meeting_rooms(intervals: Sequence[Interval]) -> int:
    """The fewest rooms that hold every meeting; a room frees up as a meeting ends."""
    events = sorted(
        chain.from_iterable(((iv.start, 1), (iv.end, -1)) for iv in intervals)
    )
    return max(accumulate((delta for _, delta in events), initial=0))


def can_attend_meetings(intervals: Sequence[Interval]) -> bool:
    """True if no two meetings overlap."""
    ordered = sorted(intervals, key=attrgetter("start"))
    return all(prev.end <= cur.start for prev, cur in pairwise(ordered))