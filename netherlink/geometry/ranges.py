"""Distances between inclusive integer ranges, given as ``(start, end)`` pairs."""

from __future__ import annotations

from typing import Tuple

IntRange = Tuple[int, int]


def min_range_distance_to(range1: IntRange, range2: IntRange) -> int:
    """Return the distance between the closest ends of two ranges (0 on overlap)."""
    start1, end1 = range1
    start2, end2 = range2
    if end1 < start2:
        return start2 - end1
    if end2 < start1:
        return start1 - end2
    return 0


def max_range_distance_to(range1: IntRange, range2: IntRange) -> int:
    """Return the largest distance from any point of *range1* to *range2*.

    The farthest point of *range1* is always one of its ends.
    """
    start1, end1 = range1
    return max(
        min_range_distance_to_pos(range2, start1),
        min_range_distance_to_pos(range2, end1),
    )


def min_range_distance_to_pos(range_: IntRange, pos: int) -> int:
    """Return the distance from *pos* to the nearest point of *range_*."""
    start, end = range_
    if end < pos:
        return pos - end
    if pos < start:
        return start - pos
    return 0
