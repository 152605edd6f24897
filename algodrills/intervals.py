"""Interval merging and overlap counting."""

from collections import Counter
from itertools import accumulate


def merge_intervals(intervals):
    """Merge overlapping or touching ``[start, end]`` intervals.

    The result is sorted by start; the input is left unchanged.
    """
    merged = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def min_meeting_rooms(intervals):
    """Return how many rooms are needed so no two meetings share a room.

    A meeting ending at the moment another starts frees its room in time.
    """
    deltas = Counter()
    for start, end in intervals:
        deltas[start] += 1
        deltas[end] -= 1
    return max(accumulate(deltas[moment] for moment in sorted(deltas)), default=0)