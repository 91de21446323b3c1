"""Interval scheduling: rooms needed for meetings and meetings one person can attend."""

from __future__ import annotations

from collections.abc import Iterable


def min_meeting_rooms(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the fewest rooms that host every ``(start, end)`` meeting.

    A meeting ending at time t frees its room for one starting at t.
    """
    pairs = list(intervals)
    if not pairs:
        return 0

    starts = sorted(start for start, _ in pairs)
    ends = sorted(end for _, end in pairs)

    rooms = best = 0
    end_index = 0
    for start in starts:
        while start >= ends[end_index]:
            rooms -= 1
            end_index += 1
        rooms += 1
        best = max(best, rooms)
    return best


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Return how many non-overlapping ``(start, end)`` meetings one person can attend.

    A meeting may start at the moment the previous one ends.
    """
    ordered = sorted(meetings, key=lambda meeting: meeting[1])
    if not ordered:
        return 0

    count = 1
    last_end = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= last_end:
            count += 1
            last_end = end
    return count