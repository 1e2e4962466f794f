"""Track assigner: places the intervals of one cluster on parallel tracks.

Two computations over the same cluster:

- ``max_concurrency`` sweeps start/end events to find how many intervals are
  open at once. This is the number of tracks the cluster needs and drives
  the width of every block in it.
- ``assign_tracks`` greedily puts each interval on the lowest free track.
  Intervals are taken by start time, longer ones first when starts tie, so a
  long booking claims its track before short ones fragment it.

Intervals are half-open: a booking ending at 10:00 frees its track for one
starting at 10:00.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tableflow.core.layout.models import Cluster, Interval, TrackAssignment
from tableflow.core.layout.timebase import duration_minutes, ensure_well_formed

logger = logging.getLogger(__name__)

# Sweep event kinds; ends sort ahead of starts at the same instant
_END = 0
_START = 1


def _members(intervals: Sequence[Interval] | Cluster) -> list[Interval]:
    # Clusters come out of group_intervals, which has already validated them
    members = list(intervals)
    if not isinstance(intervals, Cluster):
        ensure_well_formed(members)
    return members


def _sweep(members: list[Interval]) -> int:
    if len(members) <= 1:
        return len(members)

    events: list[tuple] = []
    for interval in members:
        events.append((interval.start, _START))
        events.append((interval.end, _END))
    events.sort()

    current = 0
    peak = 0
    for _, kind in events:
        if kind == _START:
            current += 1
            peak = max(peak, current)
        else:
            current -= 1

    return peak


def max_concurrency(intervals: Sequence[Interval] | Cluster) -> int:
    """Return the largest number of intervals open at any single instant.

    Every interval starting at an instant is counted together, so bookings
    that begin simultaneously always get their own tracks.

    Args:
        intervals: A cluster, or any sequence of intervals.

    Returns:
        Maximum concurrency (0 for no intervals).

    Raises:
        MalformedIntervalError: If a plain sequence holds a malformed interval.
    """
    return _sweep(_members(intervals))


def assign_tracks(intervals: Sequence[Interval] | Cluster) -> TrackAssignment:
    """Assign each interval to the lowest-numbered track it fits on.

    Order: start ascending, then longer duration first, then input position.
    A track is free for an interval when its last end is at or before the
    interval's start.

    Args:
        intervals: A cluster, or any sequence of intervals.

    Returns:
        TrackAssignment keyed by position in ``intervals``, with
        ``track_count`` equal to the cluster's max concurrency.

    Raises:
        MalformedIntervalError: If a plain sequence holds a malformed interval.

    Example:
        >>> tracks, count = assign_tracks([a_9_10, b_930_1030, c_10_11])
        >>> tracks, count
        ({0: 0, 1: 1, 2: 0}, 2)
    """
    members = _members(intervals)

    order = sorted(
        range(len(members)),
        key=lambda i: (
            members[i].start,
            -duration_minutes(members[i].start, members[i].end),
            i,
        ),
    )

    track_ends: list = []
    tracks: dict[int, int] = {}

    for i in order:
        interval = members[i]

        assigned = -1
        for track, last_end in enumerate(track_ends):
            if last_end <= interval.start:
                assigned = track
                break

        if assigned == -1:
            assigned = len(track_ends)
            track_ends.append(interval.end)
        else:
            track_ends[assigned] = interval.end

        tracks[i] = assigned

    track_count = _sweep(members)

    logger.debug("Assigned %d intervals to %d tracks", len(members), track_count)
    return TrackAssignment(tracks=tracks, track_count=track_count)


__all__ = [
    "assign_tracks",
    "max_concurrency",
]
