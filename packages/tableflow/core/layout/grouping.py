"""Interval grouper: splits a day's bookings into independent overlap clusters.

Each cluster is laid out on its own, so a booking at 9:00 never narrows a
booking at 15:00 just because they share a calendar column.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tableflow.core.layout.models import Cluster, Instant, Interval
from tableflow.core.layout.timebase import ensure_well_formed

logger = logging.getLogger(__name__)


def ranges_overlap(start1: Instant, end1: Instant, start2: Instant, end2: Instant) -> bool:
    """Check whether two half-open ranges share any instant.

    Ranges that only touch (``end1 == start2``) do not overlap.
    """
    return start1 < end2 and end1 > start2


def group_intervals(intervals: Sequence[Interval]) -> list[Cluster]:
    """Partition intervals into clusters of transitively overlapping intervals.

    Intervals are visited in start order (input order breaks ties). A new
    cluster opens whenever the next start is at or after the latest end seen
    in the current cluster.

    Args:
        intervals: Intervals to group.

    Returns:
        Clusters ordered by earliest start. Empty input gives an empty list.

    Raises:
        MalformedIntervalError: If any interval has ``end <= start``.

    Example:
        >>> clusters = group_intervals([a_9_10, b_930_1030, c_11_12])
        >>> [len(c) for c in clusters]
        [2, 1]
    """
    ensure_well_formed(intervals)
    if not intervals:
        return []

    order = sorted(range(len(intervals)), key=lambda i: intervals[i].start)

    clusters: list[Cluster] = []
    members: list[int] = []
    cluster_start: Instant | None = None
    cluster_end: Instant | None = None

    for i in order:
        interval = intervals[i]
        if cluster_end is None or interval.start >= cluster_end:
            if members:
                clusters.append(_build_cluster(intervals, members, cluster_start, cluster_end))
            members = [i]
            cluster_start = interval.start
            cluster_end = interval.end
        else:
            members.append(i)
            if interval.end > cluster_end:
                cluster_end = interval.end

    clusters.append(_build_cluster(intervals, members, cluster_start, cluster_end))

    logger.debug("Grouped %d intervals into %d clusters", len(intervals), len(clusters))
    return clusters


def _build_cluster(
    intervals: Sequence[Interval],
    members: list[int],
    start: Instant | None,
    end: Instant | None,
) -> Cluster:
    return Cluster(
        intervals=tuple(intervals[i] for i in members),
        indices=tuple(members),
        start=start,
        end=end,
    )


__all__ = [
    "group_intervals",
    "ranges_overlap",
]
