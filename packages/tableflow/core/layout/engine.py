"""Layout pipeline: group, assign tracks, map geometry.

``compute_layout`` is a pure function of its arguments. It keeps no state
between calls, so callers may memoize on their own input snapshot and may
call it from any number of threads.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime

from tableflow.core.layout.geometry import to_rectangle
from tableflow.core.layout.grouping import group_intervals
from tableflow.core.layout.models import Interval, LayoutOptions, PositionedInterval
from tableflow.core.layout.tracks import assign_tracks
from tableflow.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


@log_performance
def compute_layout(
    intervals: Sequence[Interval],
    options: LayoutOptions | None = None,
) -> list[PositionedInterval]:
    """Position every interval for side-by-side display.

    Args:
        intervals: Intervals for one calendar column (already filtered to the
            caller's time window and resource set).
        options: Scale and spacing. Defaults to ``LayoutOptions()``.

    Returns:
        One PositionedInterval per input interval, in input order.

    Raises:
        MalformedIntervalError: If any interval has ``end <= start``; the
            whole batch is rejected.
        InvalidLayoutError: If the options are out of range.
    """
    options = options or LayoutOptions()
    clusters = group_intervals(intervals)
    if not clusters:
        return []

    placed: dict[int, PositionedInterval] = {}

    for cluster in clusters:
        tracks, track_count = assign_tracks(cluster)

        for position, (index, interval) in enumerate(
            zip(cluster.indices, cluster.intervals, strict=True)
        ):
            track = tracks[position]
            rect = to_rectangle(interval, track, track_count, options)
            placed[index] = PositionedInterval(
                interval=interval,
                index=index,
                track=track,
                track_count=track_count,
                top=rect.top,
                height=rect.height,
                left_percent=rect.left_percent,
                width_percent=rect.width_percent,
            )

    logger.debug(
        "Laid out %d intervals in %d clusters (widest %d tracks)",
        len(intervals),
        len(clusters),
        max(p.track_count for p in placed.values()),
    )
    return [placed[i] for i in range(len(intervals))]


def filter_by_date(positioned: Sequence[PositionedInterval], day: date) -> list[PositionedInterval]:
    """Keep positioned intervals whose start falls on ``day``.

    Used by week views that lay out a whole week and render it day by day.
    Intervals with numeric instants carry no date and are never kept.
    """
    if isinstance(day, datetime):
        day = day.date()
    return [
        p
        for p in positioned
        if isinstance(p.interval.start, datetime) and p.interval.start.date() == day
    ]


__all__ = [
    "compute_layout",
    "filter_by_date",
]
