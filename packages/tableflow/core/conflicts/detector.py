"""Same-resource conflict detection.

Side-by-side tracks only say that bookings overlap somewhere in a column.
A conflict is stronger: two bookings on the *same* table at the same time.
This runs on the raw intervals and is independent of clustering.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict

from tableflow.core.layout.grouping import ranges_overlap
from tableflow.core.layout.models import Interval
from tableflow.core.layout.timebase import duration_minutes, ensure_well_formed

logger = logging.getLogger(__name__)

# Overlaps of at least this many minutes are critical
CRITICAL_OVERLAP_THRESHOLD_MINUTES = 15


class ConflictSeverity(str, Enum):
    """How serious a double booking is."""

    WARNING = "warning"
    CRITICAL = "critical"


class Conflict(BaseModel):
    """Two intervals overlapping on one resource.

    Attributes:
        resource_id: Resource both intervals are booked on.
        first_index: Input position of the earlier-starting interval.
        second_index: Input position of the later-starting interval.
        overlap_minutes: Overlap length, rounded to whole minutes.
        severity: CRITICAL at or above the threshold, else WARNING.
    """

    model_config = ConfigDict(frozen=True)

    resource_id: str
    first_index: int
    second_index: int
    overlap_minutes: int
    severity: ConflictSeverity


def overlap_minutes(a: Interval, b: Interval) -> int:
    """Whole minutes shared by two intervals (0 when they do not overlap)."""
    if not ranges_overlap(a.start, a.end, b.start, b.end):
        return 0

    overlap_start = max(a.start, b.start)
    overlap_end = min(a.end, b.end)
    return math.floor(duration_minutes(overlap_start, overlap_end) + 0.5)


def detect_conflicts_for_resource(
    resource_id: str,
    intervals: Sequence[Interval],
    indices: Sequence[int],
    critical_threshold_minutes: int = CRITICAL_OVERLAP_THRESHOLD_MINUTES,
) -> list[Conflict]:
    """Find every overlapping pair among one resource's intervals.

    Args:
        resource_id: Resource the intervals belong to.
        intervals: That resource's intervals.
        indices: Input position of each interval, aligned with ``intervals``.
        critical_threshold_minutes: Overlap at which severity turns critical.

    Returns:
        Conflicts ordered by the earlier interval's start.
    """
    order = sorted(range(len(intervals)), key=lambda i: intervals[i].start)
    conflicts: list[Conflict] = []

    for pos, i in enumerate(order):
        for j in order[pos + 1 :]:
            if intervals[j].start >= intervals[i].end:
                # Later candidates start even later
                break
            minutes = overlap_minutes(intervals[i], intervals[j])
            if minutes <= 0:
                continue
            conflicts.append(
                Conflict(
                    resource_id=resource_id,
                    first_index=indices[i],
                    second_index=indices[j],
                    overlap_minutes=minutes,
                    severity=(
                        ConflictSeverity.CRITICAL
                        if minutes >= critical_threshold_minutes
                        else ConflictSeverity.WARNING
                    ),
                )
            )

    return conflicts


def detect_conflicts(
    intervals: Sequence[Interval],
    critical_threshold_minutes: int = CRITICAL_OVERLAP_THRESHOLD_MINUTES,
) -> list[Conflict]:
    """Detect double bookings across all resources.

    Args:
        intervals: Intervals of any number of resources.
        critical_threshold_minutes: Overlap at which severity turns critical.

    Returns:
        Conflicts grouped by resource (in order of first appearance).

    Raises:
        MalformedIntervalError: If any interval has ``end <= start``.
    """
    ensure_well_formed(intervals)

    by_resource: dict[str, list[int]] = {}
    for index, interval in enumerate(intervals):
        by_resource.setdefault(interval.resource_id, []).append(index)

    conflicts: list[Conflict] = []
    for resource_id, indices in by_resource.items():
        if len(indices) < 2:
            continue
        conflicts.extend(
            detect_conflicts_for_resource(
                resource_id,
                [intervals[i] for i in indices],
                indices,
                critical_threshold_minutes,
            )
        )

    if conflicts:
        logger.info(
            "Detected %d conflicts (%d critical)",
            len(conflicts),
            sum(1 for c in conflicts if c.severity is ConflictSeverity.CRITICAL),
        )
    return conflicts


__all__ = [
    "CRITICAL_OVERLAP_THRESHOLD_MINUTES",
    "Conflict",
    "ConflictSeverity",
    "detect_conflicts",
    "detect_conflicts_for_resource",
    "overlap_minutes",
]
