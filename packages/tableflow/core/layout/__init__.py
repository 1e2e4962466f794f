"""Booking overlap layout.

Groups overlapping bookings, places them on parallel tracks and maps each
one to a rectangle for day and week calendar views.
"""

from tableflow.core.layout.engine import compute_layout, filter_by_date
from tableflow.core.layout.errors import InvalidLayoutError, LayoutError, MalformedIntervalError
from tableflow.core.layout.geometry import (
    block_height,
    hours_since_origin,
    pixels_to_time,
    snap_to_interval,
    time_to_pixels,
    to_rectangle,
)
from tableflow.core.layout.grouping import group_intervals, ranges_overlap
from tableflow.core.layout.models import (
    Cluster,
    Interval,
    LayoutOptions,
    PositionedInterval,
    Rectangle,
    TrackAssignment,
)
from tableflow.core.layout.timebase import ensure_well_formed
from tableflow.core.layout.tracks import assign_tracks, max_concurrency

__all__ = [
    "Cluster",
    "Interval",
    "InvalidLayoutError",
    "LayoutError",
    "LayoutOptions",
    "MalformedIntervalError",
    "PositionedInterval",
    "Rectangle",
    "TrackAssignment",
    "assign_tracks",
    "block_height",
    "compute_layout",
    "ensure_well_formed",
    "filter_by_date",
    "group_intervals",
    "hours_since_origin",
    "max_concurrency",
    "pixels_to_time",
    "ranges_overlap",
    "snap_to_interval",
    "time_to_pixels",
    "to_rectangle",
]
