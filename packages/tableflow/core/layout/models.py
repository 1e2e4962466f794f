"""Data models for the booking overlap layout.

Intervals come in, positioned intervals come out. Everything here is
immutable: a layout pass builds fresh objects and never mutates its input.

Instants are either ``datetime`` values or plain numbers of minutes since
midnight of the laid-out day. One batch must use a single kind.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

Instant = float | datetime


class Interval(BaseModel):
    """A reservation or session occupying a resource for a span of time.

    Attributes:
        resource_id: Opaque resource identifier (e.g. a table id).
        start: Start instant (inclusive).
        end: End instant (exclusive).
        payload: Caller data carried through the layout unchanged.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    resource_id: str = Field(description="Resource the interval is booked on")
    start: Instant = Field(description="Start instant (inclusive)")
    end: Instant = Field(description="End instant (exclusive)")
    payload: Any = Field(default=None, description="Opaque caller data")


@dataclass(frozen=True)
class Cluster:
    """A maximal run of transitively overlapping intervals.

    Attributes:
        intervals: Member intervals in start order.
        indices: Input position of each member, aligned with ``intervals``.
        start: Earliest start in the cluster.
        end: Latest end in the cluster.
    """

    intervals: tuple[Interval, ...]
    indices: tuple[int, ...]
    start: Instant
    end: Instant

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)


class TrackAssignment(NamedTuple):
    """Track placement for one cluster.

    ``tracks`` maps the position of each interval (within the sequence
    handed to the assigner) to its zero-based track.
    """

    tracks: dict[int, int]
    track_count: int


class LayoutOptions(BaseModel):
    """Scale and spacing of a calendar column.

    Attributes:
        origin_hour: Hour of day drawn at the top of the column.
        pixels_per_hour: Vertical pixels per hour.
        track_gap_percent: Horizontal gap between tracks, in percent.
        min_height: Visual height floor for very short bookings, in pixels.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    origin_hour: float = Field(default=9, ge=0, lt=24, description="Hour at the top of the view")
    pixels_per_hour: float = Field(default=60, gt=0, description="Vertical pixels per hour")
    track_gap_percent: float = Field(
        default=1, ge=0, lt=100, description="Gap between tracks (percent of column width)"
    )
    min_height: float = Field(default=20, ge=0, description="Minimum block height in pixels")


class Rectangle(BaseModel):
    """Box for one interval: pixel offsets vertically, percentages horizontally."""

    model_config = ConfigDict(frozen=True)

    top: float
    height: float
    left_percent: float
    width_percent: float


class PositionedInterval(BaseModel):
    """An input interval with its track and rectangle.

    Attributes:
        interval: The original interval, payload included.
        index: Position of the interval in the caller's input list.
        track: Zero-based track within the cluster.
        track_count: Number of tracks in the cluster.
        top: Pixel offset from the layout origin.
        height: Height in pixels (floored to ``min_height``).
        left_percent: Left edge as a percentage of the column width.
        width_percent: Width as a percentage of the column width.
    """

    model_config = ConfigDict(frozen=True)

    interval: Interval
    index: int
    track: int
    track_count: int
    top: float
    height: float
    left_percent: float
    width_percent: float


__all__ = [
    "Cluster",
    "Instant",
    "Interval",
    "LayoutOptions",
    "PositionedInterval",
    "Rectangle",
    "TrackAssignment",
]
