"""Geometry mapper: converts track placement and time span into a rectangle.

Vertical values are pixels relative to the layout origin hour; horizontal
values are percentages of one resource column's width. The minimum height
is a visual floor only and never feeds back into track assignment.
"""

from __future__ import annotations

import math

from tableflow.core.layout.errors import InvalidLayoutError
from tableflow.core.layout.models import Instant, Interval, LayoutOptions, Rectangle
from tableflow.core.layout.timebase import MINUTES_PER_HOUR, duration_minutes, minutes_of_day

_DEFAULT_OPTIONS = LayoutOptions()


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _check_scale(pixels_per_hour: float) -> None:
    if not math.isfinite(pixels_per_hour) or pixels_per_hour <= 0:
        raise InvalidLayoutError(
            f"pixels_per_hour must be positive and finite, got {pixels_per_hour}"
        )


def _check_options(options: LayoutOptions) -> None:
    # LayoutOptions validates on construction; model_construct() skips that.
    _check_scale(options.pixels_per_hour)
    if options.track_gap_percent < 0:
        raise InvalidLayoutError(
            f"track_gap_percent must not be negative, got {options.track_gap_percent}"
        )
    if options.min_height < 0:
        raise InvalidLayoutError(f"min_height must not be negative, got {options.min_height}")


def hours_since_origin(instant: Instant, origin_hour: float) -> float:
    """Fractional hours between ``origin_hour`` and the instant's time of day."""
    return minutes_of_day(instant) / MINUTES_PER_HOUR - origin_hour


def time_to_pixels(instant: Instant, origin_hour: float, pixels_per_hour: float) -> float:
    """Pixel offset of an instant from the top of the view.

    Args:
        instant: Datetime (wall clock is used) or minutes since midnight.
        origin_hour: Hour drawn at offset 0.
        pixels_per_hour: Vertical scale.

    Returns:
        Offset in pixels; negative when the instant precedes the origin.
    """
    _check_scale(pixels_per_hour)
    return hours_since_origin(instant, origin_hour) * pixels_per_hour


def block_height(start: Instant, end: Instant, pixels_per_hour: float) -> float:
    """Unfloored pixel height of ``[start, end)``."""
    _check_scale(pixels_per_hour)
    return duration_minutes(start, end) / MINUTES_PER_HOUR * pixels_per_hour


def track_width_percent(track_count: int, track_gap_percent: float) -> float:
    """Width of one track when ``track_count`` tracks share 100 percent.

    Raises:
        InvalidLayoutError: If ``track_count <= 0`` or the gaps leave no room.
    """
    if track_count <= 0:
        raise InvalidLayoutError(f"track_count must be positive, got {track_count}")
    if track_gap_percent < 0:
        raise InvalidLayoutError(
            f"track_gap_percent must not be negative, got {track_gap_percent}"
        )

    width = (100 - (track_count - 1) * track_gap_percent) / track_count
    if width <= 0:
        raise InvalidLayoutError(
            f"{track_count} tracks with a {track_gap_percent}% gap leave no room for blocks"
        )
    return width


def to_rectangle(
    interval: Interval,
    track_index: int,
    track_count: int,
    options: LayoutOptions | None = None,
) -> Rectangle:
    """Map an interval on a track to its on-screen rectangle.

    Args:
        interval: Interval to place.
        track_index: Zero-based track within the cluster.
        track_count: Number of tracks in the cluster.
        options: Scale and spacing. Defaults to ``LayoutOptions()``.

    Returns:
        Rectangle with ``top``/``height`` in pixels and
        ``left_percent``/``width_percent`` in percent.

    Raises:
        InvalidLayoutError: For non-positive scale or track count, negative
            gap, or a track index outside ``[0, track_count)``.

    Example:
        >>> rect = to_rectangle(booking_930_1030, 1, 2, LayoutOptions())
        >>> rect.top, rect.height, rect.left_percent, rect.width_percent
        (30.0, 60.0, 50.5, 49.5)
    """
    options = options or _DEFAULT_OPTIONS
    _check_options(options)

    width_percent = track_width_percent(track_count, options.track_gap_percent)
    if not 0 <= track_index < track_count:
        raise InvalidLayoutError(
            f"track_index {track_index} is outside [0, {track_count})"
        )

    top = time_to_pixels(interval.start, options.origin_hour, options.pixels_per_hour)
    height = block_height(interval.start, interval.end, options.pixels_per_hour)

    return Rectangle(
        top=top,
        height=max(height, options.min_height),
        left_percent=track_index * (width_percent + options.track_gap_percent),
        width_percent=width_percent,
    )


def pixels_to_time(pixels: float, origin_hour: float, pixels_per_hour: float) -> str:
    """Convert a pixel offset back to an ``HH:MM`` wall-clock string.

    Minutes are rounded to the nearest whole minute.
    """
    _check_scale(pixels_per_hour)
    total_minutes = _round_half_up(
        origin_hour * MINUTES_PER_HOUR + pixels / pixels_per_hour * MINUTES_PER_HOUR
    )
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def snap_to_interval(pixels: float, pixels_per_hour: float, interval_minutes: int = 15) -> float:
    """Snap a pixel offset to the nearest ``interval_minutes`` boundary."""
    _check_scale(pixels_per_hour)
    if interval_minutes <= 0:
        raise InvalidLayoutError(f"interval_minutes must be positive, got {interval_minutes}")

    pixels_per_interval = pixels_per_hour / MINUTES_PER_HOUR * interval_minutes
    return _round_half_up(pixels / pixels_per_interval) * pixels_per_interval


__all__ = [
    "block_height",
    "hours_since_origin",
    "pixels_to_time",
    "snap_to_interval",
    "time_to_pixels",
    "to_rectangle",
    "track_width_percent",
]
