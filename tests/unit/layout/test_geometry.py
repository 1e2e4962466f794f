"""Unit tests for the geometry mapper."""

from __future__ import annotations

import pytest

from tableflow.core.layout import (
    InvalidLayoutError,
    LayoutOptions,
    block_height,
    hours_since_origin,
    pixels_to_time,
    snap_to_interval,
    time_to_pixels,
    to_rectangle,
)
from tableflow.core.layout.geometry import track_width_percent


class TestTimeToPixels:
    """Tests for vertical placement."""

    def test_origin_is_zero(self, at) -> None:
        assert time_to_pixels(at("09:00"), 9, 60) == 0

    def test_fractional_hours(self, at) -> None:
        assert time_to_pixels(at("10:30"), 9, 60) == pytest.approx(90)
        assert time_to_pixels(at("09:15"), 9, 80) == pytest.approx(20)

    def test_before_origin_is_negative(self, at) -> None:
        assert time_to_pixels(at("08:00"), 9, 60) == pytest.approx(-60)

    def test_numeric_minutes(self) -> None:
        assert hours_since_origin(570, 9) == pytest.approx(0.5)
        assert time_to_pixels(570, 9, 60) == pytest.approx(30)

    def test_rejects_non_positive_scale(self, at) -> None:
        with pytest.raises(InvalidLayoutError):
            time_to_pixels(at("10:00"), 9, 0)


class TestBlockHeight:
    """Tests for raw block height."""

    def test_one_hour(self, at) -> None:
        assert block_height(at("09:00"), at("10:00"), 60) == pytest.approx(60)

    def test_short_booking_not_floored(self, at) -> None:
        assert block_height(at("09:00"), at("09:10"), 60) == pytest.approx(10)

    def test_rejects_negative_scale(self, at) -> None:
        with pytest.raises(InvalidLayoutError):
            block_height(at("09:00"), at("10:00"), -5)


class TestTrackWidth:
    """Tests for horizontal track width."""

    def test_single_track_full_width(self) -> None:
        assert track_width_percent(1, 1) == pytest.approx(100)

    def test_two_tracks_with_gap(self) -> None:
        assert track_width_percent(2, 1) == pytest.approx(49.5)

    @pytest.mark.parametrize("track_count", [1, 2, 3, 5, 8])
    @pytest.mark.parametrize("gap", [0, 0.5, 1, 2.5])
    def test_widths_and_gaps_fill_column(self, track_count: int, gap: float) -> None:
        width = track_width_percent(track_count, gap)
        assert width * track_count + (track_count - 1) * gap == pytest.approx(100)

    @pytest.mark.parametrize("track_count", [0, -1])
    def test_rejects_non_positive_track_count(self, track_count: int) -> None:
        with pytest.raises(InvalidLayoutError):
            track_width_percent(track_count, 1)

    def test_rejects_gap_leaving_no_room(self) -> None:
        with pytest.raises(InvalidLayoutError):
            track_width_percent(3, 50)


class TestToRectangle:
    """Tests for to_rectangle."""

    def test_second_track_of_two(self, booking, layout_options) -> None:
        rect = to_rectangle(booking("09:30", "10:30"), 1, 2, layout_options)

        assert rect.top == pytest.approx(30)
        assert rect.height == pytest.approx(60)
        assert rect.width_percent == pytest.approx(49.5)
        assert rect.left_percent == pytest.approx(50.5)

    def test_first_track_starts_at_left_edge(self, booking, layout_options) -> None:
        rect = to_rectangle(booking("09:00", "10:00"), 0, 3, layout_options)
        assert rect.left_percent == 0

    def test_minimum_height_floor(self, booking, layout_options) -> None:
        rect = to_rectangle(booking("09:00", "09:05"), 0, 1, layout_options)
        assert rect.height == pytest.approx(20)

    def test_custom_minimum_height(self, booking) -> None:
        options = LayoutOptions(min_height=0)
        rect = to_rectangle(booking("09:00", "09:05"), 0, 1, options)
        assert rect.height == pytest.approx(5)

    def test_defaults_when_no_options(self, booking) -> None:
        rect = to_rectangle(booking("11:00", "12:00"), 0, 1)

        assert rect.top == pytest.approx(120)
        assert rect.width_percent == pytest.approx(100)

    def test_rejects_non_positive_track_count(self, booking, layout_options) -> None:
        with pytest.raises(InvalidLayoutError):
            to_rectangle(booking("09:00", "10:00"), 0, 0, layout_options)

    @pytest.mark.parametrize("track_index", [-1, 2])
    def test_rejects_track_index_out_of_range(self, booking, layout_options, track_index) -> None:
        with pytest.raises(InvalidLayoutError):
            to_rectangle(booking("09:00", "10:00"), track_index, 2, layout_options)

    def test_rejects_unvalidated_bad_options(self, booking) -> None:
        """Options built without validation are still checked."""
        options = LayoutOptions.model_construct(
            origin_hour=9, pixels_per_hour=0, track_gap_percent=1, min_height=20
        )
        with pytest.raises(InvalidLayoutError):
            to_rectangle(booking("09:00", "10:00"), 0, 1, options)

        options = LayoutOptions.model_construct(
            origin_hour=9, pixels_per_hour=60, track_gap_percent=-1, min_height=20
        )
        with pytest.raises(InvalidLayoutError):
            to_rectangle(booking("09:00", "10:00"), 0, 1, options)

    def test_rejects_infinite_scale(self, at) -> None:
        with pytest.raises(InvalidLayoutError):
            time_to_pixels(at("10:00"), 9, float("inf"))


class TestLayoutOptions:
    """Tests for LayoutOptions validation."""

    def test_defaults(self) -> None:
        options = LayoutOptions()

        assert options.origin_hour == 9
        assert options.pixels_per_hour == 60
        assert options.track_gap_percent == 1
        assert options.min_height == 20

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"pixels_per_hour": 0},
            {"pixels_per_hour": -10},
            {"track_gap_percent": -1},
            {"min_height": -1},
            {"pixels_per_hour": float("inf")},
            {"pixels_per_hour": float("nan")},
            {"track_gap_percent": float("nan")},
            {"min_height": float("inf")},
        ],
    )
    def test_rejects_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            LayoutOptions(**kwargs)


class TestPixelConversions:
    """Tests for pixel-to-time helpers."""

    def test_pixels_to_time(self) -> None:
        assert pixels_to_time(0, 9, 60) == "09:00"
        assert pixels_to_time(90, 9, 60) == "10:30"
        assert pixels_to_time(45, 9, 120) == "09:23"

    def test_pixels_to_time_carries_rounded_minutes(self) -> None:
        assert pixels_to_time(59.9, 9, 60) == "10:00"

    def test_snap_to_quarter_hour(self) -> None:
        assert snap_to_interval(20, 60) == pytest.approx(15)
        assert snap_to_interval(23, 60) == pytest.approx(30)
        assert snap_to_interval(44, 60, interval_minutes=30) == pytest.approx(30)

    def test_snap_rejects_non_positive_interval(self) -> None:
        with pytest.raises(InvalidLayoutError):
            snap_to_interval(20, 60, interval_minutes=0)
