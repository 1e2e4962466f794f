"""Shared pytest fixtures for tableflow tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from tableflow.core.layout import Interval, LayoutOptions

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Interval Fixtures
# ============================================================================


@pytest.fixture
def day() -> datetime:
    """Midnight of the day used by datetime-based tests."""
    return datetime(2026, 3, 14)


@pytest.fixture
def at(day: datetime) -> Callable[[str], datetime]:
    """Build a datetime on the test day from ``"HH:MM"``."""

    def _at(hhmm: str) -> datetime:
        hours, minutes = (int(part) for part in hhmm.split(":"))
        return day.replace(hour=hours, minute=minutes)

    return _at


@pytest.fixture
def booking(at: Callable[[str], datetime]) -> Callable[..., Interval]:
    """Build an interval from ``"HH:MM"`` strings."""

    def _booking(start: str, end: str, resource_id: str = "T1", payload: object = None) -> Interval:
        return Interval(resource_id=resource_id, start=at(start), end=at(end), payload=payload)

    return _booking


@pytest.fixture
def scenario_a(booking: Callable[..., Interval]) -> list[Interval]:
    """9:00-10:00, 9:30-10:30, 10:00-11:00 on one table."""
    return [
        booking("09:00", "10:00", payload="b1"),
        booking("09:30", "10:30", payload="b2"),
        booking("10:00", "11:00", payload="b3"),
    ]


@pytest.fixture
def layout_options() -> LayoutOptions:
    """Default calendar scale: 9:00 origin, 60 px/hour, 1% gap."""
    return LayoutOptions(origin_hour=9, pixels_per_hour=60, track_gap_percent=1)


def minutes(start: float, end: float, resource_id: str = "T1", payload: object = None) -> Interval:
    """Interval over numeric minutes-since-midnight instants."""
    return Interval(resource_id=resource_id, start=start, end=end, payload=payload)


@pytest.fixture
def make_minutes() -> Callable[..., Interval]:
    """Factory for minute-based intervals."""
    return minutes
