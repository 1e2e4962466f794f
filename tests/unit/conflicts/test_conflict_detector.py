"""Unit tests for same-resource conflict detection."""

from __future__ import annotations

import pytest

from tableflow.core.conflicts import (
    ConflictSeverity,
    detect_conflicts,
    overlap_minutes,
)
from tableflow.core.layout import MalformedIntervalError


class TestOverlapMinutes:
    """Tests for overlap_minutes."""

    def test_partial_overlap(self, booking) -> None:
        assert overlap_minutes(booking("09:00", "10:00"), booking("09:40", "11:00")) == 20

    def test_containment(self, booking) -> None:
        assert overlap_minutes(booking("09:00", "12:00"), booking("10:00", "10:30")) == 30

    def test_touching(self, booking) -> None:
        assert overlap_minutes(booking("09:00", "10:00"), booking("10:00", "11:00")) == 0

    def test_rounds_to_whole_minutes(self, make_minutes) -> None:
        assert overlap_minutes(make_minutes(0, 10.6), make_minutes(10, 20)) == 1
        assert overlap_minutes(make_minutes(0, 10.2), make_minutes(10, 20)) == 0


class TestDetectConflicts:
    """Tests for detect_conflicts."""

    def test_empty(self) -> None:
        assert detect_conflicts([]) == []

    def test_different_resources_do_not_conflict(self, booking) -> None:
        intervals = [booking("09:00", "10:00", "T1"), booking("09:00", "10:00", "T2")]
        assert detect_conflicts(intervals) == []

    def test_critical_and_warning(self, booking) -> None:
        intervals = [
            booking("09:00", "10:00", "T1"),
            booking("09:30", "11:00", "T1"),
            booking("10:50", "12:00", "T1"),
        ]
        conflicts = detect_conflicts(intervals)

        assert [(c.first_index, c.second_index) for c in conflicts] == [(0, 1), (1, 2)]
        assert [c.overlap_minutes for c in conflicts] == [30, 10]
        assert [c.severity for c in conflicts] == [
            ConflictSeverity.CRITICAL,
            ConflictSeverity.WARNING,
        ]

    def test_threshold_is_inclusive(self, booking) -> None:
        intervals = [booking("09:00", "10:00", "T1"), booking("09:45", "10:30", "T1")]
        (conflict,) = detect_conflicts(intervals)

        assert conflict.overlap_minutes == 15
        assert conflict.severity is ConflictSeverity.CRITICAL

    def test_custom_threshold(self, booking) -> None:
        intervals = [booking("09:00", "10:00", "T1"), booking("09:45", "10:30", "T1")]
        (conflict,) = detect_conflicts(intervals, critical_threshold_minutes=30)

        assert conflict.severity is ConflictSeverity.WARNING

    def test_indices_refer_to_input(self, booking) -> None:
        intervals = [
            booking("12:00", "13:00", "T2"),
            booking("09:30", "10:30", "T1"),
            booking("09:00", "10:00", "T1"),
        ]
        (conflict,) = detect_conflicts(intervals)

        assert conflict.resource_id == "T1"
        assert (conflict.first_index, conflict.second_index) == (2, 1)

    def test_rejects_malformed(self, booking) -> None:
        with pytest.raises(MalformedIntervalError):
            detect_conflicts([booking("10:00", "10:00")])
