"""Double-booking detection per resource."""

from tableflow.core.conflicts.detector import (
    CRITICAL_OVERLAP_THRESHOLD_MINUTES,
    Conflict,
    ConflictSeverity,
    detect_conflicts,
    detect_conflicts_for_resource,
    overlap_minutes,
)

__all__ = [
    "CRITICAL_OVERLAP_THRESHOLD_MINUTES",
    "Conflict",
    "ConflictSeverity",
    "detect_conflicts",
    "detect_conflicts_for_resource",
    "overlap_minutes",
]
