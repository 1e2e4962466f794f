"""Instant arithmetic and batch validation.

A batch is either all ``datetime`` (all naive or all aware) or all numeric
minutes. Mixing kinds would make ordering undefined, so it is rejected
together with zero and negative durations and with NaN or infinite
minute values.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import datetime

from tableflow.core.layout.errors import MalformedIntervalError
from tableflow.core.layout.models import Instant, Interval

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60.0


def _kind(instant: Instant) -> str:
    if isinstance(instant, datetime):
        return "aware" if instant.utcoffset() is not None else "naive"
    return "minutes"


def ensure_well_formed(intervals: Sequence[Interval]) -> None:
    """Reject a batch containing any interval that cannot be laid out.

    Args:
        intervals: Intervals of one layout call.

    Raises:
        MalformedIntervalError: If any interval has ``end <= start``, a
            numeric instant is NaN or infinite, or the batch mixes instant
            kinds. ``indices`` lists every offender.
    """
    if not intervals:
        return

    expected = _kind(intervals[0].start)
    mixed = [
        i
        for i, iv in enumerate(intervals)
        if _kind(iv.start) != expected or _kind(iv.end) != expected
    ]
    if mixed:
        logger.warning(
            "Rejecting batch of %d intervals: mixed instant kinds at %s", len(intervals), mixed
        )
        raise MalformedIntervalError(
            f"Intervals mix instant kinds (expected {expected}) at positions {mixed}",
            indices=mixed,
        )

    if expected == "minutes":
        unbounded = [
            i
            for i, iv in enumerate(intervals)
            if not (math.isfinite(iv.start) and math.isfinite(iv.end))
        ]
        if unbounded:
            logger.warning(
                "Rejecting batch of %d intervals: non-finite instants at %s",
                len(intervals),
                unbounded,
            )
            raise MalformedIntervalError(
                f"Interval instants must be finite; offending positions {unbounded}",
                indices=unbounded,
            )

    inverted = [i for i, iv in enumerate(intervals) if iv.end <= iv.start]
    if inverted:
        logger.warning(
            "Rejecting batch of %d intervals: end <= start at %s", len(intervals), inverted
        )
        raise MalformedIntervalError(
            f"Intervals must end after they start; offending positions {inverted}",
            indices=inverted,
        )


def duration_minutes(start: Instant, end: Instant) -> float:
    """Length of ``[start, end)`` in minutes."""
    if isinstance(start, datetime) and isinstance(end, datetime):
        return (end - start).total_seconds() / 60.0
    return float(end) - float(start)


def minutes_of_day(instant: Instant) -> float:
    """Minutes since midnight for a datetime's wall clock, or the raw number."""
    if isinstance(instant, datetime):
        return (
            instant.hour * 60
            + instant.minute
            + instant.second / 60.0
            + instant.microsecond / 60_000_000.0
        )
    return float(instant)


__all__ = [
    "MINUTES_PER_HOUR",
    "duration_minutes",
    "ensure_well_formed",
    "minutes_of_day",
]
