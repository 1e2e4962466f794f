"""Exceptions raised by the layout engine."""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for layout engine errors."""


class MalformedIntervalError(LayoutError):
    """One or more intervals in a batch cannot be laid out.

    The whole batch is rejected; nothing is silently dropped.

    Attributes:
        indices: Input positions of the offending intervals.
    """

    def __init__(self, message: str, indices: list[int] | None = None) -> None:
        super().__init__(message)
        self.indices = list(indices or [])


class InvalidLayoutError(LayoutError):
    """Layout parameters outside their valid range (scale, gap, track count)."""


__all__ = [
    "InvalidLayoutError",
    "LayoutError",
    "MalformedIntervalError",
]
