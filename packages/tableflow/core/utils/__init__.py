"""Shared utilities for tableflow."""

from tableflow.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    log_performance,
)

__all__ = [
    "StructuredJSONFormatter",
    "configure_logging",
    "log_performance",
]
