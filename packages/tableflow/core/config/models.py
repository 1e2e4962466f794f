"""Configuration models for tableflow."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tableflow.core.conflicts.detector import CRITICAL_OVERLAP_THRESHOLD_MINUTES
from tableflow.core.layout.models import LayoutOptions


class ConflictConfig(BaseModel):
    """Double-booking detection settings."""

    model_config = ConfigDict(extra="forbid")

    critical_threshold_minutes: int = Field(
        default=CRITICAL_OVERLAP_THRESHOLD_MINUTES,
        gt=0,
        description="Overlap (minutes) at which a conflict is critical",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stdout when None")


class EngineConfig(BaseModel):
    """Top-level configuration for a layout run."""

    model_config = ConfigDict(extra="forbid")

    layout: LayoutOptions = Field(default_factory=LayoutOptions)
    conflicts: ConflictConfig = Field(default_factory=ConflictConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "ConflictConfig",
    "EngineConfig",
    "LoggingConfig",
]
