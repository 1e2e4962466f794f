"""Configuration management for tableflow."""

from tableflow.core.config.loader import (
    configure_logging,
    detect_format,
    load_config,
    load_engine_config,
)
from tableflow.core.config.models import ConflictConfig, EngineConfig, LoggingConfig

__all__ = [
    "ConflictConfig",
    "EngineConfig",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_config",
    "load_engine_config",
]
