"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from tableflow.core.config.models import EngineConfig
from tableflow.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path("tableflow.yaml")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> Any:
    """Load and return raw data from a JSON or YAML file.

    Format is auto-detected from the file extension. Also used for booking
    and resource input files, so the result may be a list.

    Args:
        path: Path to file (.json, .yaml, or .yml)

    Returns:
        Parsed content (empty YAML files give an empty dict)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
            # safe_load returns None for empty files
            return content if content is not None else {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_engine_config(path: str | Path | None = None) -> EngineConfig:
    """Load and validate engine configuration.

    Args:
        path: Path to config file (.json, .yaml, or .yml).
              Defaults to tableflow.yaml; a missing file gives all defaults.

    Returns:
        Validated EngineConfig

    Raises:
        ValidationError: If config is invalid
    """
    path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return EngineConfig()

    return EngineConfig.model_validate(load_config(path))


def configure_logging(config: EngineConfig | None = None) -> None:
    """Configure Python logging from engine config.

    Args:
        config: EngineConfig instance (loads default if None)
    """
    if config is None:
        config = load_engine_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


__all__ = [
    "configure_logging",
    "detect_format",
    "load_config",
    "load_engine_config",
]
