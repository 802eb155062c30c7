"""Configuration loading for history summaries.

Supports YAML and JSON configuration files with schema validation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from container_stats.core.schemas import StatsConfig

logger = logging.getLogger(__name__)


def load_config(path: Path | str) -> StatsConfig:
    """Load and validate a stats configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to YAML or JSON configuration file

    Returns:
        Validated StatsConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported
        pydantic.ValidationError: If config is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    logger.debug(f"Loaded stats configuration from {path}")
    return StatsConfig.model_validate(data or {})
