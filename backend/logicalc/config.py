"""
Configuration loading.

Reads calculator settings from a YAML file into a CalculatorConfig.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import CalculatorConfig

DEFAULT_CONFIG_NAME = "logicalc.yaml"


def load_config(path: Optional[Path] = None) -> CalculatorConfig:
    """
    Load configuration from a YAML file.

    Settings may sit at the top level or under a ``calculator`` key.

    Args:
        path: Path to the YAML file. Defaults to ``logicalc.yaml`` in the
            working directory.

    Returns:
        CalculatorConfig; defaults if the file does not exist.

    Raises:
        ValueError: If the file cannot be parsed or holds invalid settings.
    """
    path = Path(path) if path else Path(DEFAULT_CONFIG_NAME)

    if not path.exists():
        return CalculatorConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"YAML parse error in {path}: {e}") from e

    settings = data.get("calculator", data) if isinstance(data, dict) else data
    if not isinstance(settings, dict):
        raise ValueError(f"Expected a mapping in {path}")

    try:
        return CalculatorConfig(**settings)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}: {e}") from e
