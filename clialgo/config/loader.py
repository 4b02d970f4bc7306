"""Configuration loader for clialgo."""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from .schema import Config

CONFIG_DIR = ".clialgo"
CONFIG_FILE = "config.yaml"


def config_path(root: Path) -> Path:
    return root / CONFIG_DIR / CONFIG_FILE


def load_config(root: Path) -> Config | None:
    """Load configuration from config.yaml in the .clialgo folder.

    Args:
        root: Path to the notes root directory.

    Returns:
        Config object if config.yaml exists and is valid, None otherwise.
    """
    path = config_path(root)
    if not path.exists():
        return None

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read {path}, using defaults: {e}")
        return None

    if not isinstance(data, dict):
        return None

    try:
        return Config.from_dict(data)
    except ValidationError as e:
        logger.warning(f"Invalid configuration in {path}, using defaults: {e}")
        return None


def save_config(config: Config, root: Path) -> None:
    """Save configuration to config.yaml in the .clialgo folder.

    Args:
        config: Config object to save.
        root: Path to the notes root directory.
    """
    path = config_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_yaml(), encoding="utf-8")
