"""Configuration management for clialgo.

This module handles loading and validating configuration from .clialgo/config.yaml files.
"""

from .loader import CONFIG_DIR, config_path, load_config, save_config
from .schema import Config, ExportConfig, NotesConfig, StorageConfig

__all__ = [
    "Config",
    "StorageConfig",
    "ExportConfig",
    "NotesConfig",
    "CONFIG_DIR",
    "config_path",
    "load_config",
    "save_config",
]
