"""Workspace initialization functions for clialgo."""

from __future__ import annotations

from pathlib import Path

from ..config import Config, config_path, save_config


def init_workspace(root: Path, overwrite_config: bool = False) -> Config:
    """Initialize a notes root with its config, data folder and export folder.

    Args:
        root: Directory holding the notes and code files.
        overwrite_config: If True, overwrite an existing config.yaml.

    Returns:
        The configuration that was written.

    Raises:
        FileExistsError: If config.yaml exists and overwrite_config is False.
        OSError: If the directories cannot be created.
    """
    root.mkdir(parents=True, exist_ok=True)

    path = config_path(root)
    if path.exists() and not overwrite_config:
        raise FileExistsError(
            f"config.yaml already exists at {path}. Use --overwrite-config to overwrite."
        )

    config = Config()
    save_config(config, root)

    (root / config.storage.data_file).parent.mkdir(parents=True, exist_ok=True)
    (root / config.export.folder).mkdir(parents=True, exist_ok=True)
    return config
