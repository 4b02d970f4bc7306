"""Wiring of a command session for clialgo."""

from __future__ import annotations

from pathlib import Path

from ..commands import CommandDispatcher
from ..config import Config
from ..export import Buffer
from ..storage import FileManager
from ..store import FileStore
from ..ui import Ui


def resolve_path(root: Path, value: str | Path) -> Path:
    """Resolve ``value`` against ``root`` unless it is already absolute."""
    path = Path(value)
    return path if path.is_absolute() else root / path


def open_session(
    root: Path,
    config: Config | None = None,
    ui: Ui | None = None,
) -> CommandDispatcher:
    """Load the tracked files under ``root`` and return a ready dispatcher.

    Args:
        root: Directory holding the notes and code files.
        config: Optional configuration object. Defaults are used when None.
        ui: Optional Ui, mainly for tests capturing output.

    Returns:
        CommandDispatcher owning the store and the export buffer.
    """
    config = config or Config()
    ui = ui or Ui()

    storage = FileManager(resolve_path(root, config.storage.data_file))
    store = FileStore.from_storage(storage)
    buffer = Buffer(root, resolve_path(root, config.export.folder), ui)
    return CommandDispatcher(
        store,
        buffer,
        ui,
        root,
        default_importance=config.notes.default_importance,
    )
