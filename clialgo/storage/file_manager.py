"""YAML persistence of tracked files for clialgo."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ..core.files import FileEntry
from ..errors import PersistenceError, ValidationError

DATA_FORMAT_VERSION = 1


class FileManager:
    """Persist a snapshot of every tracked file to a YAML data file.

    The manager keeps its own copy of the last snapshot that reached the disk.
    That copy only changes after a write succeeds, so a failed write leaves
    both the file and the snapshot as they were.
    """

    def __init__(self, data_file: Path) -> None:
        self.data_file = Path(data_file)
        self._snapshot: dict[str, FileEntry] = {}

    def load(self) -> list[FileEntry]:
        """Read the data file.

        Missing files load as empty. Unreadable files and invalid records are
        logged and skipped.

        Returns:
            Entries in the order they were stored.
        """
        self._snapshot = {}
        if not self.data_file.exists():
            logger.debug(f"No data file at {self.data_file}, starting empty")
            return []

        try:
            with self.data_file.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Could not read data file {self.data_file}: {e}")
            return []

        records = data.get("files", []) if isinstance(data, dict) else []
        if not isinstance(records, list):
            logger.warning(f"Data file {self.data_file} has no file list, ignoring it")
            return []

        for record in records:
            if not isinstance(record, dict):
                logger.warning(f"Skipping malformed record: {record!r}")
                continue
            try:
                entry = FileEntry.from_dict(record)
            except ValidationError as e:
                logger.warning(f"Skipping record: {e}")
                continue
            if entry.name in self._snapshot:
                logger.warning(f"Skipping repeated record for {entry.name}")
                continue
            self._snapshot[entry.name] = entry

        return list(self._snapshot.values())

    def persist_add(self, entry: FileEntry) -> bool:
        """Write the snapshot with ``entry`` appended."""
        snapshot = dict(self._snapshot)
        snapshot[entry.name] = entry
        return self._commit(snapshot)

    def persist_remove(self, name: str) -> bool:
        """Write the snapshot without the entry called ``name``."""
        snapshot = {key: value for key, value in self._snapshot.items() if key != name}
        return self._commit(snapshot)

    def recreate_all(self, entries: Iterable[FileEntry]) -> bool:
        """Rewrite the data file from scratch with ``entries``."""
        return self._commit({entry.name: entry for entry in entries})

    def _commit(self, snapshot: dict[str, FileEntry]) -> bool:
        try:
            self._write(snapshot.values())
        except PersistenceError as e:
            logger.error(str(e))
            return False
        self._snapshot = snapshot
        return True

    def _write(self, entries: Iterable[FileEntry]) -> None:
        payload: dict[str, Any] = {
            "version": DATA_FORMAT_VERSION,
            "files": [entry.to_dict() for entry in entries],
        }
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            self.data_file.write_text(
                yaml.safe_dump(payload, sort_keys=False, default_flow_style=False),
                encoding="utf-8",
            )
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(
                f"Failed to write data file {self.data_file}: {e}"
            ) from e
        logger.debug(f"Saved {len(payload['files'])} entries to {self.data_file}")
