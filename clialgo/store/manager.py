"""In-memory index of tracked files for clialgo."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..core.files import FileEntry
from ..core.topics import DEFAULT_REGISTRY, TopicRegistry
from ..errors import ValidationError

if TYPE_CHECKING:
    from ..storage import FileManager


class FileStore:
    """Index tracked files by name and by topic.

    ``_entries`` is the authoritative name -> entry mapping. ``_by_topic`` is
    derived from it and maps each topic to the names tagged to it, in
    insertion order. Both are changed together, and only after the storage
    collaborator (if any) has accepted the change.

    A store given a storage collaborator starts from what it has saved, so
    the first write never drops entries already on disk.
    """

    def __init__(
        self,
        storage: FileManager | None = None,
        registry: TopicRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self.storage = storage
        self.registry = registry
        self._entries: dict[str, FileEntry] = {}
        self._by_topic: dict[str, dict[str, None]] = {}
        if storage is not None:
            self._load(storage)

    @classmethod
    def from_storage(
        cls, storage: FileManager, registry: TopicRegistry = DEFAULT_REGISTRY
    ) -> FileStore:
        """Build a store from the entries saved by ``storage``."""
        return cls(storage=storage, registry=registry)

    def _load(self, storage: FileManager) -> None:
        """Index the saved entries.

        Records tagged to an unknown topic are dropped and the data file is
        rewritten without them.
        """
        dropped = 0
        for entry in storage.load():
            if not self.registry.is_valid_topic(entry.topic):
                logger.warning(
                    f"Dropping {entry.name}: {entry.topic} is not a valid topic"
                )
                dropped += 1
                continue
            self._insert(entry)
        if dropped:
            storage.recreate_all(self.list_all())
        logger.debug(f"Loaded {len(self)} entries from storage")

    def add_entry(self, name: str, entry: FileEntry) -> bool:
        """Track ``entry`` under ``name``.

        Returns:
            False if the name is already tracked or the data file could not
            be written, True otherwise.

        Raises:
            ValidationError: If ``name`` is not the name of ``entry``.
        """
        if name != entry.name:
            raise ValidationError(
                f"Cannot track {entry.name} under a different name {name!r}"
            )
        if self.is_repeated_note(name):
            logger.debug(f"Refusing to add {name}: already tracked")
            return False
        if self.storage is not None and not self.storage.persist_add(entry):
            return False
        self._insert(entry)
        logger.debug(f"Added {name} to {entry.topic}")
        return True

    def remove_entry(self, name: str) -> bool:
        """Stop tracking the entry called ``name``.

        Returns:
            False if the name is not tracked or the data file could not be
            written, True otherwise.
        """
        if not self.is_repeated_note(name):
            return False
        if self.storage is not None and not self.storage.persist_remove(name):
            return False
        entry = self._entries.pop(name)
        names = self._by_topic[entry.topic]
        del names[name]
        if not names:
            del self._by_topic[entry.topic]
        logger.debug(f"Removed {name} from {entry.topic}")
        return True

    def is_repeated_note(self, name: str) -> bool:
        return name in self._entries

    def get(self, name: str) -> FileEntry | None:
        return self._entries.get(name)

    def get_entries_by_topic(self, topic: str) -> list[FileEntry]:
        """Return the entries tagged to ``topic`` in insertion order."""
        return [self._entries[name] for name in self._by_topic.get(topic, {})]

    def list_all(self) -> list[FileEntry]:
        return list(self._entries.values())

    def filter_by_importance(
        self, threshold: int, topic: str | None = None
    ) -> list[FileEntry]:
        """Return entries at least as important as ``threshold``.

        Args:
            threshold: Minimum importance to keep.
            topic: Optional topic to restrict the search to.

        Returns:
            Matching entries, most important first. Ties keep insertion order.
        """
        candidates = (
            self.get_entries_by_topic(topic) if topic is not None else self.list_all()
        )
        matches = [entry for entry in candidates if entry.importance >= threshold]
        return sorted(matches, key=lambda entry: entry.importance, reverse=True)

    def _insert(self, entry: FileEntry) -> None:
        self._entries[entry.name] = entry
        self._by_topic.setdefault(entry.topic, {})[entry.name] = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries
