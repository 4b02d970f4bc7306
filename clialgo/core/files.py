"""Tracked file records for clialgo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from ..errors import ValidationError

MIN_IMPORTANCE = 1
MAX_IMPORTANCE = 10
DEFAULT_IMPORTANCE = 5


class FileKind(Enum):
    """Kind of a tracked file, keyed by its extension."""

    NOTE = "note"
    CODE = "code"

    @property
    def extension(self) -> str:
        return ".txt" if self is FileKind.NOTE else ".cpp"


@dataclass(frozen=True)
class FileEntry:
    """One tracked note or code file."""

    name: str
    path: str
    topic: str
    importance: int = DEFAULT_IMPORTANCE
    kind: FileKind = FileKind.NOTE

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to a dictionary for YAML serialization."""
        return {
            "name": self.name,
            "path": self.path,
            "topic": self.topic,
            "importance": self.importance,
            "kind": self.kind.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileEntry:
        """Create an entry from a stored record.

        Raises:
            ValidationError: If a field is missing or malformed.
        """
        try:
            name = str(data["name"])
            topic = str(data["topic"])
            kind = FileKind(data.get("kind", FileKind.NOTE.value))
            path = str(data.get("path") or f"{name}{kind.extension}")
            importance = validate_importance(data.get("importance", DEFAULT_IMPORTANCE))
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid file record {data!r}: {e}") from e
        validate_name(name)
        if Path(path).name != path:
            raise ValidationError(f"Invalid file record {data!r}: bad path {path!r}")
        return cls(name=name, path=path, topic=topic, importance=importance, kind=kind)


def validate_name(name: str) -> str:
    """Check that ``name`` names a file directly inside the root directory.

    Raises:
        ValidationError: If the name is empty, contains a path separator or
            is ``.`` or ``..``.
    """
    if not name:
        raise ValidationError("Name must be non-empty")
    if "/" in name or "\\" in name or name in (".", ".."):
        raise ValidationError(f"Name must be a plain file name, got {name!r}")
    return name


def validate_importance(value: Any) -> int:
    """Coerce ``value`` into an importance level.

    Args:
        value: Raw importance, usually a string from the command line.

    Returns:
        The importance as an int between MIN_IMPORTANCE and MAX_IMPORTANCE.

    Raises:
        ValidationError: If the value is not an integer or is out of range.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Importance must be an integer, got {value!r}")
    try:
        importance = int(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"Importance must be an integer, got {value!r}") from e
    if not MIN_IMPORTANCE <= importance <= MAX_IMPORTANCE:
        raise ValidationError(
            f"Importance must be between {MIN_IMPORTANCE} and {MAX_IMPORTANCE}, got {importance}"
        )
    return importance


def resolve_file_kind(root: Path, name: str) -> FileKind | None:
    """Find the kind of the file called ``name`` in ``root``.

    ``NAME.txt`` is a note and takes precedence over ``NAME.cpp``.

    Returns:
        The FileKind, or None if neither file exists.
    """
    for kind in (FileKind.NOTE, FileKind.CODE):
        if (root / f"{name}{kind.extension}").is_file():
            return kind
    return None


def build_entry(
    name: str, topic: str, kind: FileKind, importance: int = DEFAULT_IMPORTANCE
) -> FileEntry:
    """Build the entry for a file found in the root directory."""
    return FileEntry(
        name=name,
        path=f"{name}{kind.extension}",
        topic=topic,
        importance=importance,
        kind=kind,
    )
