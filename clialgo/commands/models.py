"""Command values produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.files import MIN_IMPORTANCE

FILTER_BY_TOPIC = "topic"
FILTER_BY_IMPORTANCE = "importance"
FILTER_KEYWORDS = (FILTER_BY_TOPIC, FILTER_BY_IMPORTANCE)


@dataclass(frozen=True)
class AddCommand:
    """Track a file; ``importance`` of None means the configured default."""

    name: str
    topic: str
    importance: int | None = None


@dataclass(frozen=True)
class RemoveCommand:
    name: str


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class FilterCommand:
    """Select entries by topic, or by minimum importance within an optional topic."""

    keyword: str
    topic: str | None = None
    threshold: int = MIN_IMPORTANCE


@dataclass(frozen=True)
class ExportCommand:
    pass


@dataclass(frozen=True)
class HelpCommand:
    command: str | None = None


@dataclass(frozen=True)
class ExitCommand:
    pass


@dataclass(frozen=True)
class InvalidCommand:
    reason: str = ""


@dataclass(frozen=True)
class InvalidTopicCommand:
    topic: str


Command = Union[
    AddCommand,
    RemoveCommand,
    ListCommand,
    FilterCommand,
    ExportCommand,
    HelpCommand,
    ExitCommand,
    InvalidCommand,
    InvalidTopicCommand,
]
