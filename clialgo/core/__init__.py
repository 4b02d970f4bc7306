"""Core data types for clialgo.

This module contains the topic taxonomy and the tracked file records.
"""

from .files import (
    DEFAULT_IMPORTANCE,
    MAX_IMPORTANCE,
    MIN_IMPORTANCE,
    FileEntry,
    FileKind,
    build_entry,
    resolve_file_kind,
    validate_importance,
    validate_name,
)
from .topics import DEFAULT_REGISTRY, TOPICS, TopicRegistry, is_valid_topic

__all__ = [
    "TOPICS",
    "TopicRegistry",
    "DEFAULT_REGISTRY",
    "is_valid_topic",
    "FileEntry",
    "FileKind",
    "build_entry",
    "resolve_file_kind",
    "validate_importance",
    "validate_name",
    "DEFAULT_IMPORTANCE",
    "MIN_IMPORTANCE",
    "MAX_IMPORTANCE",
]
