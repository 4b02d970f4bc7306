"""Utility functions for clialgo."""

from __future__ import annotations

from rich.console import Console

from .core.files import FileEntry

console = Console()


def describe_entry(index: int, entry: FileEntry) -> str:
    """Render one numbered line of an entry listing."""
    return (
        f"{index}. {entry.name} [{entry.topic}] "
        f"({entry.kind.value}, importance {entry.importance})"
    )
