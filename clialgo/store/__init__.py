"""Tracked file index for clialgo."""

from .manager import FileStore

__all__ = [
    "FileStore",
]
