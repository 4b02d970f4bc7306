"""Workspace setup for clialgo."""

from .init import init_workspace
from .session import open_session, resolve_path

__all__ = [
    "init_workspace",
    "open_session",
    "resolve_path",
]
