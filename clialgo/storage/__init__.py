"""Persistence for clialgo.

This module handles saving and loading tracked files to the YAML data file.
"""

from .file_manager import DATA_FORMAT_VERSION, FileManager

__all__ = [
    "FileManager",
    "DATA_FORMAT_VERSION",
]
