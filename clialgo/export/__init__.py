"""Export operations for clialgo.

This module handles staging filtered files and copying them to the export folder.
"""

from .buffer import Buffer, ExportReport, export_path

__all__ = [
    "Buffer",
    "ExportReport",
    "export_path",
]
