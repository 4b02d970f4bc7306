"""Exception types for clialgo.

Every error raised by the core is a subclass of ``ClialgoError`` and is
recovered at the command boundary by the dispatcher.
"""

from __future__ import annotations


class ClialgoError(Exception):
    """Base class for all recoverable clialgo errors."""


class ParseError(ClialgoError):
    """A command line could not be parsed (unknown keyword, bad or missing field)."""


class ValidationError(ClialgoError):
    """A value failed validation (importance out of range, bad record, ...)."""


class PersistenceError(ClialgoError):
    """Writing the data file failed."""


class ExportError(ClialgoError):
    """Exporting a single buffered entry failed."""

    def __init__(self, entry_name: str, reason: str) -> None:
        super().__init__(f"{entry_name}: {reason}")
        self.entry_name = entry_name
        self.reason = reason
