"""Command parsing and dispatch for clialgo.

This module turns raw input lines into command values and executes them
against the file store and the export buffer.
"""

from .dispatcher import CommandDispatcher
from .models import (
    AddCommand,
    Command,
    ExitCommand,
    ExportCommand,
    FilterCommand,
    HelpCommand,
    InvalidCommand,
    InvalidTopicCommand,
    ListCommand,
    RemoveCommand,
)
from .parser import parse_command

__all__ = [
    "Command",
    "AddCommand",
    "RemoveCommand",
    "ListCommand",
    "FilterCommand",
    "ExportCommand",
    "HelpCommand",
    "ExitCommand",
    "InvalidCommand",
    "InvalidTopicCommand",
    "CommandDispatcher",
    "parse_command",
]
