"""Execute parsed commands against the file store and the export buffer."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from ..core.files import DEFAULT_IMPORTANCE, build_entry, resolve_file_kind
from ..errors import ClialgoError
from ..export import Buffer
from ..store import FileStore
from ..ui import Ui
from .models import (
    FILTER_BY_TOPIC,
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


class CommandDispatcher:
    """Run one command at a time against the store and the buffer.

    ``execute`` returns False only for ``exit``, which tells ``run`` to stop
    reading lines.
    """

    def __init__(
        self,
        store: FileStore,
        buffer: Buffer,
        ui: Ui,
        root_dir: Path,
        default_importance: int = DEFAULT_IMPORTANCE,
    ) -> None:
        self.store = store
        self.buffer = buffer
        self.ui = ui
        self.root_dir = Path(root_dir)
        self.default_importance = default_importance
        self._lock = threading.Lock()
        self._handlers: dict[type, Callable[[Any], bool]] = {
            AddCommand: self._add,
            RemoveCommand: self._remove,
            ListCommand: self._list,
            FilterCommand: self._filter,
            ExportCommand: self._export,
            HelpCommand: self._help,
            ExitCommand: self._exit,
            InvalidCommand: self._invalid,
            InvalidTopicCommand: self._invalid_topic,
        }

    def run(self, lines: Iterable[str]) -> int:
        """Process ``lines`` until ``exit`` or the end of input.

        Returns:
            Process exit status.
        """
        self.ui.print_welcome_message()
        for line in lines:
            if not line.strip():
                continue
            if not self.dispatch(line):
                break
        return 0

    def dispatch(self, line: str) -> bool:
        """Parse and execute one line."""
        return self.execute(parse_command(line))

    def execute(self, command: Command) -> bool:
        """Execute ``command``.

        Errors raised while executing are reported to the user and never
        stop the loop.

        Returns:
            False when the command loop should stop, True otherwise.
        """
        handler = self._handlers[type(command)]
        with self._lock:
            try:
                return handler(command)
            except ClialgoError as e:
                logger.error(f"Command {command!r} failed: {e}")
                self.ui.print_invalid_command()
                return True

    def _add(self, command: AddCommand) -> bool:
        kind = resolve_file_kind(self.root_dir, command.name)
        if kind is None:
            self.ui.print_file_does_not_exist(command.name)
            return True

        if not self.store.registry.is_valid_topic(command.topic):
            return self._invalid_topic(InvalidTopicCommand(topic=command.topic))

        if self.store.is_repeated_note(command.name):
            self.ui.print_note_exists(command.name)
            return True

        importance = (
            command.importance
            if command.importance is not None
            else self.default_importance
        )
        entry = build_entry(command.name, command.topic, kind, importance)
        if not self.store.add_entry(command.name, entry):
            logger.error(f"Could not save {command.name}, nothing was added")
            self.ui.print_invalid_command()
            return True

        self.ui.print_add_success(command.name, command.topic)
        return True

    def _remove(self, command: RemoveCommand) -> bool:
        if self.store.remove_entry(command.name):
            self.ui.print_remove_success(command.name)
        else:
            self.ui.print_remove_fail()
        return True

    def _list(self, command: ListCommand) -> bool:
        entries = self.store.list_all()
        self.buffer.update_buffer(entries)
        if not entries:
            self.ui.print_list_fail()
            return True
        self.ui.print_list_success()
        self.ui.print_entries(entries)
        return True

    def _filter(self, command: FilterCommand) -> bool:
        if command.keyword == FILTER_BY_TOPIC:
            entries = self.store.get_entries_by_topic(command.topic or "")
        else:
            entries = self.store.filter_by_importance(command.threshold, command.topic)
        self.buffer.update_buffer(entries)
        if not entries:
            self.ui.print_filter_fail()
            return True
        self.ui.print_filter_success()
        self.ui.print_entries(entries)
        return True

    def _export(self, command: ExportCommand) -> bool:
        if self.buffer.is_empty():
            self.ui.print_export_empty()
            return True
        report = self.buffer.export_buffer()
        if report.exported:
            self.ui.print_export_success(
                len(report.exported), self.buffer.export_folder
            )
        return True

    def _help(self, command: HelpCommand) -> bool:
        self.ui.print_help(command.command)
        return True

    def _exit(self, command: ExitCommand) -> bool:
        self.ui.print_exit_message()
        return False

    def _invalid(self, command: InvalidCommand) -> bool:
        self.ui.print_invalid_command()
        return True

    def _invalid_topic(self, command: InvalidTopicCommand) -> bool:
        self.ui.print_add_fail(command.topic)
        return True
