"""User-facing messages for clialgo.

Every message is a block of plain lines framed by a divider. Lines are printed
without rich markup so that text such as ``[add]`` is shown as typed.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from .core.files import FileEntry
from .utils import console as default_console
from .utils import describe_entry

DIVIDER = "=" * 54


class Ui:
    """Print notifications for the command loop."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def _print_block(self, *lines: str) -> None:
        for line in (DIVIDER, *lines, DIVIDER):
            self.console.print(
                line, markup=False, highlight=False, emoji=False, soft_wrap=True
            )

    def print_welcome_message(self) -> None:
        self._print_block("Hello! Welcome to CLIAlgo Notes!")

    def print_exit_message(self) -> None:
        self._print_block("Thank you for using CLIAlgo! Study hard!")

    def print_help_page(self) -> None:
        self._print_block(
            "The available COMMAND_TYPE(s) are:",
            "[add]: add note",
            "[remove]: remove note",
            "[list]: displays all notes",
            "[filter]: filters notes by topic",
            "[export]: exports the last listed or filtered notes",
            "[exit]: close the application",
            "For more help on a specific command, type `help c/COMMAND_TYPE`",
        )

    def print_add_success(self, name: str, topic: str) -> None:
        self._print_block(f"Successfully added {name} into {topic}.")

    def print_file_does_not_exist(self, name: str) -> None:
        self._print_block(
            f"Unsuccessful! Neither {name}.txt nor {name}.cpp exists in the root directory.",
            "Type 'help c/add' for assistance.",
        )

    def print_add_fail(self, topic: str) -> None:
        """Report that ``topic`` is not part of the taxonomy."""
        self._print_block(
            f"Unsuccessful! {topic} is not a topic in CS2040C.",
            "Type 'help c/add' for assistance.",
        )

    def print_note_exists(self, name: str) -> None:
        self._print_block(
            f"Unsuccessful! {name} already exists in CLIAlgo.",
            "Remove it first or choose another NAME.",
        )

    def print_remove_success(self, name: str) -> None:
        self._print_block(f"Successfully removed {name}.")

    def print_remove_fail(self) -> None:
        self._print_block("Unsuccessful!", "Type 'help c/remove' for assistance.")

    def print_list_success(self) -> None:
        self._print_block("Here are all your notes:")

    def print_list_fail(self) -> None:
        self._print_block("You have no notes!", "Type 'help c/list' for assistance.")

    def print_filter_success(self) -> None:
        self._print_block("Here are the filtered notes:")

    def print_filter_fail(self) -> None:
        self._print_block("Unsuccessful!", "Type 'help c/filter' for assistance.")

    def print_entries(self, entries: Sequence[FileEntry]) -> None:
        for index, entry in enumerate(entries, 1):
            self.console.print(
                describe_entry(index, entry),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )

    def print_export_folder_missing(self) -> None:
        self._print_block(
            "The export folder seems to be missing.",
            "The export folder has been recreated.",
            "Try the `export` command again.",
        )

    def print_file_missing(self, name: str) -> None:
        self._print_block("File missing from root directory.", f"Skipped {name}.")

    def print_export_fail(self, name: str, reason: str) -> None:
        self._print_block(f"Could not export {name}.", reason)

    def print_export_success(self, count: int, folder: Path) -> None:
        self._print_block(f"Exported {count} file(s) to {folder}.")

    def print_export_empty(self) -> None:
        self._print_block(
            "There is nothing to export.",
            "Use `list` or `filter` to choose the notes to export.",
        )

    def print_invalid_command(self) -> None:
        self._print_block(
            "Invalid command!",
            "Type 'help' to see the available commands.",
        )

    def print_help_add(self) -> None:
        self._print_block(
            "This function adds a note and tags it to a topic.",
            "The syntax for the 'add' command is: add n/NAME t/TOPIC i/IMPORTANCE.",
            "NAME refers to the notes' file name.",
            "TOPIC refers to the topic that NAME will be tagged to.",
            "IMPORTANCE is optional and ranges from 1 to 10 (default 5).",
            "Case sensitive. NAME and TOPIC fields must be non-empty.",
            "Invalid NAME or TOPIC will cause an error.",
        )

    def print_help_remove(self) -> None:
        self._print_block(
            "This function removes a note from the tagged topic.",
            "The syntax for the 'remove' command is: remove n/NAME.",
            "NAME refers to the notes' file name.",
            "'n/' must be included else NAME will not be read.",
            "Invalid NAME will cause an error.",
        )

    def print_help_list(self) -> None:
        self._print_block(
            "This function lists all stored notes.",
            "The syntax for the 'list' command is: list.",
            "Command should only contain one word (i.e. no extensions).",
        )

    def print_help_filter(self) -> None:
        self._print_block(
            "This function filters by topic/importance and topic name.",
            "The syntax for the 'filter' command is: filter k/KEYWORD t/TOPIC_NAME i/IMPORTANCE",
            "KEYWORD has to be either 'topic' or 'importance'.",
            "TOPIC_NAME can be any (one) of the pre-defined topics in CS2040C.",
            "TOPIC_NAME is required for 'topic' and optional for 'importance'.",
            "IMPORTANCE is the minimum importance kept by 'importance' (default 1).",
            "Case sensitive. KEYWORD and TOPIC_NAME fields must be non-empty.",
            "Invalid KEYWORD and/or TOPIC_NAME will cause an error.",
        )

    def print_help_export(self) -> None:
        self._print_block(
            "This function exports the notes shown by the last 'list' or 'filter'.",
            "The syntax for the 'export' command is: export.",
            "Files are copied into the export folder.",
            "Command should only contain one word (i.e. no extensions).",
        )

    def print_help_exit(self) -> None:
        self._print_block(
            "This function exits the application.",
            "The syntax for the 'exit' command is: exit.",
            "Command should only contain one word (i.e. no extensions).",
        )

    def print_help(self, keyword: str | None) -> None:
        """Print the help page for ``keyword``, or the overview when None."""
        pages = {
            "add": self.print_help_add,
            "remove": self.print_help_remove,
            "list": self.print_help_list,
            "filter": self.print_help_filter,
            "export": self.print_help_export,
            "help": self.print_help_page,
            "exit": self.print_help_exit,
        }
        pages.get(keyword or "help", self.print_help_page)()
