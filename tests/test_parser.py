"""Tests for command line parsing."""

from __future__ import annotations

import pytest

from clialgo.commands import (
    AddCommand,
    ExitCommand,
    ExportCommand,
    FilterCommand,
    HelpCommand,
    InvalidCommand,
    ListCommand,
    RemoveCommand,
    parse_command,
)
from clialgo.commands.parser import split_fields
from clialgo.errors import ParseError


class TestSplitFields:
    """Test splitting of prefixed fields."""

    def test_fields_with_spaces(self) -> None:
        assert split_fields("n/binary search t/SORTING") == {
            "n": "binary search",
            "t": "SORTING",
        }

    def test_slash_inside_value(self) -> None:
        assert split_fields("n/a/b t/SORTING") == {"n": "a/b", "t": "SORTING"}

    def test_repeated_prefix(self) -> None:
        with pytest.raises(ParseError):
            split_fields("n/a n/b")

    def test_leading_text(self) -> None:
        with pytest.raises(ParseError):
            split_fields("queue n/a")


class TestParseCommand:
    """Test parse_command."""

    def test_add(self) -> None:
        assert parse_command("add n/queue t/LINKED_LIST") == AddCommand(
            name="queue", topic="LINKED_LIST"
        )

    def test_add_with_importance(self) -> None:
        assert parse_command("  add t/SORTING n/merge  i/8 ") == AddCommand(
            name="merge", topic="SORTING", importance=8
        )

    def test_add_keeps_unknown_topic_for_execution(self) -> None:
        command = parse_command("add n/bit t/FENWICK_TREE")
        assert command == AddCommand(name="bit", topic="FENWICK_TREE")

    def test_remove(self) -> None:
        assert parse_command("remove n/queue") == RemoveCommand(name="queue")

    def test_argument_less_commands(self) -> None:
        assert parse_command("list") == ListCommand()
        assert parse_command("export") == ExportCommand()
        assert parse_command("exit") == ExitCommand()
        assert parse_command("help") == HelpCommand()

    def test_help_for_keyword(self) -> None:
        assert parse_command("help c/add") == HelpCommand(command="add")

    def test_filter_by_topic(self) -> None:
        assert parse_command("filter k/topic t/SORTING") == FilterCommand(
            keyword="topic", topic="SORTING"
        )

    def test_filter_by_importance(self) -> None:
        assert parse_command("filter k/importance i/7") == FilterCommand(
            keyword="importance", topic=None, threshold=7
        )
        assert parse_command("filter k/importance t/SORTING") == FilterCommand(
            keyword="importance", topic="SORTING", threshold=1
        )

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "delete n/queue",
            "ADD n/queue t/SORTING",
            "add n/queue",
            "add t/SORTING",
            "add n/ t/SORTING",
            "add n/queue t/SORTING i/0",
            "add n/queue t/SORTING i/many",
            "add n/queue t/SORTING x/1",
            "add n/../victim t/SORTING",
            "add n/notes/queue t/SORTING",
            "add n/notes\\queue t/SORTING",
            "add n/.. t/SORTING",
            "remove",
            "remove queue",
            "list all",
            "list t/SORTING",
            "exit now",
            "filter t/SORTING",
            "filter k/name t/SORTING",
            "filter k/topic",
            "filter k/topic t/SORTING i/3",
            "help c/",
            "help c/delete",
        ],
    )
    def test_invalid_lines(self, line: str) -> None:
        command = parse_command(line)
        assert isinstance(command, InvalidCommand)
        assert command.reason
