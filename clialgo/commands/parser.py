"""Parse raw command lines into command values.

A line is a keyword followed by fields written as ``p/VALUE``, where ``p`` is
a one-letter prefix. A value runs until the next prefix that follows a space,
so names may contain spaces::

    add n/binary search t/SORTING i/8
    filter k/importance t/SORTING i/6
"""

from __future__ import annotations

import re

from loguru import logger

from ..core.files import MIN_IMPORTANCE, validate_importance, validate_name
from ..errors import ParseError, ValidationError
from .models import (
    FILTER_BY_TOPIC,
    FILTER_KEYWORDS,
    AddCommand,
    Command,
    ExitCommand,
    ExportCommand,
    FilterCommand,
    HelpCommand,
    InvalidCommand,
    ListCommand,
    RemoveCommand,
)

NAME = "n"
TOPIC = "t"
IMPORTANCE = "i"
KEYWORD = "k"
COMMAND = "c"

# keyword -> (required prefixes, optional prefixes)
COMMAND_FIELDS: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "add": (frozenset({NAME, TOPIC}), frozenset({IMPORTANCE})),
    "remove": (frozenset({NAME}), frozenset()),
    "list": (frozenset(), frozenset()),
    "filter": (frozenset({KEYWORD}), frozenset({TOPIC, IMPORTANCE})),
    "export": (frozenset(), frozenset()),
    "help": (frozenset(), frozenset({COMMAND})),
    "exit": (frozenset(), frozenset()),
}

_FIELD_RE = re.compile(r"(?:^|(?<=\s))([a-z])/")


def split_fields(text: str) -> dict[str, str]:
    """Split ``p/VALUE`` fields into a prefix -> value mapping.

    Raises:
        ParseError: On text before the first field or on a repeated prefix.
    """
    matches = list(_FIELD_RE.finditer(text))
    if not matches:
        if text.strip():
            raise ParseError(f"Unexpected text: {text.strip()!r}")
        return {}

    leading = text[: matches[0].start()].strip()
    if leading:
        raise ParseError(f"Unexpected text before fields: {leading!r}")

    fields: dict[str, str] = {}
    for current, following in zip(matches, matches[1:] + [None]):
        prefix = current.group(1)
        end = following.start() if following else len(text)
        if prefix in fields:
            raise ParseError(f"Field '{prefix}/' given more than once")
        fields[prefix] = text[current.end() : end].strip()
    return fields


def tokenize(line: str) -> tuple[str, dict[str, str]]:
    """Split a line into its keyword and validated fields.

    Raises:
        ParseError: If the keyword is unknown or a field is unexpected,
            missing or empty.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        raise ParseError("Empty command")
    keyword = parts[0]
    if keyword not in COMMAND_FIELDS:
        raise ParseError(f"Unknown command: {keyword!r}")

    fields = split_fields(parts[1] if len(parts) > 1 else "")
    required, optional = COMMAND_FIELDS[keyword]

    unexpected = set(fields) - required - optional
    if unexpected:
        listed = ", ".join(f"{prefix}/" for prefix in sorted(unexpected))
        raise ParseError(f"'{keyword}' does not accept {listed}")
    for prefix in sorted(required):
        if prefix not in fields:
            raise ParseError(f"'{keyword}' requires {prefix}/")
    for prefix, value in fields.items():
        if not value:
            raise ParseError(f"Field {prefix}/ must be non-empty")
    return keyword, fields


def _build_command(keyword: str, fields: dict[str, str]) -> Command:
    if keyword == "add":
        importance = (
            validate_importance(fields[IMPORTANCE]) if IMPORTANCE in fields else None
        )
        return AddCommand(
            name=validate_name(fields[NAME]), topic=fields[TOPIC], importance=importance
        )
    if keyword == "remove":
        return RemoveCommand(name=fields[NAME])
    if keyword == "list":
        return ListCommand()
    if keyword == "filter":
        filter_keyword = fields[KEYWORD]
        if filter_keyword not in FILTER_KEYWORDS:
            raise ParseError(
                f"Filter keyword must be 'topic' or 'importance', got {filter_keyword!r}"
            )
        if filter_keyword == FILTER_BY_TOPIC:
            if TOPIC not in fields:
                raise ParseError("'filter k/topic' requires t/")
            if IMPORTANCE in fields:
                raise ParseError("'filter k/topic' does not accept i/")
        threshold = (
            validate_importance(fields[IMPORTANCE])
            if IMPORTANCE in fields
            else MIN_IMPORTANCE
        )
        return FilterCommand(
            keyword=filter_keyword, topic=fields.get(TOPIC), threshold=threshold
        )
    if keyword == "export":
        return ExportCommand()
    if keyword == "help":
        target = fields.get(COMMAND)
        if target is not None and target not in COMMAND_FIELDS:
            raise ParseError(f"No help page for {target!r}")
        return HelpCommand(command=target)
    return ExitCommand()


def parse_command(line: str) -> Command:
    """Parse one input line.

    Never raises: anything that cannot be parsed becomes an InvalidCommand
    carrying the reason.
    """
    try:
        keyword, fields = tokenize(line)
        return _build_command(keyword, fields)
    except (ParseError, ValidationError) as e:
        logger.debug(f"Rejected {line.strip()!r}: {e}")
        return InvalidCommand(reason=str(e))
