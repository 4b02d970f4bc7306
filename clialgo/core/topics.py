"""Topic taxonomy for clialgo."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

# Canonical display order of the CS2040C topics.
TOPICS: tuple[str, ...] = (
    "SORTING",
    "LINKED_LIST",
    "BINARY_HEAP",
    "HASH_TABLE",
    "BINARY_SEARCH_TREE",
    "GRAPH_STRUCTURES",
    "GRAPH_TRAVERSAL",
    "MINIMUM_SPANNING_TREE",
    "SINGLE_SOURCE_SHORTEST_PATH",
)


class TopicRegistry:
    """Fixed, immutable set of valid topic names."""

    __slots__ = ("_order", "_topics")

    def __init__(self, topics: tuple[str, ...] = TOPICS) -> None:
        self._order = tuple(topics)
        self._topics = frozenset(self._order)

    def is_valid_topic(self, topic: Any) -> bool:
        """Return True if ``topic`` is one of the registered topic names.

        The lookup is case sensitive and never raises.
        """
        return isinstance(topic, str) and topic in self._topics

    def all_topics(self) -> tuple[str, ...]:
        return self._order

    def __contains__(self, topic: object) -> bool:
        return self.is_valid_topic(topic)

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)


DEFAULT_REGISTRY = TopicRegistry()


def is_valid_topic(topic: Any) -> bool:
    """Validate ``topic`` against the default CS2040C taxonomy."""
    return DEFAULT_REGISTRY.is_valid_topic(topic)
