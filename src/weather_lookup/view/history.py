"""Bounded, most-recent-first search history (in memory only)."""

from __future__ import annotations

from collections.abc import Iterator

from weather_lookup.schemas import HistoryEntry

DEFAULT_CAPACITY = 10


class SearchHistory:
    """Most-recent-first list of past lookups, oldest evicted when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: list[HistoryEntry] = []

    def add(self, entry: HistoryEntry) -> None:
        if len(self._entries) >= self.capacity:
            self._entries.pop()
        self._entries.insert(0, entry)

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def labels(self) -> list[str]:
        return [entry.label for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
