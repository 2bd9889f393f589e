"""A multiset of values that keeps distinct values in first-insertion order."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclass
class Entry(Generic[T]):
    """A distinct value together with how many times it occurs."""

    value: T
    frequency: int = 1


class Collection(Generic[T]):
    """Counts occurrences of values, remembering the order values first appeared."""

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._entries: list[Entry[T]] = []
        for value in values or ():
            self.add(value)

    def _find(self, value: Any) -> Entry[T] | None:
        return next((entry for entry in self._entries if entry.value == value), None)

    def add(self, value: T) -> None:
        """Add one occurrence of ``value``."""
        entry = self._find(value)
        if entry is None:
            self._entries.append(Entry(value, 1))
        else:
            entry.frequency += 1

    def remove(self, value: T) -> bool:
        """Remove one occurrence of ``value``; return False if it was absent."""
        entry = self._find(value)
        if entry is None:
            return False
        if entry.frequency > 1:
            entry.frequency -= 1
        else:
            self._entries.remove(entry)
        return True

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not None

    def size(self) -> int:
        """Total number of occurrences of all values."""
        return sum(entry.frequency for entry in self._entries)

    def occurrences(self, value: T) -> int:
        """How many times ``value`` occurs."""
        entry = self._find(value)
        return entry.frequency if entry is not None else 0

    def entry_at(self, position: int) -> Entry[T]:
        """Return a copy of the entry at ``position`` among the distinct values."""
        if not 0 <= position < len(self._entries):
            raise IndexError(f"invalid position: {position}")
        return replace(self._entries[position])

    def distinct_count(self) -> int:
        """Number of distinct values."""
        return len(self._entries)

    def copy(self) -> Collection[T]:
        """Return an independent copy."""
        duplicate: Collection[T] = Collection()
        duplicate._entries = [replace(entry) for entry in self._entries]
        return duplicate

    def __iter__(self) -> Iterator[Entry[T]]:
        return (replace(entry) for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return " + ".join(f"{entry.frequency}*{entry.value}" for entry in self._entries)