"""An ordered set driven by a strict "less than" function."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class SortedSet(Generic[T]):
    """Keeps unique items sorted by ``less``; items neither less than the other are equal."""

    def __init__(self, less: Callable[[T, T], bool]) -> None:
        self._less = less
        self._items: list[T] = []

    def _locate(self, item: T) -> tuple[int, bool]:
        """Return the index of ``item`` (or where it belongs) and whether it is present."""
        low, high = 0, len(self._items) - 1
        insert_at = 0
        while low <= high:
            middle = (low + high) // 2
            current = self._items[middle]
            if self._less(current, item):
                insert_at = middle + 1
                low = middle + 1
            elif self._less(item, current):
                high = middle - 1
            else:
                return middle, True
        return insert_at, False

    def add(self, item: T) -> None:
        """Insert ``item`` unless an equal item is already present."""
        index, found = self._locate(item)
        if not found:
            self._items.insert(index, item)

    def remove(self, item: T) -> bool:
        """Remove the item equal to ``item``; return False if none was present."""
        index, found = self._locate(item)
        if not found:
            return False
        del self._items[index]
        return True

    def __contains__(self, item: object) -> bool:
        return self._locate(item)[1]  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid position: {index}")
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))