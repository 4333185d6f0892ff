"""Bounded newest-first buffer used for detection and trade histories."""

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class BoundedHistory(Generic[T]):
    """Ordered buffer capped at `limit` entries, newest first.

    Pushing past capacity evicts the oldest entry.
    """

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self._items: deque[T] = deque(maxlen=limit)

    def push(self, item: T) -> T | None:
        """Prepend an item. Returns the evicted entry, if any."""
        evicted = self._items[-1] if len(self._items) == self.limit else None
        self._items.appendleft(item)
        return evicted

    def to_list(self) -> list[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
