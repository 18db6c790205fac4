"""
FIFO queue used as the BFS frontier.
"""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class FifoQueue(Generic[T]):
    """
    First-in first-out container.

    Items come out in insertion order. No deduplication and no size bound.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: T) -> None:
        """Append an item to the back."""
        self._items.append(item)

    def dequeue(self) -> T | None:
        """Remove and return the front item, or None if the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> T | None:
        """Return the front item without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._items)!r})"
