"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Queue:
    """A FIFO queue whose empty reads yield ``None`` rather than raising."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def peek(self) -> Any:
        """Return the next item without removing it, or ``None`` if empty."""
        return self._items[0] if self._items else None

    def enqueue(self, item: Any) -> None:
        """Add ``item`` to the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the next item, or ``None`` if empty."""
        return self._items.popleft() if self._items else None