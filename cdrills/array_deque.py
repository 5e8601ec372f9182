"""A double-ended queue with positional access."""

from __future__ import annotations

from collections import deque
from typing import Any


class ArrayDeque:
    """A sequence that supports adding and removing items at both ends.

    Reading or removing from an empty deque yields ``None`` rather than
    raising, and so does reading a position that holds no item.
    """

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, index: int) -> Any:
        """Return the item at ``index`` counted from the front, or ``None``."""
        if not 0 <= index < len(self._items):
            return None
        return self._items[index]

    def get_last(self) -> Any:
        """Return the last item, or ``None`` if the deque is empty."""
        return self._items[-1] if self._items else None

    def prepend(self, item: Any) -> None:
        """Add ``item`` to the front."""
        self._items.appendleft(item)

    def append(self, item: Any) -> None:
        """Add ``item`` to the back."""
        self._items.append(item)

    def remove_first(self) -> Any:
        """Remove and return the first item, or ``None`` if empty."""
        return self._items.popleft() if self._items else None

    def remove_last(self) -> Any:
        """Remove and return the last item, or ``None`` if empty."""
        return self._items.pop() if self._items else None