"""A growable array of same-typed items that tracks its own capacity."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

INITIAL_CAPACITY = 4


class GrowableArray:
    """An append-only array that doubles its capacity whenever it fills up.

    ``item_format`` is a printf-style format (such as ``"%d"`` or ``"%f"``)
    used to render each item.
    """

    def __init__(self, item_format: str) -> None:
        self._item_format = item_format
        self._items: list[Any] = []
        self._capacity = INITIAL_CAPACITY

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def append(self, item: Any) -> None:
        """Add ``item`` to the end, doubling the capacity if it is full."""
        if len(self._items) >= self._capacity:
            self._capacity = INITIAL_CAPACITY if self._capacity == 0 else self._capacity * 2
        self._items.append(item)

    def capacity(self) -> int:
        """Return how many items fit before the array has to grow."""
        return self._capacity

    def format(self) -> str:
        """Render the items as ``[ a, b, ]``, or ``[ ]`` when empty."""
        if not self._items:
            return "[ ]"
        body = "".join(f"{self._item_format % item}, " for item in self._items)
        return f"[ {body}]"


def main(argv: list[str] | None = None) -> int:
    """Build an integer and a floating-point array and print both."""
    del argv
    ints = GrowableArray("%d")
    for value in (7, 8, 9):
        ints.append(value)
    sys.stdout.write(ints.format() + "\n")

    floats = GrowableArray("%f")
    for value in (3.0, 4.0, 5.0):
        floats.append(value)
    sys.stdout.write(floats.format() + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())