"""A first-in, first-out queue kept in a ring buffer."""

from __future__ import annotations

from typing import Any, Iterator, List

_INITIAL_CAPACITY = 2


class QueueArr:
    """A queue of arbitrary items in a circular array that doubles when full."""

    def __init__(self) -> None:
        self._data: List[Any] = []
        self._head = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._data)
        for offset in range(self._count):
            yield self._data[(self._head + offset) % capacity]

    def __repr__(self) -> str:
        return f"QueueArr({list(self)!r})"

    def is_empty(self) -> bool:
        return self._count == 0

    def push(self, item: Any) -> None:
        if not self._data:
            self._data = [None] * _INITIAL_CAPACITY
            self._head = 0
        elif self._count == len(self._data):
            items = list(self)
            self._data = items + [None] * len(items)
            self._head = 0
        if self._count == 0:
            self._head = 0
        self._data[(self._head + self._count) % len(self._data)] = item
        self._count += 1

    def pop(self) -> None:
        """Remove the front item; does nothing on an empty queue."""
        if self._count:
            self._data[self._head] = None
            self._head = (self._head + 1) % len(self._data)
            self._count -= 1

    def top(self) -> Any:
        """Return the front item without removing it."""
        if not self._count:
            raise IndexError("QueueArr Is Empty!")
        return self._data[self._head]

    def clear(self) -> None:
        self._data = [None] * len(self._data)
        self._head = 0
        self._count = 0

    def __copy__(self) -> QueueArr:
        result = QueueArr()
        items = list(self)
        if items:
            capacity = (len(items) + 4) // 4 * 4
            result._data = items + [None] * (capacity - len(items))
            result._count = len(items)
        return result