"""A linked priority queue that keeps its items in ascending order."""

from __future__ import annotations

from typing import Any

from .stacklst import _copy_chain, _LinkedBase, _Node


class QueueLstPr(_LinkedBase):
    """A priority queue whose front is always the smallest item.

    A new item is placed before the first item that is not smaller than it,
    so among equal items the most recently pushed comes first.
    """

    _empty_message = "QueueLstPr is empty!"

    def __init__(self) -> None:
        super().__init__()

    def is_empty(self) -> bool:
        return self._head is None

    def push(self, item: Any) -> None:
        """Insert an item in its sorted place."""
        if self._head is None or not item > self._head.value:
            self._head = _Node(item, self._head)
            return
        prev = self._head
        while prev.next is not None and item > prev.next.value:
            prev = prev.next
        prev.next = _Node(item, prev.next)

    def pop(self) -> None:
        """Remove the smallest item; does nothing on an empty queue."""
        self._drop_front()

    def top(self) -> Any:
        """Return the smallest item without removing it."""
        return self._front()

    def clear(self) -> None:
        self._head = None

    def assign(self, other: QueueLstPr) -> None:
        """Replace the contents with a copy of ``other``'s."""
        if other is not self:
            self._head = _copy_chain(other._head)[0]

    def __copy__(self) -> QueueLstPr:
        return self._duplicate()