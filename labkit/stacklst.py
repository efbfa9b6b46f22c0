"""A linked last-in, first-out stack, and the node chain shared by linked containers."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next_node


def _iter_chain(head: Optional[_Node]) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.value
        node = node.next


def _copy_chain(head: Optional[_Node]) -> Tuple[Optional[_Node], Optional[_Node]]:
    """Copy a chain node by node; return the new head and tail."""
    if head is None:
        return None, None
    new_head = tail = _Node(head.value)
    for value in _iter_chain(head.next):
        tail.next = _Node(value)
        tail = tail.next
    return new_head, tail


class _LinkedBase:
    """State and helpers common to containers built on a singly linked chain."""

    _empty_message = "Container is empty!"

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(_iter_chain(self._head))!r})"

    def _front(self) -> Any:
        if self._head is None:
            raise IndexError(self._empty_message)
        return self._head.value

    def _drop_front(self) -> None:
        if self._head is not None:
            self._head = self._head.next

    def _duplicate(self):
        result = type(self)()
        result.assign(self)
        return result


class StackLst(_LinkedBase):
    """A stack of arbitrary items kept in a singly linked chain of nodes."""

    _empty_message = "Stack is empty!"

    def __init__(self) -> None:
        super().__init__()

    def is_empty(self) -> bool:
        return self._head is None

    def push(self, item: Any) -> None:
        self._head = _Node(item, self._head)

    def pop(self) -> None:
        """Remove the top item; does nothing on an empty stack."""
        self._drop_front()

    def top(self) -> Any:
        """Return the top item without removing it."""
        return self._front()

    def clear(self) -> None:
        self._head = None

    def assign(self, other: StackLst) -> None:
        """Replace the contents with a copy of ``other``'s, keeping the order."""
        if other is not self:
            self._head = _copy_chain(other._head)[0]

    def __copy__(self) -> StackLst:
        return self._duplicate()