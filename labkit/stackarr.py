"""An array-backed last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class StackArr:
    """A stack of arbitrary items held in a list, with the top at the end."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __repr__(self) -> str:
        return f"StackArr({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> None:
        """Discard the most recently pushed item, if there is one."""
        if self._items:
            self._items.pop()

    def top(self) -> Any:
        """Peek at the most recently pushed item."""
        try:
            return self._items[-1]
        except IndexError:
            raise IndexError("Stack is empty!") from None

    def clear(self) -> None:
        self._items.clear()

    def __copy__(self) -> StackArr:
        duplicate = type(self)()
        duplicate._items = self._items.copy()
        return duplicate