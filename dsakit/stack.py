"""A stack with a fixed maximum size."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["StackFullError", "StackEmptyError", "BoundedStack"]

DEFAULT_CAPACITY = 100


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise ``StackFullError`` when full."""
        if self.is_full():
            raise StackFullError(f"stack is full (capacity {self._capacity})")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("empty stack has no top")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"