"""First-in, first-out queues built several ways.

``CircularQueue`` and ``RingQueue`` keep their elements in a fixed ring of
slots, ``ArrayQueue`` is a bounded queue that shifts its elements forward,
``LinkedQueue`` is an unbounded singly linked queue and ``TwoStackQueue``
is made from two stacks.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = [
    "QueueFullError",
    "QueueEmptyError",
    "CircularQueue",
    "ArrayQueue",
    "LinkedQueue",
    "TwoStackQueue",
    "RingQueue",
]


class QueueFullError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when reading from or removing from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return capacity


class _Ring:
    """Fixed ring of slots with a front position and an element count."""

    def __init__(self, capacity: int) -> None:
        self._slots: list[Any] = [None] * _check_capacity(capacity)
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def _push(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError(f"queue is full (capacity {self.capacity})")
        rear = (self._front + self._count) % len(self._slots)
        self._slots[rear] = value
        self._count += 1

    def _pop(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("dequeue from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        return value

    def _values(self) -> Iterator[Any]:
        size = len(self._slots)
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % size]

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values())!r}, capacity={self.capacity})"


class CircularQueue(_Ring):
    """A bounded circular queue, five slots by default."""

    def __init__(self, capacity: int = 5) -> None:
        super().__init__(capacity)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise ``QueueFullError`` when full."""
        self._push(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        return self._pop()

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return self._values()

    def __len__(self) -> int:
        return super().__len__()


class RingQueue(_Ring):
    """A bounded ring-buffer queue, 1000 slots by default."""

    def __init__(self, capacity: int = 1000) -> None:
        super().__init__(capacity)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise ``QueueFullError`` when full."""
        self._push(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        return self._pop()

    def peek(self) -> Any:
        """Return the front element without removing it."""
        if self.is_empty():
            raise QueueEmptyError("peek at an empty queue")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def __len__(self) -> int:
        return super().__len__()


class ArrayQueue:
    """A bounded queue whose elements move forward when the front leaves."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise ``QueueFullError`` when full."""
        if len(self._items) >= self._capacity:
            raise QueueFullError(f"queue is full (capacity {self._capacity})")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.pop(0)

    def front(self) -> Any:
        """Return the front element without removing it."""
        if not self._items:
            raise QueueEmptyError("empty queue has no front")
        return self._items[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedQueue:
    """An unbounded queue of singly linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._count = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if self._front is None:
            raise QueueEmptyError("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class TwoStackQueue:
    """A queue made of an inbound and an outbound stack."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if not self._outbox:
            if not self._inbox:
                raise QueueEmptyError("dequeue from an empty queue")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[*reversed(self._outbox), *self._inbox]!r})"