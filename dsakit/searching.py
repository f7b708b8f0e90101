"""Searching a sequence for a key."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["ElementNotFoundError", "binary_search", "linear_search"]


class ElementNotFoundError(LookupError):
    """Raised when a searched-for key is not present."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"element not found: {key!r}")
        self.key = key


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending sequence ``items``.

    Raises ``ElementNotFoundError`` when the key is absent.
    """
    front, rear = 0, len(items)
    while front < rear:
        mid = (front + rear) // 2
        value = items[mid]
        if key == value:
            return mid
        if key < value:
            rear = mid
        else:
            front = mid + 1
    raise ElementNotFoundError(key)


def linear_search(items: Iterable[Any], key: Any) -> list[int]:
    """Return every index at which ``key`` occurs, in order.

    Raises ``ElementNotFoundError`` when the key does not occur at all.
    """
    indices = [index for index, value in enumerate(items) if value == key]
    if not indices:
        raise ElementNotFoundError(key)
    return indices