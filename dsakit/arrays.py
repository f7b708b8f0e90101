"""Array helpers: a bounded array, positional insert/delete and array problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "ArrayFullError",
    "BoundedArray",
    "insert_at",
    "delete_at",
    "max_subarray_sum",
    "median_of_sorted",
]

DEFAULT_CAPACITY = 100


class ArrayFullError(Exception):
    """Raised when adding to a bounded array that has no room left."""


class BoundedArray:
    """An array that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, value: Any) -> None:
        """Append ``value``; raise ``ArrayFullError`` when the array is full."""
        if len(self._items) >= self._capacity:
            raise ArrayFullError(f"array is full (capacity {self._capacity})")
        self._items.append(value)

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of ``value``; raise ``ValueError`` if absent."""
        try:
            self._items.remove(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the array") from None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


def insert_at(items: Iterable[T], value: T, position: int) -> list[T]:
    """Return a new list with ``value`` inserted before index ``position``."""
    data = list(items)
    if not 0 <= position <= len(data):
        raise IndexError(f"position {position} out of range")
    return [*data[:position], value, *data[position:]]


def delete_at(items: Iterable[T], position: int) -> list[T]:
    """Return a new list without the element at index ``position``."""
    data = list(items)
    if not 0 <= position < len(data):
        raise IndexError(f"position {position} out of range")
    return data[:position] + data[position + 1:]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``values``."""
    iterator = iter(values)
    try:
        best = current = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def median_of_sorted(first: Iterable[float], second: Iterable[float]) -> float:
    """Median of all elements of ``first`` and ``second`` taken together."""
    merged = sorted([*first, *second])
    count = len(merged)
    if count == 0:
        raise ValueError("cannot take the median of no values")
    mid = count // 2
    if count % 2:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2.0