"""Classic sorting algorithms.

Every function takes an iterable and returns a new sorted list, leaving the
input untouched. ``bubble_sort_passes`` instead yields a snapshot after each
pass of a full bubble sort.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "heap_sort",
    "tree_sort",
    "bubble_sort",
    "bubble_sort_passes",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "count_sort",
    "radix_sort",
    "shell_sort",
    "bucket_sort",
]


def _sift_down(data: list[Any], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within ``data[:size]``."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort with a max-heap."""
    data = list(items)
    size = len(data)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(data, size, root)
    for end in range(size - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


class _TreeNode:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: _TreeNode | None = None
        self.right: _TreeNode | None = None


def _tree_insert(root: _TreeNode | None, key: Any) -> _TreeNode:
    node = _TreeNode(key)
    if root is None:
        return node
    current = root
    while True:
        if key < current.key:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        elif key > current.key:
            if current.right is None:
                current.right = node
                return root
            current = current.right
        else:
            return root


def _in_order(root: _TreeNode | None) -> Iterator[Any]:
    stack: list[_TreeNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.key
        current = current.right


def tree_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a binary search tree; equal keys are kept only once."""
    root: _TreeNode | None = None
    for item in items:
        root = _tree_insert(root, item)
    return list(_in_order(root))


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Bubble sort that stops as soon as a pass makes no swap."""
    data = list(items)
    size = len(data)
    for done in range(size - 1):
        swapped = False
        for j in range(size - 1 - done):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def bubble_sort_passes(items: Iterable[T]) -> Iterator[list[T]]:
    """Run ``len - 1`` full bubble passes, yielding the list after each one."""
    data = list(items)
    size = len(data)
    for _ in range(size - 1):
        for j in range(size - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
        yield list(data)


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Stable insertion sort."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def selection_sort(items: Iterable[T]) -> list[T]:
    """Selection sort: place the smallest remaining item at each position."""
    data = list(items)
    size = len(data)
    for i in range(size):
        smallest = min(range(i, size), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def _partition(data: list[Any], start: int, end: int) -> int:
    """Move ``data[start]`` to its final place in ``data[start:end+1]``."""
    pivot = data[start]
    smaller = sum(1 for value in data[start + 1:end + 1] if value <= pivot)
    pivot_index = start + smaller
    data[start], data[pivot_index] = data[pivot_index], data[start]
    i, j = start, end
    while i < pivot_index < j:
        while i < pivot_index and data[i] <= pivot:
            i += 1
        while j > pivot_index and data[j] > pivot:
            j -= 1
        if i < pivot_index < j and data[i] > pivot and data[j] <= pivot:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quick sort using the first element of each range as pivot."""
    data = list(items)
    ranges = [(0, len(data) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        pivot_index = _partition(data, start, end)
        ranges.append((start, pivot_index - 1))
        ranges.append((pivot_index + 1, end))
    return data


def _non_negative_ints(items: Iterable[Any], algorithm: str) -> list[int]:
    values = [operator.index(item) for item in items]
    if any(value < 0 for value in values):
        raise ValueError(f"{algorithm} accepts only non-negative integers")
    return values


def count_sort(items: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    values = _non_negative_ints(items, "count_sort")
    if not values:
        return []
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    for i in range(1, len(counts)):
        counts[i] += counts[i - 1]
    output = [0] * len(values)
    for value in reversed(values):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def _counting_pass(values: list[int], place: int) -> list[int]:
    counts = [0] * 10
    for value in values:
        counts[(value // place) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output = [0] * len(values)
    for value in reversed(values):
        digit = (value // place) % 10
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    values = _non_negative_ints(items, "radix_sort")
    if not values:
        return []
    largest = max(values)
    place = 1
    while largest // place > 0:
        values = _counting_pass(values, place)
        place *= 10
    return values


def shell_sort(items: Iterable[T]) -> list[T]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    data = list(items)
    size = len(data)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            temp = data[i]
            j = i
            while j >= gap and data[j - gap] > temp:
                data[j] = data[j - gap]
                j -= gap
            data[j] = temp
        gap //= 2
    return data


def bucket_sort(
    items: Iterable[int], bucket_count: int = 6, interval: int = 10
) -> list[int]:
    """Bucket sort: ``value // interval`` picks one of ``bucket_count`` buckets.

    Raises ``ValueError`` when a value falls outside every bucket.
    """
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    if interval <= 0:
        raise ValueError("interval must be positive")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for item in items:
        value = operator.index(item)
        index = value // interval
        if value < 0 or index >= bucket_count:
            raise ValueError(f"value {value} does not fit in any bucket")
        buckets[index].append(value)
    return [value for bucket in buckets for value in insertion_sort(bucket)]