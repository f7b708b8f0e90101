# dsakit

A small library of classic data structures and algorithms, written in plain
Python with no runtime dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsakit.sorting`: `heap_sort`, `tree_sort`, `bubble_sort`,
  `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`,
  `count_sort`, `radix_sort`, `shell_sort` and `bucket_sort`. Each takes an
  iterable and returns a new sorted list, leaving the input untouched.
  - `tree_sort` builds a binary search tree, so equal values are kept only once.
  - `count_sort` and `radix_sort` accept only non-negative integers and raise
    `ValueError` otherwise.
  - `bucket_sort(items, bucket_count=6, interval=10)` places each value in
    bucket `value // interval`; a value that fits no bucket raises `ValueError`.
  - `bubble_sort_passes` runs `len - 1` full bubble passes and yields a
    snapshot of the list after each one.
- `dsakit.searching`: `binary_search` (an index of the key in an ascending
  sequence) and `linear_search` (every index at which the key occurs). A
  missing key raises `ElementNotFoundError`.
- `dsakit.arrays`: `BoundedArray` (holds at most `capacity` elements, 100 by
  default, and raises `ArrayFullError` when full), `insert_at`, `delete_at`
  (both return new lists and raise `IndexError` for a bad position),
  `max_subarray_sum` and `median_of_sorted`.
- `dsakit.recursion`: `factorial`, `gcd`, `solve_n_queens` (rows of 0 and 1,
  or `None` when there is no solution) and `tower_of_hanoi`, which yields
  `Move` steps.
- `dsakit.stack`: `BoundedStack` with `push`, `pop`, `top`, `is_empty` and
  `is_full`; it raises `StackFullError` or `StackEmptyError`, and iterates
  from top to bottom.
- `dsakit.queues`: `CircularQueue` (5 slots by default), `RingQueue` (1000
  slots by default, with `peek`), `ArrayQueue` (bounded, with `front`),
  `LinkedQueue` and `TwoStackQueue` (both unbounded). They raise
  `QueueFullError` or `QueueEmptyError`.
- `dsakit.floodfill`: `flood_fill`, which returns a recoloured copy of a grid
  (spreading over all eight neighbours), and `format_grid`, which renders
  each cell right-aligned in three columns.

## Examples

```python
from dsakit.sorting import heap_sort, bucket_sort
from dsakit.searching import binary_search
from dsakit.recursion import gcd, tower_of_hanoi
from dsakit.queues import RingQueue

heap_sort([1, 12, 9, 5, 6, 10])        # [1, 5, 6, 9, 10, 12]
bucket_sort([42, 32, 33, 52, 37, 47, 51], 6, 10)
binary_search([1, 3, 5, 7], 5)         # 2
gcd(98, 56)                            # 14

for move in tower_of_hanoi(3, "A", "C", "B"):
    print(move)                        # Move disk 1 from rod A to rod C ...

queue = RingQueue(5)
queue.enqueue(1)
queue.enqueue(2)
queue.peek()                           # 1
```

```python
from dsakit.floodfill import flood_fill, format_grid

grid = [list("YYX"), list("YXX"), list("GGX")]
filled = flood_fill(grid, 0, 2, "C")
print(format_grid(filled))
```

## What it does not do

`dsakit` is a library only: it has no command-line program or interactive
menu. Nothing reads from standard input or prints by itself; results come
back as values and errors are raised as exceptions.