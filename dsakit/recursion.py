"""Recursive classics: factorial, gcd, N-queens and the towers of Hanoi."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Move", "factorial", "gcd", "solve_n_queens", "tower_of_hanoi"]


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` below 2 gives 1."""
    n = operator.index(n)
    return math.prod(range(2, n + 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def _is_safe(columns: list[int], row: int, col: int) -> bool:
    return all(
        placed != col and abs(placed - col) != row - placed_row
        for placed_row, placed in enumerate(columns)
    )


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Returns the first solution found row by row, left to right, as rows of
    0 (empty) and 1 (queen), or ``None`` when no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []

    def place(row: int) -> bool:
        if row >= n:
            return True
        for col in range(n):
            if _is_safe(columns, row, col):
                columns.append(col)
                if place(row + 1):
                    return True
                columns.pop()
        return False

    if not place(0):
        return None
    return [[int(col == queen) for col in range(n)] for queen in columns]


@dataclass(frozen=True)
class Move:
    """One disk moved from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n <= 0:
        return
    yield from tower_of_hanoi(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, target, source)