"""Flood fill of a grid of colours over all eight neighbouring cells."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any

__all__ = ["flood_fill", "format_grid"]

_NEIGHBOURS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


def flood_fill(grid: Sequence[Sequence[Any]], x: int, y: int, replacement: Any) -> list[list[Any]]:
    """Return a copy of ``grid`` with the region around ``grid[x][y]`` recoloured.

    The region is every cell of the start cell's colour reachable through
    horizontal, vertical and diagonal steps. An empty grid gives an empty list.
    """
    result = [list(row) for row in grid]
    if not result:
        return result
    if not (0 <= x < len(result) and 0 <= y < len(result[x])):
        raise IndexError(f"start ({x}, {y}) is outside the grid")
    target = result[x][y]
    if target == replacement:
        return result

    result[x][y] = replacement
    pending = deque([(x, y)])
    while pending:
        row, col = pending.popleft()
        for d_row, d_col in _NEIGHBOURS:
            r, c = row + d_row, col + d_col
            if 0 <= r < len(result) and 0 <= c < len(result[r]) and result[r][c] == target:
                result[r][c] = replacement
                pending.append((r, c))
    return result


def format_grid(grid: Sequence[Sequence[Any]]) -> str:
    """Render the grid one row per line, each cell right-aligned in 3 columns."""
    return "\n".join("".join(f"{cell!s:>3}" for cell in row) for row in grid)