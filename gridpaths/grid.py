"""Grid shape checks, label lookup and neighbor iteration."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from gridpaths.types import MOVES, Grid, Move, Position


def grid_shape(grid: Grid) -> Tuple[int, int]:
    """Return ``(rows, cols)`` of a rectangular grid.

    A grid with zero rows has shape ``(0, 0)``.

    Raises:
        ValueError: If rows have differing lengths.
    """
    rows = len(grid)
    if rows == 0:
        return 0, 0
    cols = len(grid[0])
    for row_idx, row in enumerate(grid):
        if len(row) != cols:
            raise ValueError(
                f"Grid is not rectangular: row {row_idx} has {len(row)} "
                f"cells, expected {cols}"
            )
    return rows, cols


def locate(grid: Grid, label: int) -> Optional[Position]:
    """Find the first cell holding ``label`` in row-major order.

    Uniqueness is not checked; with repeated labels the first occurrence wins.

    Returns:
        The ``(row, col)`` position, or None if no cell matches.
    """
    for row_idx, row in enumerate(grid):
        for col_idx, value in enumerate(row):
            if value == label:
                return row_idx, col_idx
    return None


def neighbors(position: Position, rows: int, cols: int) -> Iterator[Tuple[Move, Position]]:
    """Yield ``(move, neighbor)`` for in-bounds neighbors in canonical order."""
    row, col = position
    for move in MOVES:
        d_row, d_col = move.delta
        n_row, n_col = row + d_row, col + d_col
        if 0 <= n_row < rows and 0 <= n_col < cols:
            yield move, (n_row, n_col)


def duplicate_labels(grid: Grid) -> Dict[int, List[Position]]:
    """Return labels that occur more than once, mapped to all their positions."""
    seen: Dict[int, List[Position]] = {}
    for row_idx, row in enumerate(grid):
        for col_idx, value in enumerate(row):
            seen.setdefault(value, []).append((row_idx, col_idx))
    return {label: cells for label, cells in seen.items() if len(cells) > 1}
