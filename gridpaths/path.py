"""Helpers for interpreting move strings on a grid."""

from __future__ import annotations

from gridpaths.types import Move, Position


def walk(start: Position, path: str) -> Position:
    """Apply every move in ``path`` to ``start`` and return the final position.

    Bounds are not checked; the result may lie outside any particular grid.

    Raises:
        ValueError: If ``path`` contains a character that is not a move.
    """
    row, col = start
    for char in path:
        d_row, d_col = Move.from_char(char).delta
        row += d_row
        col += d_col
    return row, col


def manhattan_distance(a: Position, b: Position) -> int:
    """Return the number of unit moves between two cells on an open grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
