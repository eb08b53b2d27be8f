"""Core types shared by the grid search modules."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Sequence, Tuple

#: A rectangular grid of integer labels, stored row by row.
Grid = Sequence[Sequence[int]]

#: A 0-indexed (row, column) cell coordinate.
Position = Tuple[int, int]

#: For each reached cell, the shortest-path parents and the move leading
#: from the parent into the cell. The search origin maps to an empty dict.
PredMap = Dict[Position, Dict[Position, "Move"]]


class Move(Enum):
    """A single unit step between orthogonally adjacent cells.

    The value is the character used in path strings.
    """

    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"
    UP = "^"

    @property
    def delta(self) -> Tuple[int, int]:
        """Return the (row, column) offset applied by this move."""
        return _DELTAS[self]

    @classmethod
    def from_char(cls, char: str) -> "Move":
        """Parse a single path character into a Move.

        Raises:
            ValueError: If ``char`` is not one of ``> v < ^``.
        """
        try:
            return cls(char)
        except ValueError:
            valid = " ".join(m.value for m in cls)
            raise ValueError(
                f"Invalid move character {char!r}. Valid characters are: {valid}"
            ) from None


_DELTAS: Dict[Move, Tuple[int, int]] = {
    Move.RIGHT: (0, 1),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.UP: (-1, 0),
}

#: Canonical exploration order. Affects discovery order only, never the
#: resulting set of paths.
MOVES: Tuple[Move, ...] = (Move.RIGHT, Move.DOWN, Move.LEFT, Move.UP)

#: Every character that may appear in a path string.
MOVE_CHARS = frozenset(m.value for m in MOVES)


class PathStrategy(IntEnum):
    """How all shortest paths are enumerated."""

    #: Level-synchronized BFS where every queue entry carries its partial path.
    QUEUE_PATHS = 1
    #: BFS recording shortest-path predecessors, then a depth-first walk
    #: from the end cell back to the start.
    PREDECESSOR_DAG = 2

    @classmethod
    def from_string(cls, value: str) -> "PathStrategy":
        """Parse a case-insensitive name (e.g. ``"queue_paths"``).

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid strategy '{value}'. Valid values are: {valid}"
            ) from None
