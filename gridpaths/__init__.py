"""gridpaths: all shortest paths between labeled cells of a grid.

Cells connect to their up/down/left/right neighbors at unit cost. Paths are
strings of moves: ``>`` right, ``v`` down, ``<`` left, ``^`` up.

Example:
    from gridpaths import find_all_shortest_paths

    grid = [[1, 2], [3, 4]]
    find_all_shortest_paths(grid, 1, 4)  # [">v", "v>"]
"""

from __future__ import annotations

from gridpaths import cli, logging
from gridpaths.bfs import (
    bfs_predecessors,
    bfs_shortest_paths,
    find_all_shortest_paths,
    resolve_to_paths,
)
from gridpaths.grid import duplicate_labels, grid_shape, locate, neighbors
from gridpaths.io import load_grid_document, load_grid_file, load_grid_yaml
from gridpaths.path import manhattan_distance, walk
from gridpaths.types import MOVE_CHARS, MOVES, Move, PathStrategy

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Search
    "find_all_shortest_paths",
    "bfs_shortest_paths",
    "bfs_predecessors",
    "resolve_to_paths",
    # Grid
    "locate",
    "grid_shape",
    "neighbors",
    "duplicate_labels",
    # Paths
    "walk",
    "manhattan_distance",
    # Types
    "Move",
    "MOVES",
    "MOVE_CHARS",
    "PathStrategy",
    # Loading
    "load_grid_document",
    "load_grid_file",
    "load_grid_yaml",
    # Utilities
    "cli",
    "logging",
]
