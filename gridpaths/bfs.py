"""Breadth-first enumeration of all shortest paths between two grid labels."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Tuple

from gridpaths.grid import grid_shape, locate, neighbors
from gridpaths.logging import get_logger
from gridpaths.types import Grid, Move, PathStrategy, Position, PredMap

logger = get_logger(__name__)


def find_all_shortest_paths(
    grid: Grid,
    start_label: int,
    end_label: int,
    strategy: PathStrategy = PathStrategy.QUEUE_PATHS,
) -> List[str]:
    """
    Find every shortest path from the cell labeled ``start_label`` to the cell
    labeled ``end_label``.

    Cells connect to their in-bounds up/down/left/right neighbors at unit cost.
    Each path is a string of move characters (``>``, ``v``, ``<``, ``^``).

    Args:
        grid: Rectangular grid of labels. Labels are expected to be unique;
            otherwise the first row-major occurrence is used.
        start_label: Label of the starting cell.
        end_label: Label of the target cell.
        strategy: Enumeration method. Both strategies return the same set of
            paths; only discovery order and memory profile differ.

    Returns:
        Distinct paths of identical minimal length in discovery order. Empty if
        either label is absent; ``[""]`` if both labels resolve to the same cell.

    Raises:
        ValueError: If the grid is not rectangular.
    """
    grid_shape(grid)

    start = locate(grid, start_label)
    end = locate(grid, end_label)
    if start is None or end is None:
        logger.debug(
            "Label not found (start=%r at %s, end=%r at %s); no paths",
            start_label,
            start,
            end_label,
            end,
        )
        return []

    if strategy == PathStrategy.PREDECESSOR_DAG:
        _, pred = bfs_predecessors(grid, start, end)
        paths = list(resolve_to_paths(start, end, pred))
    else:
        paths = bfs_shortest_paths(grid, start, end)

    logger.debug(
        "Found %d shortest path(s) of length %s from %s to %s using %s",
        len(paths),
        len(paths[0]) if paths else None,
        start,
        end,
        strategy.name,
    )
    return paths


def bfs_shortest_paths(grid: Grid, start: Position, end: Position) -> List[str]:
    """
    Level-synchronized BFS where every queue entry carries its partial path.

    A cell is re-enqueued when reached again at exactly its recorded distance,
    so every equal-length route through it survives. Entries beyond the best
    end distance are dropped without expansion.

    Args:
        grid: Rectangular grid.
        start: Starting position.
        end: Target position.

    Returns:
        All shortest move strings from ``start`` to ``end``.
    """
    rows, cols = grid_shape(grid)

    queue: Deque[Tuple[Position, str, int]] = deque([(start, "", 0)])
    distance: Dict[Position, int] = {start: 0}

    shortest_paths: List[str] = []
    shortest_distance: Optional[int] = None

    while queue:
        current, path, level = queue.popleft()

        if shortest_distance is not None and level > shortest_distance:
            continue

        if current == end:
            if shortest_distance is None or level < shortest_distance:
                shortest_paths = [path]
                shortest_distance = level
            elif level == shortest_distance:
                shortest_paths.append(path)
            continue

        new_level = level + 1
        for move, neighbor in neighbors(current, rows, cols):
            recorded = distance.get(neighbor)
            if recorded is None or recorded == new_level:
                distance[neighbor] = new_level
                queue.append((neighbor, path + move.value, new_level))

    return shortest_paths


def bfs_predecessors(
    grid: Grid,
    src: Position,
    dst: Optional[Position] = None,
) -> Tuple[Dict[Position, int], PredMap]:
    """
    Breadth-first search recording every shortest-path predecessor.

    If ``dst`` is given, the search stops as soon as the frontier reaches the
    level of ``dst``; all of its predecessors are known by then.

    Args:
        grid: Rectangular grid.
        src: Search origin.
        dst: Optional target position used for early termination.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached position to its move count from ``src``.
          - pred: For each reached position, a dict of predecessor -> move from
            the predecessor into the position. ``pred[src]`` is empty.
    """
    rows, cols = grid_shape(grid)

    costs: Dict[Position, int] = {src: 0}
    pred: PredMap = {src: {}}
    queue: Deque[Position] = deque([src])

    while queue:
        node = queue.popleft()
        node_cost = costs[node]
        if dst is not None and dst in costs and node_cost >= costs[dst]:
            break

        for move, neighbor in neighbors(node, rows, cols):
            new_cost = node_cost + 1
            if neighbor not in costs:
                costs[neighbor] = new_cost
                pred[neighbor] = {node: move}
                queue.append(neighbor)
            elif costs[neighbor] == new_cost:
                pred[neighbor][node] = move

    return costs, pred


def resolve_to_paths(src: Position, dst: Position, pred: PredMap) -> Iterator[str]:
    """
    Enumerate all ``src`` -> ``dst`` move strings from a predecessor map.

    Walks the predecessor DAG depth-first from ``dst`` back to ``src`` and
    reverses each collected move sequence.

    Args:
        src: Source position.
        dst: Destination position.
        pred: Predecessor map from :func:`bfs_predecessors`.

    Yields:
        Move strings. Nothing if ``dst`` is unreachable; ``""`` if
        ``src == dst``.
    """
    if dst not in pred:
        return

    # Each stack entry: (current_position, moves collected so far in reverse)
    stack: List[Tuple[Position, Tuple[Move, ...]]] = [(dst, ())]
    while stack:
        node, reversed_moves = stack.pop()
        if node == src:
            yield "".join(move.value for move in reversed(reversed_moves))
            continue
        # Reverse so predecessors are visited in insertion order
        for prev_node, move in reversed(list(pred[node].items())):
            stack.append((prev_node, reversed_moves + (move,)))
