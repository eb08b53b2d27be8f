from math import comb

import pytest

from gridpaths.bfs import bfs_shortest_paths, find_all_shortest_paths
from gridpaths.grid import locate
from gridpaths.path import manhattan_distance, walk
from gridpaths.types import MOVE_CHARS, PathStrategy

STRATEGIES = [PathStrategy.QUEUE_PATHS, PathStrategy.PREDECESSOR_DAG]


@pytest.mark.parametrize("strategy", STRATEGIES)
class TestFindAllShortestPaths:
    def test_corner_to_corner_3x3(self, grid3x3, strategy):
        """1 -> 9 has C(4, 2) shortest paths, all of length 4."""
        paths = find_all_shortest_paths(grid3x3, 1, 9, strategy=strategy)
        assert set(paths) == {">>vv", ">v>v", ">vv>", "v>>v", "v>v>", "vv>>"}
        assert len(paths) == 6
        assert all(len(p) == 4 for p in paths)
        assert ">>vv" in paths and "vv>>" in paths

    def test_corner_to_center_3x3(self, grid3x3, strategy):
        paths = find_all_shortest_paths(grid3x3, 1, 5, strategy=strategy)
        assert sorted(paths) == sorted([">v", "v>"])

    def test_absent_label_3x3(self, grid3x3, strategy):
        assert find_all_shortest_paths(grid3x3, 1, 10, strategy=strategy) == []
        assert find_all_shortest_paths(grid3x3, 10, 1, strategy=strategy) == []
        assert find_all_shortest_paths(grid3x3, 10, 11, strategy=strategy) == []

    def test_2x2(self, grid2x2, strategy):
        paths = find_all_shortest_paths(grid2x2, 1, 4, strategy=strategy)
        assert set(paths) == {">v", "v>"}
        assert len(paths) == 2

    def test_4x4_corner_to_corner(self, grid4x4, strategy):
        paths = find_all_shortest_paths(grid4x4, 1, 16, strategy=strategy)
        assert paths
        assert len(paths) == comb(6, 3)
        for path in paths:
            assert len(path) == 6
            assert set(path) <= MOVE_CHARS

    def test_same_start_and_end(self, grid3x3, strategy):
        """Identical labels resolve to one empty path, not to no path."""
        for label in range(1, 10):
            assert find_all_shortest_paths(grid3x3, label, label, strategy=strategy) == [""]

    def test_reverse_direction_uses_left_and_up(self, grid3x3, strategy):
        paths = find_all_shortest_paths(grid3x3, 9, 1, strategy=strategy)
        assert len(paths) == 6
        assert all(set(p) == {"<", "^"} for p in paths)

        paths = find_all_shortest_paths(grid3x3, 5, 1, strategy=strategy)
        assert set(paths) == {"<^", "^<"}

    def test_anti_diagonal(self, grid3x3, strategy):
        paths = find_all_shortest_paths(grid3x3, 3, 7, strategy=strategy)
        assert set(paths) == {"<<vv", "<v<v", "<vv<", "v<<v", "v<v<", "vv<<"}

    def test_single_row_and_column(self, strategy):
        row = [[1, 2, 3, 4]]
        assert find_all_shortest_paths(row, 1, 4, strategy=strategy) == [">>>"]
        assert find_all_shortest_paths(row, 4, 2, strategy=strategy) == ["<<"]

        column = [[1], [2], [3]]
        assert find_all_shortest_paths(column, 3, 1, strategy=strategy) == ["^^"]
        assert find_all_shortest_paths(column, 1, 2, strategy=strategy) == ["v"]

    def test_single_cell(self, strategy):
        assert find_all_shortest_paths([[7]], 7, 7, strategy=strategy) == [""]
        assert find_all_shortest_paths([[7]], 7, 8, strategy=strategy) == []

    def test_empty_grids(self, strategy):
        assert find_all_shortest_paths([], 1, 1, strategy=strategy) == []
        assert find_all_shortest_paths([[]], 1, 2, strategy=strategy) == []

    def test_sentinel_labels(self, sentinel_grid, strategy):
        paths = find_all_shortest_paths(sentinel_grid, 0, -5, strategy=strategy)
        assert set(paths) == {">>v", ">v>", "v>>"}

    def test_duplicate_labels_use_first_occurrence(self, strategy):
        grid = [
            [1, 2],
            [1, 3],
        ]
        paths = find_all_shortest_paths(grid, 1, 3, strategy=strategy)
        assert set(paths) == {">v", "v>"}

    def test_ragged_grid_raises(self, strategy):
        grid = [[1, 2, 3], [4, 5]]
        with pytest.raises(ValueError, match="not rectangular"):
            find_all_shortest_paths(grid, 1, 5, strategy=strategy)
        # Shape is checked before label lookup
        with pytest.raises(ValueError):
            find_all_shortest_paths(grid, 10, 11, strategy=strategy)

    def test_paths_land_on_end_at_manhattan_distance(self, strategy):
        grid = [[r * 5 + c for c in range(5)] for r in range(4)]
        for start_label, end_label in [(0, 19), (7, 12), (18, 1), (4, 15), (10, 14)]:
            start = locate(grid, start_label)
            end = locate(grid, end_label)
            paths = find_all_shortest_paths(grid, start_label, end_label, strategy=strategy)

            d_row = abs(start[0] - end[0])
            d_col = abs(start[1] - end[1])
            assert len(paths) == comb(d_row + d_col, d_row)
            assert len(set(paths)) == len(paths)
            for path in paths:
                assert len(path) == manhattan_distance(start, end)
                assert walk(start, path) == end


def test_strategies_agree(grid4x4):
    for start in range(1, 17):
        for end in range(1, 17):
            queue_paths = find_all_shortest_paths(
                grid4x4, start, end, strategy=PathStrategy.QUEUE_PATHS
            )
            dag_paths = find_all_shortest_paths(
                grid4x4, start, end, strategy=PathStrategy.PREDECESSOR_DAG
            )
            assert sorted(queue_paths) == sorted(dag_paths)


def test_queue_paths_discovery_order(grid3x3):
    """Right, down, left, up exploration gives a stable discovery order."""
    assert find_all_shortest_paths(grid3x3, 1, 9) == [
        ">>vv",
        ">v>v",
        ">vv>",
        "v>>v",
        "v>v>",
        "vv>>",
    ]


def test_bfs_shortest_paths_on_positions(grid2x2):
    assert bfs_shortest_paths(grid2x2, (1, 1), (0, 0)) == ["<^", "^<"]
    assert bfs_shortest_paths(grid2x2, (0, 1), (0, 1)) == [""]


def test_debug_log_reports_path_count(grid2x2, caplog):
    with caplog.at_level("DEBUG", logger="gridpaths"):
        find_all_shortest_paths(grid2x2, 1, 4)
        find_all_shortest_paths(grid2x2, 1, 99)
    assert "Found 2 shortest path(s) of length 2" in caplog.text
    assert "Label not found" in caplog.text
