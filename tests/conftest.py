"""Shared grid fixtures."""

from __future__ import annotations

from typing import List

import pytest


def numbered_grid(rows: int, cols: int) -> List[List[int]]:
    """Return a grid labeled 1..rows*cols in row-major order."""
    return [[r * cols + c + 1 for c in range(cols)] for r in range(rows)]


@pytest.fixture
def grid2x2() -> List[List[int]]:
    #  1 2
    #  3 4
    return numbered_grid(2, 2)


@pytest.fixture
def grid3x3() -> List[List[int]]:
    #  1 2 3
    #  4 5 6
    #  7 8 9
    return numbered_grid(3, 3)


@pytest.fixture
def grid4x4() -> List[List[int]]:
    #   1  2  3  4
    #   5  6  7  8
    #   9 10 11 12
    #  13 14 15 16
    return numbered_grid(4, 4)


@pytest.fixture
def sentinel_grid() -> List[List[int]]:
    # Arbitrary labels, including zero and negatives
    return [
        [0, -1, 42],
        [7, 100, -5],
    ]
