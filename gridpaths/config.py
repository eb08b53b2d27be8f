"""Configuration for the gridpaths demonstration run."""

from dataclasses import dataclass, field
from typing import List


def _sample_grid() -> List[List[int]]:
    return [
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
    ]


@dataclass
class DemoConfig:
    """Inputs for ``gridpaths demo``."""

    # Fixed sample grid searched by the demo
    grid: List[List[int]] = field(default_factory=_sample_grid)

    # Labels connected by the demo
    start: int = 1
    end: int = 9


# Global configuration instance
DEMO_CONFIG = DemoConfig()
