"""
Playable field geometry.
"""

import random
from typing import Tuple

Point = Tuple[int, int]


class Grid:
    """
    The playable coordinate space [0, width) x [0, height).
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def random_cell(self, rng: random.Random) -> Point:
        return (rng.randint(0, self.width - 1), rng.randint(0, self.height - 1))

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"
