"""
Food placement.
"""

import random
from typing import Optional, Tuple

from .errors import InvariantViolation
from .grid import Grid
from .snake import Snake


def spawn_food(grid: Grid, snake: Snake, rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """
    Return a random cell (x, y) not occupied by the snake.

    Uses plain rejection sampling so every free cell is equally likely.
    A snake filling the whole grid leaves nowhere to spawn; that is
    reported as an invariant violation rather than looping forever.
    """
    if len(snake) >= grid.area:
        raise InvariantViolation(f"No free cell left for food on {grid!r}")

    rng = rng or random
    while True:
        cell = grid.random_cell(rng)
        if not snake.contains(cell):
            return cell
