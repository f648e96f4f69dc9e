"""
Game constants for the terminal snake game.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: (0, 0) is the top-left cell, y grows downwards
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Lifecycle phases
WAITING_FOR_START = "WAITING_FOR_START"
RUNNING = "RUNNING"
PAUSED = "PAUSED"
GAME_OVER = "GAME_OVER"

# Game over causes
WALL_COLLISION = "wall"
SELF_COLLISION = "self"
BOARD_FULL = "full"

# Game settings
SCORE_PER_FOOD = 10
INITIAL_SNAKE_LENGTH = 3
INITIAL_DIRECTION = RIGHT


def is_opposite(direction: str, other: str) -> bool:
    """Return True if the two directions point exactly away from each other."""
    return OPPOSITES.get(direction) == other
