"""
Domain entities for the terminal snake game engine.

This module contains the core game entities that are independent of
the terminal (drawing, key codes, window sizing).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, is_opposite,
    WAITING_FOR_START, RUNNING, PAUSED, GAME_OVER,
    WALL_COLLISION, SELF_COLLISION, BOARD_FULL, SCORE_PER_FOOD,
)
from .errors import InvariantViolation, PhaseError
from .grid import Grid
from .snake import Snake
from .direction import DirectionBuffer
from .food import spawn_food
from .game_state import GameState, GameSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'is_opposite',
    'WAITING_FOR_START', 'RUNNING', 'PAUSED', 'GAME_OVER',
    'WALL_COLLISION', 'SELF_COLLISION', 'BOARD_FULL', 'SCORE_PER_FOOD',
    'InvariantViolation', 'PhaseError',
    'Grid',
    'Snake',
    'DirectionBuffer',
    'spawn_food',
    'GameState',
    'GameSnapshot',
]
