"""
GameState entity - the lifecycle state machine for a single game session.

Phases:
    WAITING_FOR_START -> RUNNING   first direction key
    RUNNING <-> PAUSED             pause toggle
    RUNNING -> GAME_OVER           wall or self collision, or a full board, during advance()
    GAME_OVER -> WAITING_FOR_START restart (field size and offsets are kept)
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import (
    BOARD_FULL,
    GAME_OVER,
    INITIAL_DIRECTION,
    INITIAL_SNAKE_LENGTH,
    PAUSED,
    RUNNING,
    SCORE_PER_FOOD,
    SELF_COLLISION,
    VALID_MOVES,
    WAITING_FOR_START,
    WALL_COLLISION,
)
from .direction import DirectionBuffer
from .errors import PhaseError
from .food import spawn_food
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only copy of everything a renderer needs for one frame.

    Attributes:
        snake: segments from head to tail
        food: (x, y) of the food item
        score: current score
        phase: lifecycle phase
        cause: game over cause, or None while the game is alive
        direction: committed (or, before the first tick, staged) direction
        width, height: field dimensions
        offset_x, offset_y: top-left screen position of the whole game view
    """
    snake: Tuple[Tuple[int, int], ...]
    food: Tuple[int, int]
    score: int
    phase: str
    cause: Optional[str]
    direction: Optional[str]
    width: int
    height: int
    offset_x: int
    offset_y: int

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        @ = food
        O = snake head
        o = snake body
        Rows are printed top to bottom, matching the terminal layout.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        board[fy][fx] = '@'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'O' if pos_idx == 0 else 'o'

        return "\n".join(''.join(row) for row in board)


def default_snake_positions(width: int, height: int) -> List[Tuple[int, int]]:
    """Horizontal snake in the centre of the field, head pointing right."""
    center_x = width // 2
    center_y = height // 2
    return [(center_x - i, center_y) for i in range(INITIAL_SNAKE_LENGTH)]


class GameState:
    """
    Owns all mutable game data: snake, food, direction buffer, score and phase.

    Attributes:
        grid: playable field
        offset_x, offset_y: where the renderer places the game view
        snake: the Snake entity
        food: (x, y) of the current food item
        score: +SCORE_PER_FOOD per food eaten
        phase: one of WAITING_FOR_START, RUNNING, PAUSED, GAME_OVER
        cause: WALL_COLLISION, SELF_COLLISION or BOARD_FULL once the game is over
    """

    def __init__(
        self,
        width: int,
        height: int,
        offset_x: int = 0,
        offset_y: int = 0,
        rng: Optional[random.Random] = None,
        snake_positions: Optional[List[Tuple[int, int]]] = None,
        direction: str = INITIAL_DIRECTION,
    ):
        self.grid = Grid(width, height)
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.rng = rng or random.Random()

        if snake_positions is None:
            snake_positions = default_snake_positions(width, height)
        for point in snake_positions:
            if not self.grid.contains(point):
                raise ValueError(f"Snake segment out of bounds at {point}.")
        self._initial_positions = list(snake_positions)
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")
        self._initial_direction = direction

        self._reset()

    def _reset(self):
        self.snake = Snake(self._initial_positions)
        # A one-segment snake has no neck to reverse into, so any first key is fine
        committed = self._initial_direction if len(self.snake) > 1 else None
        self.directions = DirectionBuffer(committed, staged=self._initial_direction)
        self.score = 0
        self.phase = WAITING_FOR_START
        self.cause: Optional[str] = None
        self.food = spawn_food(self.grid, self.snake, self.rng)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def direction(self) -> Optional[str]:
        return self.directions.committed or self.directions.staged

    def request_direction(self, direction: str) -> bool:
        """
        Stage a new direction. The first request also starts the game.

        Returns:
            True if the direction was staged, False if it was ignored
        """
        if self.phase == GAME_OVER:
            return False

        accepted = self.directions.request(direction)
        if not accepted:
            logger.debug(f"Ignored reversal {direction} (moving {self.directions.committed})")

        if self.phase == WAITING_FOR_START:
            self._set_phase(RUNNING)
        return accepted

    def toggle_pause(self) -> bool:
        """Switch between RUNNING and PAUSED; other phases are left alone."""
        if self.phase == RUNNING:
            self._set_phase(PAUSED)
        elif self.phase == PAUSED:
            self._set_phase(RUNNING)
        else:
            return False
        return True

    def restart(self) -> bool:
        """Start a fresh game on the same field. Only allowed after game over."""
        if self.phase != GAME_OVER:
            return False
        logger.info(f"Restarting game (previous score {self.score})")
        self._reset()
        return True

    def advance(self):
        """
        Main game logic update - called once per tick.

        Order: commit direction, compute new head, wall check, self check
        (the tail is not an obstacle when it moves away this tick), then
        either grow onto the food or move.
        """
        if self.phase == GAME_OVER:
            raise PhaseError("advance", self.phase)
        if self.phase != RUNNING:
            return

        direction = self.directions.commit()
        new_head = self.snake.advance_head(direction)

        if not self.grid.contains(new_head):
            self._end(WALL_COLLISION, new_head)
            return

        growing = new_head == self.food
        # The tail cell is vacated in the same tick unless the snake grows
        vacating_tail = not growing and new_head == self.snake.tail
        if self.snake.contains(new_head) and not vacating_tail:
            self._end(SELF_COLLISION, new_head)
            return

        self.snake.push_front(new_head)
        if growing:
            self.score += SCORE_PER_FOOD
            if len(self.snake) >= self.grid.area:
                # No free cell left for food: the player has won
                self._end(BOARD_FULL, new_head)
                return
            self.food = spawn_food(self.grid, self.snake, self.rng)
            logger.debug(f"Food eaten at {new_head}, score {self.score}, new food at {self.food}")
        else:
            self.snake.pop_back()

    def snapshot(self) -> GameSnapshot:
        """
        Return a read-only view of the current game for rendering.
        """
        return GameSnapshot(
            snake=tuple(self.snake.positions),
            food=self.food,
            score=self.score,
            phase=self.phase,
            cause=self.cause,
            direction=self.direction,
            width=self.width,
            height=self.height,
            offset_x=self.offset_x,
            offset_y=self.offset_y,
        )

    def _end(self, cause: str, new_head: Tuple[int, int]):
        self.cause = cause
        self._set_phase(GAME_OVER)
        logger.info(f"Game over: {cause} at {new_head}, score {self.score}, length {len(self.snake)}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Final board:\n{self.snapshot().print_board()}")

    def _set_phase(self, phase: str):
        logger.info(f"Phase {self.phase} -> {phase}")
        self.phase = phase

    def __repr__(self):
        return (
            f"<GameState phase={self.phase}, score={self.score}, "
            f"length={len(self.snake)}, food={self.food}>"
        )
