"""
Fixed-rate game loop.

Each tick: poll input (non-blocking) -> translate key to action ->
advance the game if running -> render a snapshot -> sleep for the rest
of the frame budget.
"""

import logging
import time
from typing import Callable, Optional

from controls import QUIT, apply_action, key_to_action
from domain.constants import RUNNING
from domain.game_state import GameSnapshot, GameState

logger = logging.getLogger(__name__)


class FrameDriver:
    """
    Runs the game loop for one GameState.

    Args:
        state: the game to drive
        renderer: any object with render(snapshot)
        input_source: any object with poll() -> Optional[int]; None means no key
        frame_duration: seconds per tick
        clock: monotonic time source
        sleep: called with the remaining frame time
    """

    def __init__(
        self,
        state: GameState,
        renderer,
        input_source,
        frame_duration: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if frame_duration <= 0:
            raise ValueError(f"Frame duration must be positive, got {frame_duration}")
        self.state = state
        self.renderer = renderer
        self.input_source = input_source
        self.frame_duration = frame_duration
        self.clock = clock
        self.sleep = sleep
        self.ticks = 0

    def tick(self) -> bool:
        """
        Run one iteration of the loop without sleeping.

        Returns:
            False if the player asked to quit, True otherwise
        """
        action = key_to_action(self.input_source.poll())
        if action == QUIT:
            logger.info(f"Quit requested after {self.ticks} ticks (score {self.state.score})")
            return False

        apply_action(self.state, action)

        if self.state.phase == RUNNING:
            self.state.advance()

        self.render()
        self.ticks += 1
        return True

    def render(self) -> GameSnapshot:
        snapshot = self.state.snapshot()
        self.renderer.render(snapshot)
        return snapshot

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Loop until quit (or until max_ticks ticks have run).

        Returns:
            Number of completed ticks
        """
        logger.info(f"Starting game loop ({self.frame_duration * 1000:.0f}ms per tick)")
        self.render()

        while max_ticks is None or self.ticks < max_ticks:
            started = self.clock()
            if not self.tick():
                break

            remaining = self.frame_duration - (self.clock() - started)
            if remaining > 0:
                self.sleep(remaining)

        return self.ticks
