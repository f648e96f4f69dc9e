"""
Buffered direction input.

Key presses only stage a direction; the staged value becomes the
committed one at the start of the next tick. Reversal is checked
against the committed direction, so two quick presses (e.g. UP then
LEFT while moving RIGHT) can never turn the snake back onto its neck.
"""

from typing import Optional

from .constants import VALID_MOVES, is_opposite


class DirectionBuffer:

    def __init__(self, committed: Optional[str] = None, staged: Optional[str] = None):
        for direction in (committed, staged):
            if direction is not None and direction not in VALID_MOVES:
                raise ValueError(f"Unknown direction: {direction}")
        self.committed = committed
        self.staged = staged if staged is not None else committed

    def request(self, direction: str) -> bool:
        """
        Stage a direction for the next tick.

        Returns:
            True if the direction was staged, False if it was rejected
            as a reversal of the committed direction.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")
        if self.committed is not None and is_opposite(self.committed, direction):
            return False
        self.staged = direction
        return True

    def commit(self) -> str:
        """Make the staged direction the active one and return it."""
        if self.staged is None:
            raise ValueError("No direction has been requested yet")
        self.committed = self.staged
        return self.committed

    def __repr__(self):
        return f"<DirectionBuffer committed={self.committed}, staged={self.staged}>"
