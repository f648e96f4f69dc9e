"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List, Tuple

from .constants import DIRECTION_VECTORS
from .errors import InvariantViolation


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end

    The state machine is the only caller that mutates positions; every
    tick either pushes a new head and pops the tail, or (when eating)
    only pushes the new head.
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise InvariantViolation("Snake needs at least one segment")
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        if not self.positions:
            raise InvariantViolation("Snake has no segments")
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        if not self.positions:
            raise InvariantViolation("Snake has no segments")
        return self.positions[-1]

    def advance_head(self, direction: str) -> Tuple[int, int]:
        """Return where the head would be after one step; does not move the snake."""
        dx, dy = DIRECTION_VECTORS[direction]
        hx, hy = self.head
        return (hx + dx, hy + dy)

    def push_front(self, point: Tuple[int, int]) -> None:
        self.positions.appendleft(point)

    def pop_back(self) -> Tuple[int, int]:
        # The last segment is never removed: length >= 1 always holds
        if len(self.positions) <= 1:
            raise InvariantViolation("Cannot remove the last snake segment")
        return self.positions.pop()

    def contains(self, point: Tuple[int, int]) -> bool:
        return point in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake head={self.positions[0] if self.positions else None}, length={len(self.positions)}>"
