"""
Errors raised by the game engine.

Collisions and game over are normal game states and are never raised.
These exceptions mark programming errors only.
"""


class InvariantViolation(RuntimeError):
    """A game invariant was broken (e.g. the snake lost its last segment)."""


class PhaseError(InvariantViolation):
    """An operation was called in a lifecycle phase that does not allow it."""

    def __init__(self, operation: str, phase: str):
        super().__init__(f"Cannot {operation} while phase is {phase}")
        self.operation = operation
        self.phase = phase
