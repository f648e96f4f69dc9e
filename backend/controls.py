"""
Key handling: raw curses key codes -> semantic actions -> game state changes.

Everything here is pure and works without an initialised terminal.
"""

import curses
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from layout import FIELD_SIZES

# Actions
MOVE_UP = "MOVE_UP"
MOVE_DOWN = "MOVE_DOWN"
MOVE_LEFT = "MOVE_LEFT"
MOVE_RIGHT = "MOVE_RIGHT"
PAUSE_TOGGLE = "PAUSE_TOGGLE"
RESTART = "RESTART"
QUIT = "QUIT"
NONE = "NONE"

ACTION_DIRECTIONS = {
    MOVE_UP: UP,
    MOVE_DOWN: DOWN,
    MOVE_LEFT: LEFT,
    MOVE_RIGHT: RIGHT,
}

ESCAPE_KEY = 27

KEY_ACTIONS = {
    curses.KEY_UP: MOVE_UP,
    curses.KEY_DOWN: MOVE_DOWN,
    curses.KEY_LEFT: MOVE_LEFT,
    curses.KEY_RIGHT: MOVE_RIGHT,
    ord('w'): MOVE_UP,
    ord('s'): MOVE_DOWN,
    ord('a'): MOVE_LEFT,
    ord('d'): MOVE_RIGHT,
    ord('p'): PAUSE_TOGGLE,
    ord('P'): PAUSE_TOGGLE,
    ord(' '): PAUSE_TOGGLE,
    ord('r'): RESTART,
    ord('R'): RESTART,
    ord('q'): QUIT,
    ord('Q'): QUIT,
    ESCAPE_KEY: QUIT,
}

# Start menu keys: "1", "2", ... pick a field size preset
MENU_KEYS = {ord(str(i + 1)): i for i in range(len(FIELD_SIZES))}


def key_to_action(key: Optional[int]) -> str:
    """Map a key code (None for "no key this tick") to an action."""
    if key is None:
        return NONE
    return KEY_ACTIONS.get(key, NONE)


def menu_choice(key: Optional[int]) -> Optional[int]:
    """Return the field size index chosen by a start-menu key, if any."""
    if key is None:
        return None
    return MENU_KEYS.get(key)


def apply_action(state: GameState, action: str) -> bool:
    """
    Apply an action to the game state.

    QUIT and NONE are left to the caller and never change the state.

    Returns:
        True if the state changed (direction staged, pause toggled, restarted)
    """
    if action in ACTION_DIRECTIONS:
        return state.request_direction(ACTION_DIRECTIONS[action])
    if action == PAUSE_TOGGLE:
        return state.toggle_pause()
    if action == RESTART:
        return state.restart()
    return False
