"""
Curses terminal service: session setup/teardown, rendering and key input.

The game core never imports this module; it only sees objects with
render(snapshot) and poll() methods.
"""

import curses
import logging
from contextlib import contextmanager
from typing import Generator, Optional, Tuple

from controls import QUIT, key_to_action, menu_choice
from domain.constants import BOARD_FULL, GAME_OVER, PAUSED, SELF_COLLISION, WAITING_FOR_START, WALL_COLLISION
from domain.game_state import GameSnapshot
from layout import FIELD_SIZES, FieldSize, INFO_PANEL_HEIGHT, TerminalTooSmall, check_size

logger = logging.getLogger(__name__)

# Color pairs (curses color pairs start at 1)
COLOR_SNAKE = 1
COLOR_FOOD = 2
COLOR_BORDER = 3
COLOR_TEXT = 4

CAUSE_MESSAGES = {
    WALL_COLLISION: "You hit the wall",
    SELF_COLLISION: "You ran into yourself",
    BOARD_FULL: "You filled the board",
}


@contextmanager
def terminal_session() -> Generator["curses.window", None, None]:
    """
    Context manager owning the terminal for the lifetime of the game.

    Restores the terminal on every exit path, including exceptions.

    Example:
        with terminal_session() as window:
            renderer = CursesRenderer(window, frame_ms=100)
    """
    window = curses.initscr()
    try:
        curses.noecho()
        curses.cbreak()
        window.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            # Not every terminal can hide the cursor
            pass
        window.timeout(0)
        if curses.has_colors():
            curses.start_color()
            curses.init_pair(COLOR_SNAKE, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(COLOR_FOOD, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(COLOR_BORDER, curses.COLOR_YELLOW, curses.COLOR_BLACK)
            curses.init_pair(COLOR_TEXT, curses.COLOR_WHITE, curses.COLOR_BLACK)
        logger.info(f"Terminal session started ({window.getmaxyx()[1]}x{window.getmaxyx()[0]})")
        yield window
    finally:
        window.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        logger.info("Terminal session closed")


class CursesInput:
    """Non-blocking key source for the game loop."""

    def __init__(self, window):
        self.window = window

    def poll(self) -> Optional[int]:
        key = self.window.getch()
        return None if key == -1 else key


class CursesRenderer:
    """
    Draws game snapshots, the start menu and the size error dialog.
    """

    def __init__(self, window, frame_ms: int):
        self.window = window
        self.frame_ms = frame_ms
        self.colors = curses.has_colors()

    def terminal_size(self) -> Tuple[int, int]:
        """Return (rows, cols) of the terminal."""
        return self.window.getmaxyx()

    # ------------------------------------------------------------------
    # Drawing primitives
    # ------------------------------------------------------------------

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self.colors else curses.A_NORMAL

    def _text(self, y: int, x: int, text: str, pair: int = COLOR_TEXT):
        try:
            self.window.addstr(y, x, text, self._attr(pair))
        except curses.error:
            # Writing into the last cell of the screen moves the cursor off-screen
            pass

    def _char(self, y: int, x: int, ch: str, pair: int):
        try:
            self.window.addch(y, x, ch, self._attr(pair))
        except curses.error:
            pass

    # ------------------------------------------------------------------
    # Gameplay
    # ------------------------------------------------------------------

    def render(self, snapshot: GameSnapshot):
        self.window.erase()
        self._render_info_panel(snapshot)
        self._render_game_area(snapshot)
        self._render_status_message(snapshot)
        self.window.refresh()

    def _render_info_panel(self, snapshot: GameSnapshot):
        x = snapshot.offset_x + 1
        y = snapshot.offset_y
        self._text(y, x, "=== TERMINAL SNAKE ===")
        self._text(y + 1, x, f"Score: {snapshot.score}  |  Length: {snapshot.length}  |  Speed: {self.frame_ms}ms")
        self._text(y + 2, x, "Controls: Arrow Keys=Move  P=Pause  Q=Quit")

    def _field_origin(self, snapshot: GameSnapshot) -> Tuple[int, int]:
        # Field cell (0, 0) sits inside the border, right under the info panel
        return snapshot.offset_y + INFO_PANEL_HEIGHT + 1, snapshot.offset_x + 1

    def _render_game_area(self, snapshot: GameSnapshot):
        top, left = self._field_origin(snapshot)

        for x in range(-1, snapshot.width + 1):
            self._char(top - 1, left + x, '#', COLOR_BORDER)
            self._char(top + snapshot.height, left + x, '#', COLOR_BORDER)
        for y in range(snapshot.height):
            self._char(top + y, left - 1, '#', COLOR_BORDER)
            self._char(top + y, left + snapshot.width, '#', COLOR_BORDER)

        fx, fy = snapshot.food
        self._char(top + fy, left + fx, '@', COLOR_FOOD)

        for i, (x, y) in enumerate(snapshot.snake):
            self._char(top + y, left + x, 'O' if i == 0 else 'o', COLOR_SNAKE)

    def _render_status_message(self, snapshot: GameSnapshot):
        top, left = self._field_origin(snapshot)
        y = top + snapshot.height + 1

        if snapshot.phase == WAITING_FOR_START:
            self._text(y, left, "*** Press an arrow key to start ***", COLOR_BORDER)
        elif snapshot.phase == PAUSED:
            self._text(y, left, "*** PAUSED - Press P to continue ***", COLOR_BORDER)
        elif snapshot.phase == GAME_OVER:
            cause = CAUSE_MESSAGES.get(snapshot.cause, "Game over")
            self._text(
                y, left,
                f"*** GAME OVER! {cause}. Final Score: {snapshot.score} - Press R to restart or Q to quit ***",
                COLOR_FOOD,
            )

    # ------------------------------------------------------------------
    # Start menu
    # ------------------------------------------------------------------

    def _draw_menu(self):
        rows, cols = self.terminal_size()
        self.window.erase()

        start_y, start_x = 2, 2
        self._text(start_y, start_x, "=== TERMINAL SNAKE - SELECT FIELD SIZE ===")

        for i, size in enumerate(FIELD_SIZES):
            option = f"  {i + 1}. {size}"
            if check_size(size, rows, cols) is None:
                self._text(start_y + 2 + i * 2, start_x, option, COLOR_SNAKE)
            else:
                self._text(start_y + 2 + i * 2, start_x, f"{option} [TOO LARGE]", COLOR_FOOD)

        y = start_y + 2 + len(FIELD_SIZES) * 2 + 1
        self._text(y, start_x, f"Press 1-{len(FIELD_SIZES)} to select a size, or Q to quit")
        self._text(y + 1, start_x, f"Terminal size: {cols}x{rows}")
        self.window.refresh()

    def show_size_error(self, error: TerminalTooSmall):
        """Explain why a field size was rejected and wait for any key."""
        self.window.erase()
        self._text(2, 2, "ERROR: Terminal too small for this field size!", COLOR_FOOD)
        for i, line in enumerate(error.describe()):
            self._text(4 + i, 2, line)
        self._text(8, 2, "Please resize your terminal or select a smaller field size.")
        self._text(9, 2, "Press any key to return to the menu...")
        self.window.refresh()
        self.window.getch()

    def select_field_size(self, preferred: Optional[FieldSize] = None) -> Optional[FieldSize]:
        """
        Let the player pick a field size.

        A preferred size that fits is returned straight away; one that does
        not fit shows the size error first. The menu reads keys blocking so
        it does not spin while waiting.

        Returns:
            The chosen FieldSize, or None if the player quit
        """
        self.window.timeout(-1)
        try:
            if preferred is not None:
                error = check_size(preferred, *self.terminal_size())
                if error is None:
                    return preferred
                logger.warning(f"Field {preferred} does not fit terminal {error.cols}x{error.rows}")
                self.show_size_error(error)

            self._draw_menu()
            while True:
                key = self.window.getch()
                if key_to_action(key) == QUIT:
                    return None

                index = menu_choice(key)
                if index is None or index >= len(FIELD_SIZES):
                    continue

                size = FIELD_SIZES[index]
                error = check_size(size, *self.terminal_size())
                if error is None:
                    logger.info(f"Selected field {size}")
                    return size

                logger.warning(f"Field {size} does not fit terminal {error.cols}x{error.rows}")
                self.show_size_error(error)
                self._draw_menu()
        finally:
            # Back to non-blocking input for gameplay
            self.window.timeout(0)
