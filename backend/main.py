#!/usr/bin/env python3
"""
Terminal snake game.

Usage:
    python backend/main.py [--size tiny|small|medium|large] [--frame-ms 100]
                           [--seed N] [--log-file snake.log] [--log-level DEBUG]

Arrow keys (or WASD) steer, P pauses, R restarts after game over, Q quits.
"""

import argparse
import curses
import logging
import random
import sys
from typing import List, Optional

from config import GameConfig, LOG_LEVELS
from domain.game_state import GameState
from frame_driver import FrameDriver
from layout import FIELD_SIZES, compute_offsets, find_field_size
from services.curses_terminal import CursesInput, CursesRenderer, terminal_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal."
    )
    parser.add_argument("--size", type=str, required=False, default=None,
                        choices=[size.name.lower() for size in FIELD_SIZES],
                        help="Field size preset; skips the start menu")
    parser.add_argument("--frame-ms", type=int, required=False, default=None,
                        help="Milliseconds per game tick (default 100)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement")
    parser.add_argument("--log-file", type=str, required=False, default=None,
                        help="Write logs to this file")
    parser.add_argument("--log-level", type=str.upper, required=False, default=None,
                        choices=LOG_LEVELS,
                        help="Logging level (default INFO)")
    return parser


def load_config(argv: Optional[List[str]] = None) -> GameConfig:
    """
    Build the configuration from the environment, then apply CLI overrides.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return GameConfig.from_env().with_overrides(
            frame_ms=args.frame_ms,
            field_size=args.size,
            seed=args.seed,
            log_file=args.log_file,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))


def setup_logging(config: GameConfig):
    # The terminal belongs to curses, so logs only ever go to a file
    if config.log_file:
        logging.basicConfig(
            filename=config.log_file,
            level=config.logging_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def run_game(config: GameConfig) -> int:
    """
    Run the menu and the game loop inside a terminal session.

    Returns:
        Process exit code
    """
    with terminal_session() as window:
        renderer = CursesRenderer(window, frame_ms=config.frame_ms)

        preferred = find_field_size(config.field_size) if config.field_size else None
        field = renderer.select_field_size(preferred)
        if field is None:
            logger.info("Quit from the start menu")
            return 0

        rows, cols = renderer.terminal_size()
        offset_x, offset_y = compute_offsets(field, rows, cols)

        state = GameState(
            field.width,
            field.height,
            offset_x=offset_x,
            offset_y=offset_y,
            rng=random.Random(config.seed),
        )
        driver = FrameDriver(
            state,
            renderer=renderer,
            input_source=CursesInput(window),
            frame_duration=config.frame_duration,
        )
        ticks = driver.run()
        logger.info(f"Game loop finished after {ticks} ticks, final score {state.score}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config(argv)
    setup_logging(config)

    try:
        return run_game(config)
    except curses.error as e:
        logger.error(f"Terminal error: {e}")
        print(f"Error: could not drive the terminal ({e}).", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
