"""
Tests for main.py - command line entry point and game wiring.
"""

import curses
import pytest
import sys
import os
from unittest.mock import MagicMock, patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from config import GameConfig
from layout import FIELD_SIZES


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ('SNAKE_FRAME_MS', 'SNAKE_FIELD_SIZE', 'SNAKE_SEED', 'SNAKE_LOG_FILE', 'SNAKE_LOG_LEVEL'):
        monkeypatch.delenv(key, raising=False)


class TestLoadConfig:

    def test_defaults(self):
        config = main.load_config([])
        assert config == GameConfig()

    def test_cli_overrides_environment(self, monkeypatch):
        monkeypatch.setenv('SNAKE_FRAME_MS', '200')
        monkeypatch.setenv('SNAKE_SEED', '1')
        config = main.load_config(['--frame-ms', '60', '--size', 'medium', '--log-level', 'debug'])
        assert config.frame_ms == 60
        assert config.seed == 1
        assert config.field_size == "Medium"
        assert config.log_level == "DEBUG"

    def test_unknown_size_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main.load_config(['--size', 'huge'])
        assert exc_info.value.code == 2

    def test_invalid_frame_ms_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main.load_config(['--frame-ms', '0'])
        assert exc_info.value.code == 2


class TestMain:

    def test_normal_quit_exits_zero(self):
        with patch.object(main, 'run_game', return_value=0) as run_game:
            assert main.main([]) == 0
        run_game.assert_called_once()

    def test_terminal_failure_exits_one(self, capsys):
        with patch.object(main, 'run_game', side_effect=curses.error("setupterm failed")):
            assert main.main([]) == 1
        assert "could not drive the terminal" in capsys.readouterr().err


class TestRunGame:

    def make_session(self, window):
        session = MagicMock()
        session.return_value.__enter__.return_value = window
        return session

    def test_quit_from_menu(self):
        window = MagicMock()
        renderer = MagicMock()
        renderer.select_field_size.return_value = None
        with patch.object(main, 'terminal_session', self.make_session(window)), \
                patch.object(main, 'CursesRenderer', return_value=renderer), \
                patch.object(main, 'FrameDriver') as driver_cls:
            assert main.run_game(GameConfig()) == 0
        driver_cls.assert_not_called()

    def test_game_is_centred_and_driven(self):
        window = MagicMock()
        renderer = MagicMock()
        renderer.select_field_size.return_value = FIELD_SIZES[0]
        renderer.terminal_size.return_value = (26, 42)
        config = GameConfig(frame_ms=50, field_size="tiny", seed=4)
        with patch.object(main, 'terminal_session', self.make_session(window)), \
                patch.object(main, 'CursesRenderer', return_value=renderer), \
                patch.object(main, 'FrameDriver') as driver_cls:
            driver_cls.return_value.run.return_value = 12
            assert main.run_game(config) == 0

        renderer.select_field_size.assert_called_once_with(FIELD_SIZES[0])
        state = driver_cls.call_args[0][0]
        assert (state.width, state.height) == (20, 10)
        assert (state.offset_x, state.offset_y) == (10, 5)
        assert driver_cls.call_args[1]['frame_duration'] == pytest.approx(0.05)
        driver_cls.return_value.run.assert_called_once_with()
