"""
Runtime configuration.

Values come from the environment (a local .env file is loaded first) and
can be overridden from the command line:

    SNAKE_FRAME_MS    frame budget in milliseconds (default 100)
    SNAKE_FIELD_SIZE  field size preset name; skips the start menu
    SNAKE_SEED        integer seed for food placement
    SNAKE_LOG_FILE    write logs to this file (logging is off otherwise)
    SNAKE_LOG_LEVEL   DEBUG, INFO, WARNING, ERROR (default INFO)
"""

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from layout import find_field_size

load_dotenv()

DEFAULT_FRAME_MS = 100
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GameConfig:
    frame_ms: int = DEFAULT_FRAME_MS
    field_size: Optional[str] = None
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.frame_ms <= 0:
            raise ValueError(f"Frame duration must be positive, got {self.frame_ms}ms")
        if self.field_size is not None:
            # Normalise to the preset's canonical name
            object.__setattr__(self, 'field_size', find_field_size(self.field_size).name)
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'. Choose one of: {', '.join(LOG_LEVELS)}")
        object.__setattr__(self, 'log_level', level)

    @property
    def frame_duration(self) -> float:
        """Frame budget in seconds."""
        return self.frame_ms / 1000.0

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        environ = os.environ if environ is None else environ
        return cls(
            frame_ms=_parse_int(environ, 'SNAKE_FRAME_MS', DEFAULT_FRAME_MS),
            field_size=environ.get('SNAKE_FIELD_SIZE') or None,
            seed=_parse_int(environ, 'SNAKE_SEED', None),
            log_file=environ.get('SNAKE_LOG_FILE') or None,
            log_level=environ.get('SNAKE_LOG_LEVEL', DEFAULT_LOG_LEVEL),
        )

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


def _parse_int(environ: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got '{raw}'") from None
