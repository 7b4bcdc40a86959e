"""Settings for a new game. Values can be overridden through environment variables."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from src.core.shared_types import DEFAULT_BOARD_SIZE, DEFAULT_WALLS_PER_PLAYER

ENV_PREFIX = "QUORIDOR_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameSettings(BaseModel):
    board_size: int = DEFAULT_BOARD_SIZE
    walls_per_player: int = DEFAULT_WALLS_PER_PLAYER
    log_level: str = "WARNING"

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: int) -> int:
        # pawns start in the middle column, so there has to be one
        if value < 3 or value % 2 == 0:
            raise ValueError(f"Board size must be an odd number >= 3, got {value}")
        return value

    @field_validator("walls_per_player")
    @classmethod
    def validate_walls_per_player(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"Number of walls cannot be negative, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> GameSettings:
    """Collect QUORIDOR_* variables from the environment (or the supplied mapping)"""
    environ = os.environ if environ is None else environ
    overrides = {
        field_name: environ[f"{ENV_PREFIX}{field_name.upper()}"]
        for field_name in GameSettings.model_fields
        if f"{ENV_PREFIX}{field_name.upper()}" in environ
    }
    return GameSettings(**overrides)
