"""
Game configuration for Noughts & Crosses.
Defaults for the console front end; each can be overridden from the environment.

    TTT_DIFFICULTY=hard TTT_HUMAN_PLAYER=O LOG_LEVEL=DEBUG tictactoe
"""

import os
from typing import Optional

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env(name: str, default: str = "") -> str:
    value = os.getenv(name)
    if value is not None and value.strip() != "":
        return value.strip()
    return default


def env_bool(name: str, default: bool) -> bool:
    """Read a yes/no environment variable."""
    value = _env(name).lower()
    if not value:
        return default
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def env_int(name: str) -> Optional[int]:
    """Read an optional integer environment variable."""
    value = _env(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


class GameConfig:
    """
    Configuration class for game settings.
    Values are read once, when the module is imported.
    """

    # ==================== AI SETTINGS ====================
    DEFAULT_DIFFICULTY = _env("TTT_DIFFICULTY", "medium")

    # Seed for the AI's random choices. None = different every run
    AI_SEED = env_int("TTT_AI_SEED")

    # ==================== MATCH SETTINGS ====================
    # Which mark the human plays against the AI (X moves first)
    HUMAN_PLAYER = _env("TTT_HUMAN_PLAYER", "X").upper()

    UNDO_ENABLED = env_bool("TTT_UNDO_ENABLED", True)

    # ==================== LOGGING ====================
    LOG_LEVEL = _env("LOG_LEVEL", "WARNING").upper()
    LOG_FILE = _env("LOG_FILE") or None
    LOG_MAX_MB = env_int("LOG_MAX_MB") or 10
    LOG_BACKUP_COUNT = env_int("LOG_BACKUP_COUNT") or 5
