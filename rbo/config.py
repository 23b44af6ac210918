"""Centralized configuration loaded from .env file.

All other modules import settings from here; nothing else reads os.getenv.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Walk up from this file to find the project root .env
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    DEFAULT_PERSISTENCE: float
    LOG_LEVEL: str


def _load_settings() -> Settings:
    raw_p = os.getenv("RBO_PERSISTENCE", "0.9")
    try:
        persistence = float(raw_p)
    except ValueError as exc:
        raise EnvironmentError(
            f"RBO_PERSISTENCE must be a number, got {raw_p!r}. "
            "Set it in your .env file to a value with 0.0 <= p < 1.0."
        ) from exc
    if not 0.0 <= persistence < 1.0:
        raise EnvironmentError(
            f"RBO_PERSISTENCE must satisfy 0.0 <= p < 1.0, got {persistence}."
        )

    log_level = os.getenv("RBO_LOG_LEVEL", "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        raise EnvironmentError(
            f"RBO_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {log_level!r}."
        )

    return Settings(
        DEFAULT_PERSISTENCE=persistence,
        LOG_LEVEL=log_level,
    )


settings = _load_settings()
