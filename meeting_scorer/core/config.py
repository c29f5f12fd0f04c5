"""
Core Configuration Module

Centralizes environment configuration for the scoring engine.
Provides a singleton Settings object whose defaults mirror the named
constants in meeting_scorer.constants.thresholds.

Usage:
    from meeting_scorer.core.config import settings

    print(settings.LOG_LEVEL)
    print(settings.OPTIMAL_SLOT_LIMIT)
"""

import logging
import os
from typing import Callable, Optional, TypeVar

from meeting_scorer.constants.thresholds import (
    ATTENDANCE_TIE_TOLERANCE,
    DEFAULT_OPTIMAL_LIMIT,
    DEFAULT_TARGET_DURATION_MINUTES,
    DURATION_TOLERANCE_MINUTES,
    SCORE_TIE_TOLERANCE,
)

logger = logging.getLogger(__name__)

NumberT = TypeVar("NumberT", int, float)


def _env_number(name: str, default: NumberT, cast: Callable[[str], NumberT]) -> NumberT:
    """
    Read a numeric environment variable.

    A malformed value is logged and replaced by the default, so a bad
    deployment setting never breaks a scoring run.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using default {default}")
        return default


class Settings:
    """
    Engine settings loaded from environment variables.

    Values are read on every access so a caller can change the environment
    between recomputations without rebuilding anything.
    """

    # ==================== Application Settings ====================

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""
        return os.getenv("LOG_LEVEL", "INFO")

    # ==================== Optimizer Settings ====================

    @property
    def DEFAULT_TARGET_DURATION_MINUTES(self) -> int:
        """Meeting length the optimizer looks for when none is given"""
        return _env_number("DEFAULT_TARGET_DURATION_MINUTES", DEFAULT_TARGET_DURATION_MINUTES, int)

    @property
    def OPTIMAL_SLOT_LIMIT(self) -> int:
        """Number of recommended slots returned by the optimizer"""
        return _env_number("OPTIMAL_SLOT_LIMIT", DEFAULT_OPTIMAL_LIMIT, int)

    @property
    def DURATION_TOLERANCE_MINUTES(self) -> int:
        """Allowed distance between a slot's length and the target length"""
        return _env_number("DURATION_TOLERANCE_MINUTES", DURATION_TOLERANCE_MINUTES, int)

    # Tie-break tolerances (differences at or below these count as ties)

    @property
    def SCORE_TIE_TOLERANCE(self) -> float:
        """Score difference treated as a tie when ranking slots"""
        return _env_number("SCORE_TIE_TOLERANCE", SCORE_TIE_TOLERANCE, float)

    @property
    def ATTENDANCE_TIE_TOLERANCE(self) -> float:
        """Attendance rate difference treated as a tie when ranking slots"""
        return _env_number("ATTENDANCE_TIE_TOLERANCE", ATTENDANCE_TIE_TOLERANCE, float)


# ==================== Singleton Instance ====================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Returns:
        Settings object with configuration values

    Example:
        >>> from meeting_scorer.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.OPTIMAL_SLOT_LIMIT)
        5
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


# Convenience singleton for direct import
settings = get_settings()
