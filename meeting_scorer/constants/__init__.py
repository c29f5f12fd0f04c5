"""
Constants Package

Centralized constants for the scoring engine.

Exports:
- Participant roles and role multipliers
- Response statuses and day-of-week names
- Scoring thresholds (time-of-day bands, heat map buckets, tie tolerances)

Safe to import anywhere - no heavy dependencies or circular imports.
"""

# Role constants
from .roles import (
    ParticipantRole,
    ROLE_MULTIPLIERS,
    DEFAULT_ROLE,
    DEFAULT_ROLE_MULTIPLIER,
    normalize_role,
    role_multiplier,
)

# Status and calendar constants
from .constants import (
    ResponseStatus,
    AttendanceStatus,
    DayOfWeek,
)

# Threshold values
from .thresholds import (
    PERFECT_SLOT_THRESHOLD,
    GOOD_SLOT_THRESHOLD,
    OKAY_SLOT_THRESHOLD,
    TOP_SLOTS_LIMIT,
    DEFAULT_TARGET_DURATION_MINUTES,
    DEFAULT_OPTIMAL_LIMIT,
    DURATION_TOLERANCE_MINUTES,
    SCORE_TIE_TOLERANCE,
    ATTENDANCE_TIE_TOLERANCE,
    LOW_PARTICIPATION_THRESHOLD,
    slot_band,
    time_of_day_multiplier,
)

__all__ = [
    # Roles
    "ParticipantRole",
    "ROLE_MULTIPLIERS",
    "DEFAULT_ROLE",
    "DEFAULT_ROLE_MULTIPLIER",
    "normalize_role",
    "role_multiplier",
    # Statuses
    "ResponseStatus",
    "AttendanceStatus",
    "DayOfWeek",
    # Thresholds
    "PERFECT_SLOT_THRESHOLD",
    "GOOD_SLOT_THRESHOLD",
    "OKAY_SLOT_THRESHOLD",
    "TOP_SLOTS_LIMIT",
    "DEFAULT_TARGET_DURATION_MINUTES",
    "DEFAULT_OPTIMAL_LIMIT",
    "DURATION_TOLERANCE_MINUTES",
    "SCORE_TIE_TOLERANCE",
    "ATTENDANCE_TIE_TOLERANCE",
    "LOW_PARTICIPATION_THRESHOLD",
    "slot_band",
    "time_of_day_multiplier",
]
