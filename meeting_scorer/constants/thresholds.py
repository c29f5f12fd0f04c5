"""
Threshold Constants

Centralized scoring values used by the scorer, heat map builder,
optimizer and trend analyzer.

IMPORTANT: Changing any of these changes slot rankings. The tie-break
tolerances and duration tolerance can be overridden per call or through
the environment (see meeting_scorer.core.config); the rest are fixed policy.
"""

# ============================================================================
# Response Scoring
# SYNC WITH: meeting_scorer/algorithms/slot_scoring.py
# ============================================================================

AVAILABLE_SCORE = 1.0
PREFERRED_SCORE = 1.2     # Bonus over plain availability
MAYBE_SCALE = 5.0         # maybe -> preference_score / 5.0
UNAVAILABLE_SCORE = 0.0

AVAILABLE_COUNT_FULL = 1.0
AVAILABLE_COUNT_MAYBE = 0.5

MIN_PREFERENCE_SCORE = 1
MAX_PREFERENCE_SCORE = 5


# ============================================================================
# Time-of-Day Multipliers (hours, fractional)
# ============================================================================

BUSINESS_START_HOUR = 9
BUSINESS_END_HOUR = 17
EARLY_MORNING_START_HOUR = 6
EVENING_END_HOUR = 20

BUSINESS_HOURS_MULTIPLIER = 1.1
EARLY_MORNING_MULTIPLIER = 0.9
EVENING_MULTIPLIER = 0.9
OFF_HOURS_MULTIPLIER = 0.7
NEUTRAL_MULTIPLIER = 1.0


# ============================================================================
# Heat Map Buckets
# SYNC WITH: meeting_scorer/algorithms/heat_map.py
# ============================================================================

PERFECT_SLOT_THRESHOLD = 0.9   # score >= 0.9 = perfect
GOOD_SLOT_THRESHOLD = 0.7      # score >= 0.7 = good
OKAY_SLOT_THRESHOLD = 0.5      # score >= 0.5 = okay
# Below OKAY = conflict

TOP_SLOTS_LIMIT = 10


# ============================================================================
# Optimizer
# SYNC WITH: meeting_scorer/algorithms/optimizer.py
# ============================================================================

DEFAULT_TARGET_DURATION_MINUTES = 60
DEFAULT_OPTIMAL_LIMIT = 5
DURATION_TOLERANCE_MINUTES = 30

SCORE_TIE_TOLERANCE = 0.1
ATTENDANCE_TIE_TOLERANCE = 0.1


# ============================================================================
# Trend Analysis
# SYNC WITH: meeting_scorer/analytics/trends.py
# ============================================================================

LOW_PARTICIPATION_THRESHOLD = 0.3   # score < 0.3 is reported as a conflict
MAX_REPORTED_CONFLICTS = 5
FALLBACK_BEST_DAY = "Wednesday"
FALLBACK_BEST_TIME = "10:00"


# ============================================================================
# Helper Functions
# ============================================================================

def slot_band(score: float) -> str:
    """
    Classify a slot score into its heat map band.

    Args:
        score: Normalized slot score

    Returns:
        "perfect", "good", "okay" or "conflict"

    Example:
        >>> slot_band(0.95)
        'perfect'
        >>> slot_band(0.75)
        'good'
        >>> slot_band(0.5)
        'okay'
        >>> slot_band(0.2)
        'conflict'
    """
    if score >= PERFECT_SLOT_THRESHOLD:
        return "perfect"
    elif score >= GOOD_SLOT_THRESHOLD:
        return "good"
    elif score >= OKAY_SLOT_THRESHOLD:
        return "okay"
    else:
        return "conflict"


def time_of_day_multiplier(start_minutes: int, end_minutes: int) -> float:
    """
    Universal preference curve applied to every participant's score.

    The first matching band wins: business hours, early morning, evening,
    then very early / very late.

    Example:
        >>> time_of_day_multiplier(14 * 60, 15 * 60)
        1.1
        >>> time_of_day_multiplier(7 * 60, 8 * 60)
        0.9
        >>> time_of_day_multiplier(21 * 60, 22 * 60)
        0.7
    """
    start_hour = start_minutes / 60
    end_hour = end_minutes / 60

    if start_hour >= BUSINESS_START_HOUR and end_hour <= BUSINESS_END_HOUR:
        return BUSINESS_HOURS_MULTIPLIER

    if EARLY_MORNING_START_HOUR <= start_hour < BUSINESS_START_HOUR:
        return EARLY_MORNING_MULTIPLIER

    if start_hour >= BUSINESS_END_HOUR and end_hour <= EVENING_END_HOUR:
        return EVENING_MULTIPLIER

    if start_hour < EARLY_MORNING_START_HOUR or end_hour > EVENING_END_HOUR:
        return OFF_HOURS_MULTIPLIER

    return NEUTRAL_MULTIPLIER
