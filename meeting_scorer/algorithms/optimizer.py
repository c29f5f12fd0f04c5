"""
Optimal Slot Selection

Picks the best slots of roughly the requested length using a three-level
tie-break chain: score, then attendance rate, then conflict level.

Small score differences are treated as ties on purpose: the weighted score
moves with role weighting, while attendance rate and conflict level track
the raw headcount.
"""

import logging
from functools import cmp_to_key
from typing import List, Sequence

from meeting_scorer.constants.thresholds import (
    ATTENDANCE_TIE_TOLERANCE,
    DEFAULT_OPTIMAL_LIMIT,
    DEFAULT_TARGET_DURATION_MINUTES,
    DURATION_TOLERANCE_MINUTES,
    SCORE_TIE_TOLERANCE,
)
from meeting_scorer.schemas.slots import ScoredTimeSlot

logger = logging.getLogger(__name__)


def find_optimal_slots(
    scored_slots: Sequence[ScoredTimeSlot],
    target_duration_minutes: int = DEFAULT_TARGET_DURATION_MINUTES,
    limit: int = DEFAULT_OPTIMAL_LIMIT,
    *,
    duration_tolerance_minutes: int = DURATION_TOLERANCE_MINUTES,
    score_tolerance: float = SCORE_TIE_TOLERANCE,
    attendance_tolerance: float = ATTENDANCE_TIE_TOLERANCE
) -> List[ScoredTimeSlot]:
    """
    Rank slots close to the target duration.

    Args:
        scored_slots: Output of the slot scorer.
        target_duration_minutes: Desired meeting length.
        limit: Maximum number of slots returned.
        duration_tolerance_minutes: Allowed |duration - target| (inclusive).
        score_tolerance: Score differences at or below this are ties.
        attendance_tolerance: Attendance differences at or below this are ties.

    Returns:
        Up to `limit` slots, best first.
    """
    candidates = [
        slot for slot in scored_slots
        if abs(slot.duration_minutes - target_duration_minutes) <= duration_tolerance_minutes
    ]

    def compare(a: ScoredTimeSlot, b: ScoredTimeSlot) -> float:
        if abs(a.score - b.score) > score_tolerance:
            return b.score - a.score
        if abs(a.attendance_rate - b.attendance_rate) > attendance_tolerance:
            return b.attendance_rate - a.attendance_rate
        return a.conflict_level - b.conflict_level

    ranked = sorted(candidates, key=cmp_to_key(compare))

    logger.debug(
        f"Optimal slots: {len(candidates)}/{len(scored_slots)} within "
        f"{duration_tolerance_minutes}min of {target_duration_minutes}min"
    )

    return ranked[:max(limit, 0)]
