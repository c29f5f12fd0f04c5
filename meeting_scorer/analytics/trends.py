"""
Trend Analysis

Aggregates scored slots into explanatory trends:
- Best day of week (highest mean slot score)
- Best start hour (highest mean slot score)
- Worst conflicts (slots with very low scores)
- Cumulative attendance per time range across all dates

Means are plain arithmetic means of slot scores; the scores are already
participant-weighted upstream.
"""

import logging
from typing import Dict, List, Optional, Sequence, TypeVar

from meeting_scorer.constants.constants import DayOfWeek
from meeting_scorer.constants.thresholds import (
    FALLBACK_BEST_DAY,
    FALLBACK_BEST_TIME,
    LOW_PARTICIPATION_THRESHOLD,
    MAX_REPORTED_CONFLICTS,
)
from meeting_scorer.schemas.analysis import TrendAnalysis
from meeting_scorer.schemas.slots import ScoredTimeSlot
from meeting_scorer.tools.rounding import round_half_up
from meeting_scorer.tools.time_tool import day_of_week, format_hour

logger = logging.getLogger(__name__)

KeyT = TypeVar("KeyT")


def analyze_trends(scored_slots: Sequence[ScoredTimeSlot]) -> TrendAnalysis:
    """
    Compute trends over a set of scored slots.

    Falls back to Wednesday / 10:00 when there is nothing to analyze so
    callers always get a usable answer.
    """
    day_scores: Dict[DayOfWeek, List[float]] = {}
    hour_scores: Dict[int, List[float]] = {}
    conflicts: List[str] = []
    participation: Dict[str, float] = {}

    for slot in scored_slots:
        day = day_of_week(slot.date)
        if day is not None:
            day_scores.setdefault(day, []).append(slot.score)

        hour_scores.setdefault(slot.start_minutes // 60, []).append(slot.score)

        if slot.score < LOW_PARTICIPATION_THRESHOLD:
            conflicts.append(_describe_conflict(slot))

        participation[slot.time_key] = participation.get(slot.time_key, 0.0) + slot.attendance_rate

    best_day = _best_bucket(day_scores)
    # Ties go to the earliest hour
    best_hour = _best_bucket({hour: hour_scores[hour] for hour in sorted(hour_scores)})

    logger.debug(
        f"Trends over {len(scored_slots)} slots: best_day={best_day} "
        f"best_hour={best_hour} conflicts={len(conflicts)}"
    )

    return TrendAnalysis(
        best_day_of_week=best_day if best_day is not None else DayOfWeek(FALLBACK_BEST_DAY),
        best_time_of_day=format_hour(best_hour) if best_hour is not None else FALLBACK_BEST_TIME,
        worst_conflicts=conflicts[:MAX_REPORTED_CONFLICTS],
        participation_trends={key: round_half_up(total) for key, total in participation.items()}
    )


def _best_bucket(buckets: Dict[KeyT, List[float]]) -> Optional[KeyT]:
    """Key with the highest mean; on ties the first key in iteration order."""
    best_key = None
    best_mean = None
    for key, scores in buckets.items():
        mean = sum(scores) / len(scores)
        if best_mean is None or mean > best_mean:
            best_key, best_mean = key, mean
    return best_key


def _describe_conflict(slot: ScoredTimeSlot) -> str:
    percent = round_half_up(slot.attendance_rate * 100, 0)
    return f"{slot.date} {slot.start_time}: Low participation ({percent:.0f}%)"
