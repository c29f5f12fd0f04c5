"""
Event Analysis Pipeline

Runs every stage for one event in order:
slots + roster -> scored slots -> heat map -> optimal slots + trends.

Stateless: callers invoke it again whenever responses change. Defaults for
duration, limit and tie tolerances come from Settings.
"""

import logging
from typing import List, Optional, Sequence

from meeting_scorer.algorithms.heat_map import build_heat_map
from meeting_scorer.algorithms.optimizer import find_optimal_slots
from meeting_scorer.algorithms.slot_scoring import score_time_slots
from meeting_scorer.analytics.availability import find_non_respondents
from meeting_scorer.analytics.trends import analyze_trends
from meeting_scorer.core.config import Settings, get_settings
from meeting_scorer.schemas.analysis import EventAnalysis
from meeting_scorer.schemas.participants import Participant
from meeting_scorer.schemas.slots import TimeSlotWithResponses

logger = logging.getLogger(__name__)


def analyze_event(
    participants: Sequence[Participant],
    slots: Sequence[TimeSlotWithResponses],
    dates: Optional[Sequence[str]] = None,
    *,
    target_duration_minutes: Optional[int] = None,
    limit: Optional[int] = None,
    settings: Optional[Settings] = None
) -> EventAnalysis:
    """
    Score, map and rank all candidate slots of one event.

    Args:
        participants: Event roster.
        slots: Candidate slots with their responses.
        dates: Dates the heat map should cover; defaults to the distinct
            slot dates in ascending order.
        target_duration_minutes: Desired meeting length (Settings default).
        limit: Number of optimal slots (Settings default).
        settings: Settings override, mainly for tests.

    Returns:
        EventAnalysis bundling every stage's output.
    """
    settings = settings or get_settings()

    if target_duration_minutes is None:
        target_duration_minutes = settings.DEFAULT_TARGET_DURATION_MINUTES
    if limit is None:
        limit = settings.OPTIMAL_SLOT_LIMIT

    scored = score_time_slots(slots, participants)

    horizon: List[str] = list(dates) if dates is not None else sorted({slot.date for slot in slots})
    heat_map = build_heat_map(scored, horizon)

    optimal = find_optimal_slots(
        scored,
        target_duration_minutes,
        limit,
        duration_tolerance_minutes=settings.DURATION_TOLERANCE_MINUTES,
        score_tolerance=settings.SCORE_TIE_TOLERANCE,
        attendance_tolerance=settings.ATTENDANCE_TIE_TOLERANCE
    )

    trends = analyze_trends(scored)

    all_responses = [response for slot in slots for response in slot.responses]
    non_respondents = find_non_respondents(participants, all_responses)

    best = optimal[0] if optimal else None
    logger.info(
        f"Analyzed {len(scored)} slots for {len(participants)} participants: "
        f"best={best.date + ' ' + best.time_key if best else 'none'} "
        f"avg_score={heat_map.statistics.average_score} "
        f"non_respondents={len(non_respondents)}"
    )

    return EventAnalysis(
        scored_slots=scored,
        heat_map=heat_map,
        optimal_slots=optimal,
        trends=trends,
        non_respondents=non_respondents
    )
