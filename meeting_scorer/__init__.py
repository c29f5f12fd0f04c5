"""
Meeting slot scoring engine.

Turns a roster and per-slot availability responses into slot scores,
a date x time heat map, recommended slots and trends.

Usage:
    from meeting_scorer import analyze_event, load_participants, load_slots

    analysis = analyze_event(load_participants(roster), load_slots(slots))
    payload = analysis.model_dump(by_alias=True, mode="json")
"""

from meeting_scorer.algorithms import (
    score_time_slot,
    score_time_slots,
    build_heat_map,
    build_date_range,
    find_optimal_slots
)
from meeting_scorer.analytics import (
    analyze_trends,
    group_availability,
    find_non_respondents,
    summarize_attendance,
    analyze_event
)
from meeting_scorer.schemas import (
    load_participants,
    load_slots,
    load_availability
)

__version__ = "1.0.0"

__all__ = [
    "score_time_slot",
    "score_time_slots",
    "build_heat_map",
    "build_date_range",
    "find_optimal_slots",
    "analyze_trends",
    "group_availability",
    "find_non_respondents",
    "summarize_attendance",
    "analyze_event",
    "load_participants",
    "load_slots",
    "load_availability"
]
