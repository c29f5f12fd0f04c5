"""
Algorithms Package

Deterministic scoring and ranking algorithms:
- slot_scoring: Per-slot weighted score, attendance rate and conflict level
- heat_map: Date x time-range grid with score histogram and top slots
- optimizer: Best slots for a target duration with a tie-break chain

All algorithms are pure functions (no randomness, no shared state).
"""

from meeting_scorer.algorithms.slot_scoring import score_time_slot, score_time_slots
from meeting_scorer.algorithms.heat_map import build_heat_map, build_date_range
from meeting_scorer.algorithms.optimizer import find_optimal_slots

__all__ = [
    "score_time_slot",
    "score_time_slots",
    "build_heat_map",
    "build_date_range",
    "find_optimal_slots"
]
