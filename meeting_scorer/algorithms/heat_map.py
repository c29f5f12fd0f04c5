"""
Heat Map Builder

Buckets already-scored slots into a date x time-range grid and derives
the score histogram, best/average score and the top slot list.

Pure reduction pass: no weighting happens here, it all lives in the
ScoredTimeSlot inputs.
"""

import logging
from typing import Dict, List, Sequence

from meeting_scorer.constants.thresholds import TOP_SLOTS_LIMIT, slot_band
from meeting_scorer.schemas.heat_map import HeatMapCell, HeatMapData, HeatMapStats
from meeting_scorer.schemas.slots import ScoredTimeSlot
from meeting_scorer.tools.rounding import round_half_up
from meeting_scorer.tools.time_tool import date_range

logger = logging.getLogger(__name__)


def build_heat_map(
    scored_slots: Sequence[ScoredTimeSlot],
    dates: Sequence[str]
) -> HeatMapData:
    """
    Build the heat map for a scheduling horizon.

    Args:
        scored_slots: Scored slots, assumed ordered by date/time.
        dates: Every date the grid should show, including dates with no slots.

    Returns:
        HeatMapData with the grid, top 10 slots and statistics.
    """
    heat_map: Dict[str, Dict[str, HeatMapCell]] = {day: {} for day in dates}
    bands = {"perfect": 0, "good": 0, "okay": 0, "conflict": 0}
    best_score = 0.0
    total_score = 0.0

    for slot in scored_slots:
        heat_map.setdefault(slot.date, {})[slot.time_key] = HeatMapCell(
            intensity=slot.score,
            score=slot.weighted_score,
            available_count=slot.available_count,
            total_participants=slot.total_participants,
            conflict_level=slot.conflict_level,
            participants=slot.participants
        )

        total_score += slot.score
        best_score = max(best_score, slot.score)
        bands[slot_band(slot.score)] += 1

    total_slots = len(scored_slots)

    # sorted() is stable, so equal scores keep their date/time order
    top_slots: List[ScoredTimeSlot] = sorted(
        scored_slots, key=lambda s: s.score, reverse=True
    )[:TOP_SLOTS_LIMIT]

    statistics = HeatMapStats(
        total_slots=total_slots,
        perfect_slots=bands["perfect"],
        good_slots=bands["good"],
        okay_slots=bands["okay"],
        conflict_slots=bands["conflict"],
        best_score=round_half_up(best_score),
        average_score=round_half_up(total_score / total_slots) if total_slots > 0 else 0.0
    )

    logger.debug(
        f"Heat map: {len(heat_map)} dates, {total_slots} slots, "
        f"best={statistics.best_score} avg={statistics.average_score}"
    )

    return HeatMapData(heat_map=heat_map, top_slots=top_slots, statistics=statistics)


def build_date_range(start_date: str, end_date: str) -> List[str]:
    """
    Inclusive list of ISO dates for an event's scheduling horizon.

    Example:
        >>> build_date_range("2024-03-01", "2024-03-03")
        ['2024-03-01', '2024-03-02', '2024-03-03']
    """
    return date_range(start_date, end_date)
