"""
Heat Map Schemas

Date x time-range grid of scored slots, with summary statistics.
"""

from typing import Dict, List

from pydantic import Field

from meeting_scorer.schemas.base import SchedulingModel
from meeting_scorer.schemas.slots import ParticipantStatus, ScoredTimeSlot


class HeatMapCell(SchedulingModel):
    intensity: float = Field(..., description="Slot score")
    score: float = Field(..., description="Slot weighted_score (percentage)")
    available_count: float
    total_participants: int
    conflict_level: float
    participants: List[ParticipantStatus] = Field(default_factory=list)


class HeatMapStats(SchedulingModel):
    """
    Score histogram and summary.

    The four buckets are exclusive and always sum to total_slots.
    """
    total_slots: int = 0
    perfect_slots: int = 0
    good_slots: int = 0
    okay_slots: int = 0
    conflict_slots: int = 0
    best_score: float = 0.0
    average_score: float = 0.0


class HeatMapData(SchedulingModel):
    heat_map: Dict[str, Dict[str, HeatMapCell]] = Field(
        default_factory=dict,
        description='heat_map[date]["HH:MM-HH:MM"] -> cell'
    )
    top_slots: List[ScoredTimeSlot] = Field(default_factory=list, description="Highest scoring slots")
    statistics: HeatMapStats = Field(default_factory=HeatMapStats)
