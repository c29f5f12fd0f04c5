"""
Analysis Schemas

Trend analysis output and the combined result of the event pipeline.
"""

from typing import Dict, List

from pydantic import Field

from meeting_scorer.constants.constants import DayOfWeek
from meeting_scorer.schemas.base import SchedulingModel
from meeting_scorer.schemas.heat_map import HeatMapData
from meeting_scorer.schemas.participants import Participant
from meeting_scorer.schemas.slots import ScoredTimeSlot


class TrendAnalysis(SchedulingModel):
    best_day_of_week: DayOfWeek = Field(..., description="Weekday with the highest mean score")
    best_time_of_day: str = Field(..., description='Start hour with the highest mean score ("HH:00")')
    worst_conflicts: List[str] = Field(default_factory=list, description="Low participation slots")
    participation_trends: Dict[str, float] = Field(
        default_factory=dict,
        description="Cumulative attendance rate per time range across all dates"
    )


class EventAnalysis(SchedulingModel):
    """Everything the engine derives for one event in a single pass."""
    scored_slots: List[ScoredTimeSlot] = Field(default_factory=list)
    heat_map: HeatMapData
    optimal_slots: List[ScoredTimeSlot] = Field(default_factory=list)
    trends: TrendAnalysis
    non_respondents: List[Participant] = Field(
        default_factory=list,
        description="Roster participants with no response to any slot"
    )
