"""
Slot Schemas

Slot inputs with their responses, and the scored outputs of the slot scorer.
"""

from typing import List, Optional

from pydantic import Field

from meeting_scorer.constants.constants import AttendanceStatus
from meeting_scorer.schemas.base import SchedulingModel, TimeSlot
from meeting_scorer.schemas.participants import Response


class TimeSlotWithResponses(TimeSlot):
    """
    A candidate slot and whatever responses exist for it.

    The response list may be missing participants; missing means unavailable.
    """
    id: Optional[str] = Field(None, description="Slot identifier, if the caller has one")
    responses: List[Response] = Field(default_factory=list, description="Responses for this slot")


class ParticipantStatus(SchedulingModel):
    """One participant's row in a scored slot's breakdown."""
    name: str
    status: AttendanceStatus
    preference_score: int = Field(..., description="Displayed preference (preferred gets +1, max 5)")
    weight: float = Field(..., description="Effective weight (priority_weight x role multiplier)")
    notes: Optional[str] = None


class ScoredTimeSlot(TimeSlot):
    """
    Output of the slot scorer.

    score is the weighted mean of participant scores after time-of-day and
    role weighting. It is not clamped: preferred responses in business hours
    reach 1.32, so weighted_score (score x 100) can exceed 100.
    """
    score: float = Field(..., description="Normalized weighted score (0 to ~1.32)")
    available_count: float = Field(..., description="Available participants, maybe counts 0.5")
    total_participants: int = Field(..., ge=0)
    attendance_rate: float = Field(..., ge=0, le=1, description="available_count / total_participants")
    weighted_score: float = Field(..., description="score x 100")
    conflict_level: float = Field(..., description="Priority weight of unavailable/non-responding participants")
    participants: List[ParticipantStatus] = Field(default_factory=list)


class SlotAttendanceSummary(TimeSlot):
    """
    Rollup stored on a proposed slot after each response change.

    Uses raw priority weights only: no role or time-of-day multipliers.
    """
    total_participants: int = Field(..., ge=0)
    available_participants: int = Field(..., ge=0, description="available_count rounded to a headcount")
    attendance_score: float = Field(..., description="Weighted availability percentage")
