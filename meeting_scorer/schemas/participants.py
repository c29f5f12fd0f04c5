"""
Participant Schemas

Roster and response models for the inbound data contract.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from meeting_scorer.constants.constants import ResponseStatus
from meeting_scorer.constants.roles import DEFAULT_ROLE, ParticipantRole
from meeting_scorer.constants.thresholds import MAX_PREFERENCE_SCORE, MIN_PREFERENCE_SCORE
from meeting_scorer.schemas.base import SchedulingModel, TimeSlot


class Participant(SchedulingModel):
    """
    One roster entry.

    The roster is authoritative: the scorer reports every participant on it,
    whether or not they responded.
    """
    id: str = Field(..., description="Participant identifier")
    name: str = Field(..., description="Display name")
    role: ParticipantRole = Field(DEFAULT_ROLE, description="organizer, required or optional")
    priority_weight: float = Field(1.0, gt=0, description="Caller-assigned base importance")

    @field_validator("role", mode="before")
    @classmethod
    def _lower_role(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Response(SchedulingModel):
    """A participant's answer for one slot."""
    participant_id: str = Field(..., description="Participant who answered")
    status: ResponseStatus = Field(..., description="available, unavailable, preferred or maybe")
    preference_score: int = Field(
        MIN_PREFERENCE_SCORE,
        ge=MIN_PREFERENCE_SCORE,
        le=MAX_PREFERENCE_SCORE,
        description="Confidence 1-5, meaningful for maybe/preferred"
    )
    notes: Optional[str] = Field(None, description="Free-text note")


class AvailabilityRecord(TimeSlot):
    """
    A stored availability row: a Response plus the slot it belongs to.

    Matches the rows the persistence layer keeps per
    (participant, date, start_time, end_time).
    """
    participant_id: str = Field(..., description="Participant who answered")
    status: ResponseStatus = Field(..., description="available, unavailable, preferred or maybe")
    preference_score: int = Field(
        MIN_PREFERENCE_SCORE,
        ge=MIN_PREFERENCE_SCORE,
        le=MAX_PREFERENCE_SCORE
    )
    notes: Optional[str] = None

    def to_response(self) -> Response:
        return Response(
            participant_id=self.participant_id,
            status=self.status,
            preference_score=self.preference_score,
            notes=self.notes,
        )
