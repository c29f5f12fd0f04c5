"""
Base Schemas

Shared pydantic base model and the TimeSlot model every slot-shaped
schema builds on.

Conventions:
- Models are frozen: every stage returns new values and never edits its input.
- Fields are snake_case in Python and camelCase on the wire;
  model_dump(by_alias=True) produces the JSON shape the UI consumes, and
  both spellings are accepted on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from meeting_scorer.tools.time_tool import parse_clock_time, parse_iso_date, time_to_minutes


class SchedulingModel(BaseModel):
    """Base for all engine models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TimeSlot(SchedulingModel):
    """
    A candidate meeting window.

    Clock times are stored as "HH:MM", so "14:00:00" and "14:00" describe
    the same slot everywhere. start_minutes / end_minutes are derived from
    them and are included when the slot is serialised.
    """
    date: str = Field(..., description="Slot date (YYYY-MM-DD)")
    start_time: str = Field(..., description="Start time (HH:MM, 24-hour)")
    end_time: str = Field(..., description="End time (HH:MM, 24-hour)")

    @field_validator("date", mode="before")
    @classmethod
    def _check_date(cls, value: Any) -> str:
        parsed = parse_iso_date(value)
        if parsed is None:
            raise ValueError("date must follow YYYY-MM-DD format")
        return parsed.isoformat()

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        hour, minute = parse_clock_time(value)
        return f"{hour:02d}:{minute:02d}"

    @computed_field(alias="startMinutes")
    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @computed_field(alias="endMinutes")
    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def time_key(self) -> str:
        """Heat map column key, e.g. "14:00-15:00"."""
        return f"{self.start_time}-{self.end_time}"
