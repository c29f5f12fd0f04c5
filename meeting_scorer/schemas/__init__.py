"""
Pydantic Schemas Package

Typed models for the engine's inbound and outbound data contracts.

Schema Conventions:
- Models are frozen; stages build new values instead of editing inputs
- snake_case attributes, camelCase JSON via model_dump(by_alias=True)
- Loaders wrap pydantic errors in meeting_scorer.core.errors.ValidationError

Export Groups:
- Base: SchedulingModel, TimeSlot
- Inbound: Participant, Response, AvailabilityRecord, TimeSlotWithResponses
- Scored: ParticipantStatus, ScoredTimeSlot, SlotAttendanceSummary
- Heat map: HeatMapCell, HeatMapStats, HeatMapData
- Analysis: TrendAnalysis, EventAnalysis
- Loaders: load_participants, load_slots, load_availability
"""

# Base schemas
from meeting_scorer.schemas.base import (
    SchedulingModel,
    TimeSlot
)

# Inbound schemas
from meeting_scorer.schemas.participants import (
    Participant,
    Response,
    AvailabilityRecord
)

# Slot schemas
from meeting_scorer.schemas.slots import (
    TimeSlotWithResponses,
    ParticipantStatus,
    ScoredTimeSlot,
    SlotAttendanceSummary
)

# Heat map schemas
from meeting_scorer.schemas.heat_map import (
    HeatMapCell,
    HeatMapStats,
    HeatMapData
)

# Analysis schemas
from meeting_scorer.schemas.analysis import (
    TrendAnalysis,
    EventAnalysis
)

# Loaders
from meeting_scorer.schemas.loaders import (
    load_participants,
    load_slots,
    load_availability
)

__all__ = [
    # Base
    "SchedulingModel",
    "TimeSlot",
    # Inbound
    "Participant",
    "Response",
    "AvailabilityRecord",
    "TimeSlotWithResponses",
    # Scored
    "ParticipantStatus",
    "ScoredTimeSlot",
    "SlotAttendanceSummary",
    # Heat map
    "HeatMapCell",
    "HeatMapStats",
    "HeatMapData",
    # Analysis
    "TrendAnalysis",
    "EventAnalysis",
    # Loaders
    "load_participants",
    "load_slots",
    "load_availability"
]
