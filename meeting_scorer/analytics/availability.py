"""
Availability Rollups

Helpers used at the edge between stored availability rows and the scorer:
- group_availability: attach stored rows to the proposed slots they belong to
- find_non_respondents: roster participants who never answered
- summarize_attendance: the headline figures stored on each proposed slot

None of these touch storage; callers fetch rows and persist results.
"""

import logging
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from meeting_scorer.constants.constants import ResponseStatus
from meeting_scorer.constants.thresholds import (
    AVAILABLE_COUNT_FULL,
    AVAILABLE_COUNT_MAYBE,
    AVAILABLE_SCORE,
    MAYBE_SCALE,
    PREFERRED_SCORE,
    UNAVAILABLE_SCORE,
)
from meeting_scorer.schemas.base import TimeSlot
from meeting_scorer.schemas.participants import AvailabilityRecord, Participant, Response
from meeting_scorer.schemas.slots import SlotAttendanceSummary, TimeSlotWithResponses
from meeting_scorer.tools.rounding import round_half_up

logger = logging.getLogger(__name__)

SlotKey = Tuple[str, int, int]


def _slot_key(slot: TimeSlot) -> SlotKey:
    return slot.date, slot.start_minutes, slot.end_minutes


def group_availability(
    records: Iterable[AvailabilityRecord],
    slots: Sequence[TimeSlot]
) -> List[TimeSlotWithResponses]:
    """
    Attach stored availability rows to proposed slots.

    A later row for the same participant and slot replaces an earlier one.
    Rows that match no proposed slot are dropped.

    Args:
        records: Availability rows for one event.
        slots: Proposed slots, in the order the result should follow.

    Returns:
        One TimeSlotWithResponses per proposed slot.
    """
    by_slot: Dict[SlotKey, Dict[str, Response]] = {_slot_key(slot): {} for slot in slots}
    dropped = 0

    for record in records:
        bucket = by_slot.get(_slot_key(record))
        if bucket is None:
            dropped += 1
            continue
        bucket[record.participant_id] = record.to_response()

    if dropped:
        logger.debug(f"Ignored {dropped} availability record(s) outside the proposed slots")

    return [
        TimeSlotWithResponses(
            id=getattr(slot, "id", None),
            date=slot.date,
            start_time=slot.start_time,
            end_time=slot.end_time,
            responses=list(by_slot[_slot_key(slot)].values())
        )
        for slot in slots
    ]


def find_non_respondents(
    participants: Sequence[Participant],
    responses: Iterable[Union[Response, AvailabilityRecord]]
) -> List[Participant]:
    """Roster participants with no response at all, in roster order."""
    responded = {response.participant_id for response in responses}
    return [participant for participant in participants if participant.id not in responded]


def summarize_attendance(
    slot: TimeSlotWithResponses,
    participants: Sequence[Participant]
) -> SlotAttendanceSummary:
    """
    Headline attendance figures stored on a proposed slot.

    Unlike the slot scorer this uses the raw priority_weight with no role or
    time-of-day multipliers, and reports a whole headcount.

    Returns:
        SlotAttendanceSummary with total/available participants and a
        weighted availability percentage (up to 120 with preferred answers).
    """
    responses: Dict[str, Response] = {}
    for response in slot.responses:
        responses.setdefault(response.participant_id, response)

    available_count = 0.0
    weighted = 0.0
    total_weight = 0.0

    for participant in participants:
        weight = participant.priority_weight
        total_weight += weight

        response = responses.get(participant.id)
        if response is None:
            continue

        if response.status == ResponseStatus.AVAILABLE:
            score = AVAILABLE_SCORE
            available_count += AVAILABLE_COUNT_FULL
        elif response.status == ResponseStatus.PREFERRED:
            score = PREFERRED_SCORE
            available_count += AVAILABLE_COUNT_FULL
        elif response.status == ResponseStatus.MAYBE:
            score = response.preference_score / MAYBE_SCALE
            available_count += AVAILABLE_COUNT_MAYBE
        else:
            score = UNAVAILABLE_SCORE

        weighted += score * weight

    attendance_score = (weighted / total_weight) * 100 if total_weight > 0 else 0.0

    return SlotAttendanceSummary(
        date=slot.date,
        start_time=slot.start_time,
        end_time=slot.end_time,
        total_participants=len(participants),
        available_participants=int(round_half_up(available_count, 0)),
        attendance_score=round_half_up(attendance_score)
    )
