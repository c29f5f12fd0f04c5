"""
Slot Scoring Algorithm

Deterministic algorithm that turns one candidate slot's responses into a
single comparable score, an attendance rate, a percentage score and a
conflict measure.

No randomness and no hidden state - the same roster and responses always
produce the same ScoredTimeSlot.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from meeting_scorer.constants.constants import AttendanceStatus, ResponseStatus
from meeting_scorer.constants.roles import role_multiplier
from meeting_scorer.constants.thresholds import (
    AVAILABLE_COUNT_FULL,
    AVAILABLE_COUNT_MAYBE,
    AVAILABLE_SCORE,
    MAX_PREFERENCE_SCORE,
    MAYBE_SCALE,
    MIN_PREFERENCE_SCORE,
    PREFERRED_SCORE,
    UNAVAILABLE_SCORE,
    time_of_day_multiplier,
)
from meeting_scorer.schemas.participants import Participant, Response
from meeting_scorer.schemas.slots import (
    ParticipantStatus,
    ScoredTimeSlot,
    TimeSlotWithResponses,
)
from meeting_scorer.tools.rounding import round_half_up

logger = logging.getLogger(__name__)


# ============================================================================
# Scoring Functions
# ============================================================================


def score_time_slot(
    slot: TimeSlotWithResponses,
    participants: Sequence[Participant]
) -> ScoredTimeSlot:
    """
    Score one candidate slot against the full roster.

    Every roster participant appears exactly once in the breakdown, in roster
    order. Responses from participants not on the roster are ignored; if a
    participant has several responses the first one counts.

    Args:
        slot: Slot definition and its (possibly incomplete) responses.
        participants: Authoritative roster.

    Returns:
        ScoredTimeSlot with score, attendance and conflict figures.
    """
    responses = _index_responses(slot.responses)
    multiplier = time_of_day_multiplier(slot.start_minutes, slot.end_minutes)

    total_score = 0.0
    total_weight = 0.0
    available_count = 0.0
    conflict_level = 0.0
    statuses: List[ParticipantStatus] = []

    for participant in participants:
        response = responses.get(participant.id)
        score, status, preference, counted = _score_response(response)

        if status == AttendanceStatus.UNAVAILABLE:
            conflict_level += participant.priority_weight

        score *= multiplier
        effective_weight = participant.priority_weight * role_multiplier(participant.role)

        total_score += score * effective_weight
        total_weight += effective_weight
        available_count += counted

        statuses.append(ParticipantStatus(
            name=participant.name,
            status=status,
            preference_score=preference,
            weight=effective_weight,
            notes=response.notes if response else None
        ))

    normalized_score = total_score / total_weight if total_weight > 0 else 0.0
    attendance_rate = available_count / len(participants) if participants else 0.0
    weighted_score = normalized_score * 100

    logger.debug(
        f"Scored {slot.date} {slot.time_key}: score={normalized_score:.3f} "
        f"available={available_count}/{len(participants)} conflict={conflict_level:.2f}"
    )

    return ScoredTimeSlot(
        date=slot.date,
        start_time=slot.start_time,
        end_time=slot.end_time,
        score=round_half_up(normalized_score),
        available_count=round_half_up(available_count),
        total_participants=len(participants),
        attendance_rate=round_half_up(attendance_rate),
        weighted_score=round_half_up(weighted_score),
        conflict_level=round_half_up(conflict_level),
        participants=statuses
    )


def score_time_slots(
    slots: Sequence[TimeSlotWithResponses],
    participants: Sequence[Participant]
) -> List[ScoredTimeSlot]:
    """Score every slot against the same roster, keeping input order."""
    return [score_time_slot(slot, participants) for slot in slots]


def _index_responses(responses: Sequence[Response]) -> Dict[str, Response]:
    """First response per participant wins."""
    indexed: Dict[str, Response] = {}
    for response in responses:
        indexed.setdefault(response.participant_id, response)
    return indexed


def _score_response(
    response: Optional[Response]
) -> Tuple[float, AttendanceStatus, int, float]:
    """
    Map a response to its base score before any multipliers.

    Returns: (score, status bucket, displayed preference, available_count share)
    """
    if response is None:
        return UNAVAILABLE_SCORE, AttendanceStatus.UNAVAILABLE, MIN_PREFERENCE_SCORE, 0.0

    if response.status == ResponseStatus.AVAILABLE:
        return (
            AVAILABLE_SCORE,
            AttendanceStatus.AVAILABLE,
            response.preference_score,
            AVAILABLE_COUNT_FULL
        )

    if response.status == ResponseStatus.PREFERRED:
        return (
            PREFERRED_SCORE,
            AttendanceStatus.AVAILABLE,
            min(response.preference_score + 1, MAX_PREFERENCE_SCORE),
            AVAILABLE_COUNT_FULL
        )

    if response.status == ResponseStatus.MAYBE:
        return (
            response.preference_score / MAYBE_SCALE,
            AttendanceStatus.MAYBE,
            response.preference_score,
            AVAILABLE_COUNT_MAYBE
        )

    return UNAVAILABLE_SCORE, AttendanceStatus.UNAVAILABLE, MIN_PREFERENCE_SCORE, 0.0
