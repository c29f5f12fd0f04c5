import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so that "meeting_scorer" can be found
# without installing the package
current_dir = Path(__file__).parent.absolute()
root_dir = current_dir.parent.parent
sys.path.insert(0, str(root_dir))


# ==================== Shared Fixtures ====================

@pytest.fixture
def make_participant():
    """Build a Participant with sensible defaults."""
    from meeting_scorer.schemas import Participant

    def _make(pid, name=None, role="required", priority_weight=1.0):
        return Participant(id=pid, name=name or pid.title(), role=role, priority_weight=priority_weight)

    return _make


@pytest.fixture
def make_slot():
    """Build a TimeSlotWithResponses from (participant_id, status, preference) tuples."""
    from meeting_scorer.schemas import Response, TimeSlotWithResponses

    def _make(date="2024-01-15", start="14:00", end="15:00", responses=()):
        return TimeSlotWithResponses(
            date=date,
            start_time=start,
            end_time=end,
            responses=[
                Response(participant_id=pid, status=status, preference_score=pref)
                for pid, status, pref in responses
            ]
        )

    return _make


@pytest.fixture
def make_scored():
    """Build a ScoredTimeSlot directly, bypassing the scorer."""
    from meeting_scorer.schemas import ScoredTimeSlot

    def _make(date="2024-01-15", start="14:00", end="15:00", score=0.5,
              attendance_rate=0.5, conflict_level=0.0, available_count=1.0,
              total_participants=2):
        return ScoredTimeSlot(
            date=date,
            start_time=start,
            end_time=end,
            score=score,
            available_count=available_count,
            total_participants=total_participants,
            attendance_rate=attendance_rate,
            weighted_score=round(score * 100, 2),
            conflict_level=conflict_level,
            participants=[]
        )

    return _make


@pytest.fixture
def team(make_participant):
    """Organizer / required / optional roster from the reference scenario."""
    return [
        make_participant("org", "Olivia", role="organizer", priority_weight=1.5),
        make_participant("req", "Ravi", role="required", priority_weight=1.0),
        make_participant("opt", "Omar", role="optional", priority_weight=0.7),
    ]
