"""
Algorithm Tests

Tests for the deterministic scoring stages:
- slot_scoring.score_time_slot()
- heat_map.build_heat_map()
- optimizer.find_optimal_slots()

Run: pytest meeting_scorer/tests/test_algorithms.py -v
"""

import pytest


# ==================== Slot Scoring Tests ====================

def test_reference_scenario(team, make_slot):
    """Organizer preferred, required available, optional unavailable at 14:00-15:00."""
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    slot = make_slot(responses=[
        ("org", "preferred", 4),
        ("req", "available", 3),
        ("opt", "unavailable", 1),
    ])

    result = score_time_slot(slot, team)

    assert result.available_count == 2.0
    assert result.total_participants == 3
    assert result.attendance_rate == 0.67
    assert result.conflict_level == 0.7
    # (1.32 * 2.25 + 1.1 * 1.0 + 0 * 0.49) / 3.74
    assert result.score == 1.09
    assert result.weighted_score == 108.82
    assert 1.0 <= result.score <= 1.2


def test_reference_scenario_breakdown(team, make_slot):
    """Breakdown follows roster order with effective weights."""
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    slot = make_slot(responses=[
        ("opt", "unavailable", 1),
        ("req", "available", 3),
        ("org", "preferred", 4),
    ])

    result = score_time_slot(slot, team)

    names = [p.name for p in result.participants]
    assert names == ["Olivia", "Ravi", "Omar"]

    organizer, required, optional = result.participants
    assert organizer.status == "available"
    assert organizer.preference_score == 5  # preferred gets +1
    assert organizer.weight == pytest.approx(2.25)
    assert required.status == "available"
    assert required.preference_score == 3
    assert required.weight == pytest.approx(1.0)
    assert optional.status == "unavailable"
    assert optional.preference_score == 1
    assert optional.weight == pytest.approx(0.49)


def test_all_available_business_hours(make_participant, make_slot):
    """Everyone available 10:00-11:00 with equal weights scores exactly 1.1."""
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [make_participant(pid) for pid in ("a", "b", "c", "d")]
    slot = make_slot(start="10:00", end="11:00",
                     responses=[(pid, "available", 1) for pid in ("a", "b", "c", "d")])

    result = score_time_slot(slot, roster)

    assert result.score == 1.1
    assert result.weighted_score == 110.0
    assert result.attendance_rate == 1.0
    assert result.conflict_level == 0.0


def test_all_available_with_mixed_roles(make_participant, make_slot):
    """Role multipliers do not move the score when everyone agrees."""
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [
        make_participant("a", role="organizer"),
        make_participant("b", role="required"),
        make_participant("c", role="optional"),
    ]
    slot = make_slot(responses=[(pid, "available", 1) for pid in ("a", "b", "c")])

    assert score_time_slot(slot, roster).score == 1.1


def test_no_responses_five_participants(make_participant, make_slot):
    """Empty response set: zero score, every weight counted as conflict."""
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    weights = [1.0, 1.5, 0.7, 1.2, 1.0]
    roster = [make_participant(f"p{i}", priority_weight=w) for i, w in enumerate(weights)]

    result = score_time_slot(make_slot(), roster)

    assert result.score == 0
    assert result.attendance_rate == 0
    assert result.available_count == 0
    assert result.conflict_level == 5.4
    assert len(result.participants) == 5
    assert all(p.status == "unavailable" for p in result.participants)


def test_all_unavailable(team, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    slot = make_slot(responses=[(pid, "unavailable", 1) for pid in ("org", "req", "opt")])
    result = score_time_slot(slot, team)

    assert result.score == 0
    assert result.conflict_level == 3.2


def test_zero_participants(make_slot):
    """Empty roster degrades to zeros, no division by zero."""
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    result = score_time_slot(make_slot(responses=[("ghost", "available", 1)]), [])

    assert result.score == 0
    assert result.attendance_rate == 0
    assert result.total_participants == 0
    assert result.participants == []


def test_maybe_at_full_confidence_matches_availability(make_participant, make_slot):
    """maybe/5 scores like plain availability but only counts half a person."""
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [make_participant("a"), make_participant("b")]
    slot = make_slot(responses=[("a", "maybe", 5), ("b", "maybe", 5)])

    result = score_time_slot(slot, roster)

    assert result.score == 1.1
    assert result.available_count == 1.0
    assert result.attendance_rate == 0.5
    assert all(p.status == "maybe" for p in result.participants)


def test_maybe_scales_preference(make_participant, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [make_participant("a")]
    # 16:00-18:00 is neither business hours nor evening: multiplier 1.0
    slot = make_slot(start="16:00", end="18:00", responses=[("a", "maybe", 3)])

    result = score_time_slot(slot, roster)

    assert result.score == 0.6
    assert result.participants[0].preference_score == 3


def test_preferred_preference_is_capped(make_participant, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [make_participant("a")]
    result = score_time_slot(make_slot(responses=[("a", "preferred", 5)]), roster)

    assert result.participants[0].preference_score == 5
    assert result.score == 1.32


def test_off_hours_penalty(make_participant, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [make_participant("a")]
    evening = score_time_slot(make_slot(start="18:00", end="19:00", responses=[("a", "available", 1)]), roster)
    late = score_time_slot(make_slot(start="21:00", end="22:00", responses=[("a", "available", 1)]), roster)

    assert evening.score == 0.9
    assert late.score == 0.7


def test_unknown_participant_response_ignored(make_participant, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [make_participant("a")]
    slot = make_slot(responses=[("stranger", "available", 1), ("a", "unavailable", 1)])

    result = score_time_slot(slot, roster)

    assert result.score == 0
    assert result.available_count == 0
    assert len(result.participants) == 1


def test_duplicate_response_first_wins(make_participant, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    roster = [make_participant("a")]
    slot = make_slot(responses=[("a", "available", 1), ("a", "unavailable", 1)])

    result = score_time_slot(slot, roster)

    assert result.available_count == 1.0
    assert len(result.participants) == 1


def test_notes_carried_into_breakdown(make_participant):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot
    from meeting_scorer.schemas import Response, TimeSlotWithResponses

    slot = TimeSlotWithResponses(
        date="2024-01-15", start_time="14:00", end_time="15:00",
        responses=[Response(participant_id="a", status="maybe", preference_score=2, notes="Might run late")]
    )

    result = score_time_slot(slot, [make_participant("a")])

    assert result.participants[0].notes == "Might run late"


def test_scoring_is_idempotent(team, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slot

    slot = make_slot(responses=[("org", "maybe", 2), ("req", "preferred", 3)])

    first = score_time_slot(slot, team)
    second = score_time_slot(slot, team)

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_attendance_bounds(team, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slots

    slots = [
        make_slot(responses=[("org", "preferred", 5), ("req", "preferred", 5), ("opt", "preferred", 5)]),
        make_slot(responses=[("org", "maybe", 1)]),
        make_slot(),
    ]

    for result in score_time_slots(slots, team):
        assert 0 <= result.attendance_rate <= 1
        assert result.available_count <= result.total_participants


def test_score_time_slots_keeps_order(team, make_slot):
    from meeting_scorer.algorithms.slot_scoring import score_time_slots

    slots = [make_slot(start="09:00", end="10:00"), make_slot(start="11:00", end="12:00")]
    results = score_time_slots(slots, team)

    assert [r.start_time for r in results] == ["09:00", "11:00"]


# ==================== Time-of-Day Multiplier Tests ====================

@pytest.mark.parametrize("start,end,expected", [
    ("09:00", "17:00", 1.1),
    ("14:00", "15:00", 1.1),
    ("07:00", "08:00", 0.9),
    ("08:30", "09:30", 0.9),
    ("17:00", "18:00", 0.9),
    ("05:00", "06:00", 0.7),
    ("19:00", "21:00", 0.7),
    ("16:00", "18:00", 1.0),
])
def test_time_of_day_multiplier(start, end, expected):
    from meeting_scorer.constants.thresholds import time_of_day_multiplier
    from meeting_scorer.tools.time_tool import time_to_minutes

    assert time_of_day_multiplier(time_to_minutes(start), time_to_minutes(end)) == expected


def test_role_multiplier():
    from meeting_scorer.constants.roles import role_multiplier

    assert role_multiplier("organizer") == 1.5
    assert role_multiplier("required") == 1.0
    assert role_multiplier("optional") == 0.7
    assert role_multiplier("observer") == 1.0


# ==================== Heat Map Tests ====================

def test_heat_map_statistics(make_scored):
    from meeting_scorer.algorithms.heat_map import build_heat_map

    slots = [
        make_scored(start="09:00", end="10:00", score=0.95),
        make_scored(start="10:00", end="11:00", score=0.75),
        make_scored(start="11:00", end="12:00", score=0.55),
        make_scored(start="12:00", end="13:00", score=0.2),
        make_scored(start="13:00", end="14:00", score=0.9),
    ]

    stats = build_heat_map(slots, ["2024-01-15"]).statistics

    assert stats.total_slots == 5
    assert stats.perfect_slots == 2
    assert stats.good_slots == 1
    assert stats.okay_slots == 1
    assert stats.conflict_slots == 1
    assert stats.perfect_slots + stats.good_slots + stats.okay_slots + stats.conflict_slots == stats.total_slots
    assert stats.best_score == 0.95
    assert stats.average_score == 0.67


def test_heat_map_includes_empty_dates(make_scored):
    from meeting_scorer.algorithms.heat_map import build_heat_map

    dates = ["2024-01-15", "2024-01-16", "2024-01-17"]
    result = build_heat_map([make_scored(date="2024-01-16")], dates)

    assert list(result.heat_map.keys()) == dates
    assert result.heat_map["2024-01-15"] == {}
    assert result.heat_map["2024-01-17"] == {}
    assert list(result.heat_map["2024-01-16"].keys()) == ["14:00-15:00"]


def test_heat_map_columns_ignore_seconds(make_scored):
    from meeting_scorer.algorithms.heat_map import build_heat_map

    slots = [
        make_scored(date="2024-01-15", start="14:00", end="15:00"),
        make_scored(date="2024-01-16", start="14:00:00", end="15:00:00"),
    ]

    result = build_heat_map(slots, ["2024-01-15", "2024-01-16"])

    assert list(result.heat_map["2024-01-15"]) == ["14:00-15:00"]
    assert list(result.heat_map["2024-01-16"]) == ["14:00-15:00"]


def test_heat_map_cell_contents(make_scored):
    from meeting_scorer.algorithms.heat_map import build_heat_map

    slot = make_scored(score=0.82, conflict_level=0.7, available_count=2.0, total_participants=3)
    cell = build_heat_map([slot], ["2024-01-15"]).heat_map["2024-01-15"]["14:00-15:00"]

    assert cell.intensity == 0.82
    assert cell.score == 82.0
    assert cell.available_count == 2.0
    assert cell.total_participants == 3
    assert cell.conflict_level == 0.7


def test_heat_map_slot_outside_range(make_scored):
    from meeting_scorer.algorithms.heat_map import build_heat_map

    result = build_heat_map([make_scored(date="2024-02-01")], ["2024-01-15"])

    assert "2024-02-01" in result.heat_map
    assert result.statistics.total_slots == 1


def test_heat_map_top_slots(make_scored):
    from meeting_scorer.algorithms.heat_map import build_heat_map

    slots = [make_scored(start=f"{8 + i:02d}:00", end=f"{9 + i:02d}:00", score=0.5) for i in range(12)]
    slots[5] = make_scored(start="13:00", end="14:00", score=0.9)

    top = build_heat_map(slots, ["2024-01-15"]).top_slots

    assert len(top) == 10
    assert top[0].start_time == "13:00"
    # Ties keep input order
    assert [s.start_time for s in top[1:4]] == ["08:00", "09:00", "10:00"]


def test_heat_map_empty():
    from meeting_scorer.algorithms.heat_map import build_heat_map

    result = build_heat_map([], [])

    assert result.heat_map == {}
    assert result.top_slots == []
    assert result.statistics.total_slots == 0
    assert result.statistics.average_score == 0
    assert result.statistics.best_score == 0


def test_build_date_range():
    from meeting_scorer.algorithms.heat_map import build_date_range

    assert build_date_range("2024-02-28", "2024-03-01") == ["2024-02-28", "2024-02-29", "2024-03-01"]
    assert build_date_range("2024-03-01", "2024-02-28") == []


# ==================== Optimizer Tests ====================

def test_optimizer_duration_filter(make_scored):
    from meeting_scorer.algorithms.optimizer import find_optimal_slots

    slots = [
        make_scored(start="09:00", end="10:00"),   # 60
        make_scored(start="10:00", end="11:30"),   # 90
        make_scored(start="12:00", end="12:30"),   # 30
        make_scored(start="13:00", end="15:00"),   # 120
        make_scored(start="15:00", end="16:35"),   # 95
    ]

    result = find_optimal_slots(slots, target_duration_minutes=60, limit=10)

    assert {s.start_time for s in result} == {"09:00", "10:00", "12:00"}
    for slot in result:
        assert abs((slot.end_minutes - slot.start_minutes) - 60) <= 30


def test_optimizer_prefers_higher_score(make_scored):
    from meeting_scorer.algorithms.optimizer import find_optimal_slots

    low = make_scored(start="09:00", end="10:00", score=0.5, attendance_rate=1.0)
    high = make_scored(start="10:00", end="11:00", score=0.9, attendance_rate=0.3)

    result = find_optimal_slots([low, high])

    assert [s.start_time for s in result] == ["10:00", "09:00"]


def test_optimizer_close_scores_fall_back_to_attendance(make_scored):
    from meeting_scorer.algorithms.optimizer import find_optimal_slots

    a = make_scored(start="09:00", end="10:00", score=0.85, attendance_rate=0.5)
    b = make_scored(start="10:00", end="11:00", score=0.8, attendance_rate=0.9)

    result = find_optimal_slots([a, b])

    assert result[0].start_time == "10:00"


def test_optimizer_falls_back_to_conflict_level(make_scored):
    from meeting_scorer.algorithms.optimizer import find_optimal_slots

    a = make_scored(start="09:00", end="10:00", score=0.85, attendance_rate=0.8, conflict_level=1.5)
    b = make_scored(start="10:00", end="11:00", score=0.8, attendance_rate=0.75, conflict_level=0.7)

    result = find_optimal_slots([a, b])

    assert result[0].start_time == "10:00"


def test_optimizer_tolerance_override(make_scored):
    from meeting_scorer.algorithms.optimizer import find_optimal_slots

    a = make_scored(start="09:00", end="10:00", score=0.85, attendance_rate=0.5)
    b = make_scored(start="10:00", end="11:00", score=0.8, attendance_rate=0.9)

    result = find_optimal_slots([a, b], score_tolerance=0.0)

    assert result[0].start_time == "09:00"


def test_optimizer_limit(make_scored):
    from meeting_scorer.algorithms.optimizer import find_optimal_slots

    slots = [make_scored(start=f"{8 + i:02d}:00", end=f"{9 + i:02d}:00") for i in range(8)]

    assert len(find_optimal_slots(slots)) == 5
    assert len(find_optimal_slots(slots, limit=2)) == 2
    assert find_optimal_slots([]) == []
