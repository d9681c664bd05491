from __future__ import annotations

from src.attendance_portal.attendance_portal.participants.model import ParticipantRecord
from src.attendance_portal.attendance_portal.participants.search import filter_participants


def test_blank_search_returns_roster_in_order(roster):
    assert filter_participants(roster, "") == roster
    assert filter_participants(roster, "   ") == roster
    assert filter_participants(roster, None) == roster


def test_search_matches_any_identity_field_case_insensitively(roster):
    assert [r.team for r in filter_participants(roster, "speed")] == ["Null Pointers", "Segfaults"]
    assert [r.team for r in filter_participants(roster, "SARA")] == ["Byte Me"]
    assert [r.team for r in filter_participants(roster, "fault")] == ["Segfaults"]


def test_search_without_match_is_empty(roster):
    assert filter_participants(roster, "chess") == []


def test_search_tolerates_missing_fields():
    records = [ParticipantRecord(competition="Robotics", team=None, leader=None)]

    assert filter_participants(records, "robo") == records
    assert filter_participants(records, "gears") == []
