from __future__ import annotations

from src.attendance_portal.attendance_portal.participants.model import ParticipantKey, ParticipantRecord
from src.attendance_portal.attendance_portal.participants.store import AttendanceStore


def test_set_present_updates_matching_record(roster):
    store = AttendanceStore(roster)

    updated = store.set_present(ParticipantKey("Web Hackathon", "Sara Ahmed", "Byte Me"), True)

    assert updated == ParticipantRecord(competition="Web Hackathon", team="Byte Me", leader="Sara Ahmed", present=True)
    assert [r.present for r in store.list_all()] == [False, True, False]


def test_marking_twice_is_idempotent(roster):
    store = AttendanceStore(roster)
    key = ParticipantKey("Speed Programming", "Ali Khan", "Null Pointers")

    store.set_present(key, True)
    once = store.list_all()
    store.set_present(key, True)

    assert store.list_all() == once
    assert len(store) == len(roster)


def test_unknown_identity_is_a_no_op(roster):
    store = AttendanceStore(roster)

    result = store.set_present(ParticipantKey("Speed Programming", "Nobody", "Null Pointers"), True)

    assert result is None
    assert store.list_all() == roster


def test_duplicate_identities_change_together():
    record = ParticipantRecord(competition="Robotics", team="Gears", leader="Hina")
    store = AttendanceStore([record, record])

    store.set_present(record.key, True)

    assert [r.present for r in store.list_all()] == [True, True]


def test_list_all_returns_a_copy(roster):
    store = AttendanceStore(roster)

    store.list_all().clear()

    assert len(store.list_all()) == 3


def test_seed_defaults_unlogged_identities_to_absent(roster):
    store = AttendanceStore([roster[0], ParticipantRecord("Web Hackathon", "Byte Me", "Sara Ahmed", present=True)])

    present = store.seed({roster[0].key: True})

    assert present == 1
    assert [r.present for r in store.list_all()] == [True, False]


def test_missing_field_matches_empty_string_key():
    record = ParticipantRecord(competition="Robotics", team="Gears", leader=None)
    store = AttendanceStore([record])

    assert store.set_present(ParticipantKey("Robotics", "", "Gears"), True).present is True
    assert store.seed({ParticipantKey("Robotics", "", "Gears"): True}) == 1
