from __future__ import annotations

import pandas as pd

from src.attendance_portal.attendance_portal.participants.exporter import write_roster_workbook
from src.attendance_portal.attendance_portal.participants.model import ParticipantRecord


def test_export_has_one_row_per_record(roster):
    roster = roster[:2] + [ParticipantRecord("Speed Programming", "Segfaults", "Usman Tariq", present=True)]

    df = pd.read_excel(write_roster_workbook(roster), sheet_name="Attendance")

    assert list(df.columns) == ["competition", "team", "leader", "present"]
    assert df.to_dict(orient="records") == [r.to_dict() for r in roster]


def test_export_of_empty_roster_keeps_header():
    df = pd.read_excel(write_roster_workbook([]), sheet_name="Attendance")

    assert list(df.columns) == ["competition", "team", "leader", "present"]
    assert df.empty
