from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pandas as pd
import pytest

from src.attendance_portal.attendance_portal.participants.model import ParticipantRecord

from tests.fakes import InMemoryLogSheet


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 2, 1, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def log_sheet() -> InMemoryLogSheet:
    return InMemoryLogSheet()


@pytest.fixture
def roster() -> list[ParticipantRecord]:
    return [
        ParticipantRecord(competition="Speed Programming", team="Null Pointers", leader="Ali Khan"),
        ParticipantRecord(competition="Web Hackathon", team="Byte Me", leader="Sara Ahmed"),
        ParticipantRecord(competition="Speed Programming", team="Segfaults", leader="Usman Tariq"),
    ]


@pytest.fixture
def write_workbook(tmp_path: Path):
    """Write {sheet name: [row dict, ...]} to an .xlsx and return its path."""

    def _write(sheets: dict, name: str = "registrations.xlsx") -> Path:
        path = tmp_path / name
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            for sheet_name, rows in sheets.items():
                pd.DataFrame(rows).to_excel(writer, sheet_name=sheet_name, index=False)
        return path

    return _write
