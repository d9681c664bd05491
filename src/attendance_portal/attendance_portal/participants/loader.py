from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Mapping, Optional

import pandas as pd

from ..core.constants import (
    APPROVAL_COLUMN,
    APPROVED_TOKEN,
    COMPETITION_COLUMN,
    LEADER_COLUMN,
    TEAM_COLUMN,
)
from ..core.exceptions import RosterLoadError
from .model import ParticipantRecord

log = logging.getLogger(__name__)


def _cell(row: Mapping[str, Any], column: str) -> Optional[str]:
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    return value if isinstance(value, str) else str(value)


def load_roster(path: str | Path) -> list[ParticipantRecord]:
    """Read every sheet of the registrations workbook and keep approved rows.

    Sheets are read in workbook order and rows in sheet order. Missing columns are
    carried through as None rather than rejected.
    """

    try:
        sheets = pd.read_excel(path, sheet_name=None, dtype=object)
    except Exception as exc:
        log.exception("Failed to read registrations workbook %s", path)
        raise RosterLoadError(f"Cannot read registrations workbook: {path}") from exc

    records: list[ParticipantRecord] = []
    total_rows = 0
    for sheet_name, frame in sheets.items():
        rows = frame.to_dict(orient="records")
        total_rows += len(rows)
        for row in rows:
            if row.get(APPROVAL_COLUMN) != APPROVED_TOKEN:
                continue
            records.append(
                ParticipantRecord(
                    competition=_cell(row, COMPETITION_COLUMN),
                    team=_cell(row, TEAM_COLUMN),
                    leader=_cell(row, LEADER_COLUMN),
                    present=False,
                )
            )
        log.debug("Sheet %s: %d rows", sheet_name, len(rows))

    duplicates = [key for key, count in Counter(r.key for r in records).items() if count > 1]
    for key in duplicates:
        log.warning("Duplicate roster entry %s; attendance changes will apply to every copy", tuple(key))

    log.info(
        "Loaded roster from %s: %d sheets, %d rows, %d approved",
        path,
        len(sheets),
        total_rows,
        len(records),
    )
    return records
