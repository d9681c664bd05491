from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..core.constants import EXPORT_COLUMNS, EXPORT_SHEET_NAME
from .model import ParticipantRecord


def write_roster_workbook(records: Sequence[ParticipantRecord]) -> io.BytesIO:
    """Serialize the roster into an in-memory .xlsx with one row per record."""

    df = pd.DataFrame([r.to_dict() for r in records], columns=EXPORT_COLUMNS)

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=EXPORT_SHEET_NAME, index=False)
    out.seek(0)
    return out
