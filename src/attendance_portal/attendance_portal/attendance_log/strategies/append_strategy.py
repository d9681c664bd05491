from __future__ import annotations

import logging
from datetime import datetime

from ...core.enums import LogAction
from ...participants.model import ParticipantRecord
from .base import AttendanceLogStrategy, entry_values

log = logging.getLogger(__name__)


class AppendStrategy(AttendanceLogStrategy):
    """Audit trail only: every change appends (timestamp, competition, leader, team)."""

    table_range = "A2:D"

    def record(self, participant: ParticipantRecord, action: LogAction, *, now: datetime) -> bool:
        values = entry_values(participant, now)
        log.debug("Appending attendance log row %s (%s)", values, action.value)
        self._sheet.append_row(values, table_range=self.table_range)
        return True
