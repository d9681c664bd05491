from __future__ import annotations

import logging
from datetime import datetime

from ...core.enums import LogAction
from ...participants.model import ParticipantKey, ParticipantRecord
from .base import AttendanceLogStrategy, entry_values, row_key

log = logging.getLogger(__name__)


class DeleteRowStrategy(AttendanceLogStrategy):
    """At most one row per present identity: marking appends it, removing deletes it."""

    supports_read_back = True
    table_range = "A2:D"

    def record(self, participant: ParticipantRecord, action: LogAction, *, now: datetime) -> bool:
        row_numbers = self._find_row_numbers(self.table_range, participant.key)

        if action == LogAction.MARKED:
            if row_numbers:
                log.debug("Participant %s already in attendance log at row %d", tuple(participant.key), row_numbers[0])
                return False
            values = entry_values(participant, now)
            log.debug("Appending attendance log row %s", values)
            self._sheet.append_row(values, table_range=self.table_range)
            return True

        if not row_numbers:
            log.warning("Participant %s not found in attendance log; nothing deleted", tuple(participant.key))
            return False

        # Bottom-up so earlier row numbers stay valid while rows shift.
        for row_number in reversed(row_numbers):
            log.debug("Deleting attendance log row %d", row_number)
            self._sheet.delete_row(row_number)
        return True

    def read_back(self) -> dict[ParticipantKey, bool]:
        states: dict[ParticipantKey, bool] = {}
        for row in self._sheet.get_rows(self.table_range):
            key = row_key(row)
            if key is not None:
                states[key] = True
        return states
