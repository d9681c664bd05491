from __future__ import annotations

import logging
from datetime import datetime

from ...core.enums import LogAction
from ...participants.model import ParticipantKey, ParticipantRecord
from .base import AttendanceLogStrategy, entry_values, row_key

log = logging.getLogger(__name__)


class UpsertStrategy(AttendanceLogStrategy):
    """One pre-existing row per identity, overwritten in place on every change.

    Identities without a row are not appended; the change is logged and skipped.
    Column E holds the latest action so replay does not depend on row existence alone.
    """

    supports_read_back = True
    table_range = "A2:E"

    def record(self, participant: ParticipantRecord, action: LogAction, *, now: datetime) -> bool:
        row_number = self._find_row_number(self.table_range, participant.key)
        if row_number is None:
            log.warning("Participant %s not found in attendance log; nothing written", tuple(participant.key))
            return False

        values = entry_values(participant, now, action)
        log.debug("Updating attendance log row %d with %s", row_number, values)
        self._sheet.update_row(row_number, values)
        return True

    def read_back(self) -> dict[ParticipantKey, bool]:
        states: dict[ParticipantKey, bool] = {}
        for row in self._sheet.get_rows(self.table_range):
            key = row_key(row)
            if key is None or key in states:
                continue
            action = row[4] if len(row) > 4 else ""
            states[key] = action != LogAction.REMOVED.value
        return states
