from __future__ import annotations

import logging
from datetime import datetime

from ...core.enums import LogAction
from ...participants.model import ParticipantKey, ParticipantRecord
from .base import AttendanceLogStrategy, entry_values, row_key

log = logging.getLogger(__name__)


class ActionTagStrategy(AttendanceLogStrategy):
    """Every change appends a row ending with MARKED or REMOVED.

    Replay walks the log from the newest row; the first action seen for an identity wins.
    """

    supports_read_back = True
    table_range = "A2:E"

    def record(self, participant: ParticipantRecord, action: LogAction, *, now: datetime) -> bool:
        values = entry_values(participant, now, action)
        log.debug("Appending attendance log row %s", values)
        self._sheet.append_row(values, table_range=self.table_range)
        return True

    def read_back(self) -> dict[ParticipantKey, bool]:
        states: dict[ParticipantKey, bool] = {}
        for row in reversed(self._sheet.get_rows(self.table_range)):
            key = row_key(row)
            if key is None or key in states or len(row) < 5:
                continue
            try:
                action = LogAction(row[4])
            except ValueError:
                log.warning("Skipping log row with unknown action %r", row[4])
                continue
            states[key] = action == LogAction.MARKED
        return states
