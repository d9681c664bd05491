from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from ...common.datetime_utils import to_log_timestamp
from ...core.constants import LOG_FIRST_DATA_ROW
from ...core.enums import LogAction
from ...core.exceptions import UnsupportedOperationError
from ...participants.model import ParticipantKey, ParticipantRecord, make_key
from ..repository import AttendanceLogSheet


def row_key(row: Sequence[str]) -> Optional[ParticipantKey]:
    """Identity of a log row: columns B, C, D are competition, leader, team."""

    if len(row) < 4:
        return None
    return make_key(row[1], row[2], row[3])


def entry_values(participant: ParticipantRecord, now: datetime, action: Optional[LogAction] = None) -> list:
    key = participant.key
    values = [to_log_timestamp(now), key.competition, key.leader, key.team]
    if action is not None:
        values.append(action.value)
    return values


class AttendanceLogStrategy(ABC):
    """Strategy Pattern: how one attendance change is mirrored to the log sheet."""

    supports_read_back = False

    def __init__(self, sheet: AttendanceLogSheet):
        self._sheet = sheet

    @abstractmethod
    def record(self, participant: ParticipantRecord, action: LogAction, *, now: datetime) -> bool:
        """Mirror one change. Returns False when the policy decided not to write."""

        raise NotImplementedError

    def read_back(self) -> dict[ParticipantKey, bool]:
        """Rebuild `present` per identity from the log contents."""

        raise UnsupportedOperationError(f"{type(self).__name__} cannot replay the attendance log")

    def _find_row_numbers(self, cells: str, key: ParticipantKey) -> list[int]:
        rows = self._sheet.get_rows(cells)
        return [index + LOG_FIRST_DATA_ROW for index, row in enumerate(rows) if row_key(row) == key]

    def _find_row_number(self, cells: str, key: ParticipantKey) -> Optional[int]:
        return next(iter(self._find_row_numbers(cells, key)), None)
