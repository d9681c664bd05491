from __future__ import annotations

import io
import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from ..attendance_log.repository import AttendanceLogSheet
from ..attendance_log.strategies.base import AttendanceLogStrategy
from ..common.datetime_utils import now_utc
from ..common.validators import require_fields
from ..core.constants import DEFAULT_DIAGNOSTIC_RANGE
from ..core.enums import LogAction
from ..core.exceptions import ParticipantNotFoundError, ValidationError
from ..participants.exporter import write_roster_workbook
from ..participants.model import ParticipantKey, ParticipantRecord, make_key
from ..participants.search import filter_participants
from ..participants.store import AttendanceStore

log = logging.getLogger(__name__)

IDENTITY_FIELDS = ("competition", "leader", "team")


def key_from_payload(payload: Any) -> ParticipantKey:
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    require_fields(payload, IDENTITY_FIELDS)
    return make_key(payload["competition"], payload["leader"], payload["team"])


class AttendanceService:
    """Use cases: list the roster, mark/unmark attendance and mirror it to the log."""

    def __init__(
        self,
        store: AttendanceStore,
        log_strategy: AttendanceLogStrategy,
        log_sheet: AttendanceLogSheet,
        *,
        diagnostic_range: str = DEFAULT_DIAGNOSTIC_RANGE,
    ):
        self._store = store
        self._strategy = log_strategy
        self._sheet = log_sheet
        self._diagnostic_range = diagnostic_range

    def list_participants(self, search: Optional[str] = None) -> list[ParticipantRecord]:
        return filter_participants(self._store.list_all(), search)

    def mark_present(self, key: ParticipantKey, *, now: Optional[datetime] = None) -> ParticipantRecord:
        return self._set_attendance(key, present=True, action=LogAction.MARKED, now=now)

    def remove_present(self, key: ParticipantKey, *, now: Optional[datetime] = None) -> ParticipantRecord:
        return self._set_attendance(key, present=False, action=LogAction.REMOVED, now=now)

    def _set_attendance(
        self,
        key: ParticipantKey,
        *,
        present: bool,
        action: LogAction,
        now: Optional[datetime],
    ) -> ParticipantRecord:
        participant = self._store.set_present(key, present)
        if participant is None:
            log.info("No roster entry for %s; attendance unchanged", tuple(key))
            raise ParticipantNotFoundError("Participant not found")

        # The store keeps the new flag even if the log write below fails.
        self._strategy.record(participant, action, now=now or now_utc())
        log.info("%s %s", action.value, tuple(key))
        return participant

    def export_workbook(self) -> io.BytesIO:
        return write_roster_workbook(self._store.list_all())

    def check_log_connection(self) -> list[str]:
        """Authenticate against the log and return its header row."""

        self._sheet.check_auth()
        log.info("Auth client obtained successfully")
        rows = self._sheet.read_range(self._diagnostic_range)
        return rows[0] if rows else []

    def seed_from_log(self) -> int:
        """Rehydrate `present` flags from the log. Returns how many are present."""

        if not self._strategy.supports_read_back:
            log.info("%s cannot replay the log; roster starts with nobody present", type(self._strategy).__name__)
            return 0

        states = self._strategy.read_back()
        present = self._store.seed(states)
        log.info("Seeded attendance from log: %d of %d present", present, len(self._store))
        return present
