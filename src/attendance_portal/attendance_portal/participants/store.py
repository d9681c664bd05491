from __future__ import annotations

import threading
from dataclasses import replace
from typing import Iterable, Mapping, Optional

from .model import ParticipantKey, ParticipantRecord, make_key


class AttendanceStore:
    """Process-lifetime roster with the attendance flag of each entry.

    The roster is never resized after startup. Every mutation rewrites the whole
    sequence and swaps it in, so readers always see a consistent snapshot.
    """

    def __init__(self, records: Iterable[ParticipantRecord] = ()):
        self._records: tuple[ParticipantRecord, ...] = tuple(records)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> list[ParticipantRecord]:
        return list(self._records)

    def find(self, key: ParticipantKey) -> Optional[ParticipantRecord]:
        key = make_key(*key)
        return next((r for r in self._records if r.key == key), None)

    def set_present(self, key: ParticipantKey, present: bool) -> Optional[ParticipantRecord]:
        """Set `present` on every record with this identity.

        Returns the first matching record after the update, or None when nothing matched.
        """

        key = make_key(*key)
        with self._lock:
            self._records = tuple(
                replace(r, present=present) if r.key == key else r for r in self._records
            )
        return self.find(key)

    def seed(self, states: Mapping[ParticipantKey, bool]) -> int:
        """Apply replayed attendance; identities missing from `states` become absent."""

        with self._lock:
            self._records = tuple(
                replace(r, present=bool(states.get(r.key, False))) for r in self._records
            )
            return sum(1 for r in self._records if r.present)
