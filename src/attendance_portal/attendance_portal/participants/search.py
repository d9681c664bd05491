from __future__ import annotations

from typing import Optional, Sequence

from .model import ParticipantRecord


def filter_participants(records: Sequence[ParticipantRecord], query: Optional[str]) -> list[ParticipantRecord]:
    """Case-insensitive substring match on competition, leader or team."""

    if not query or not query.strip():
        return list(records)

    needle = query.lower()
    return [
        r
        for r in records
        if any(needle in (value or "").lower() for value in (r.competition, r.leader, r.team))
    ]
