from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Optional


class ParticipantKey(NamedTuple):
    """Identity of a roster entry; there is no surrogate id.

    Build it with `make_key` so that a missing field compares equal to the empty
    cell Google Sheets returns for it.
    """

    competition: str
    leader: str
    team: str


def _identity_value(value: Any) -> str:
    return "" if value is None else str(value)


def make_key(competition: Any, leader: Any, team: Any) -> ParticipantKey:
    return ParticipantKey(_identity_value(competition), _identity_value(leader), _identity_value(team))


@dataclass(frozen=True)
class ParticipantRecord:
    """Domain entity: one approved team on the roster."""

    competition: Optional[str]
    team: Optional[str]
    leader: Optional[str]
    present: bool = False

    @property
    def key(self) -> ParticipantKey:
        return make_key(self.competition, self.leader, self.team)

    def to_dict(self) -> dict:
        return {
            "competition": self.competition,
            "team": self.team,
            "leader": self.leader,
            "present": self.present,
        }
