from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LogPolicy
from ..core.exceptions import ConfigurationError
from .repository import AttendanceLogSheet
from .strategies.action_tag_strategy import ActionTagStrategy
from .strategies.append_strategy import AppendStrategy
from .strategies.base import AttendanceLogStrategy
from .strategies.delete_row_strategy import DeleteRowStrategy
from .strategies.upsert_strategy import UpsertStrategy


@dataclass
class AttendanceLogStrategyFactory:
    """Factory Pattern: choose the log strategy from the configured policy."""

    def for_policy(self, policy: str | LogPolicy, sheet: AttendanceLogSheet) -> AttendanceLogStrategy:
        raw = policy.value if isinstance(policy, LogPolicy) else str(policy).strip().lower()
        try:
            policy = LogPolicy(raw)
        except ValueError as exc:
            choices = ", ".join(p.value for p in LogPolicy)
            raise ConfigurationError(f"Unknown LOG_POLICY {policy!r} (expected one of: {choices})") from exc

        if policy == LogPolicy.APPEND:
            return AppendStrategy(sheet)
        if policy == LogPolicy.UPSERT:
            return UpsertStrategy(sheet)
        if policy == LogPolicy.DELETE_ROW:
            return DeleteRowStrategy(sheet)
        return ActionTagStrategy(sheet)
