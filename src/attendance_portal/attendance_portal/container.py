from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .attendance.service import AttendanceService
from .attendance_log.credentials import build_credentials, load_service_account_info
from .attendance_log.factory import AttendanceLogStrategyFactory
from .attendance_log.google_sheets_log import GoogleSheetsAttendanceLog
from .attendance_log.repository import AttendanceLogSheet
from .attendance_log.strategies.base import AttendanceLogStrategy
from .core.constants import DEFAULT_DIAGNOSTIC_RANGE, DEFAULT_LOG_WORKSHEET
from .participants.loader import load_roster
from .participants.store import AttendanceStore

PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class Container:
    store: AttendanceStore
    log_strategy: AttendanceLogStrategy

    attendance_service: AttendanceService


def resolve_path(value: str | Path, base_dir: Path = PROJECT_ROOT) -> Path:
    path = Path(value)
    return path if path.is_absolute() else base_dir / path


def build_log_sheet(settings: Any, *, base_dir: Path = PROJECT_ROOT) -> GoogleSheetsAttendanceLog:
    info = load_service_account_info(
        inline_json=getattr(settings, "GOOGLE_APPLICATION_CREDENTIALS_JSON", None),
        file_path=getattr(settings, "GOOGLE_CREDENTIALS_FILE", None),
        base_dir=base_dir,
    )
    return GoogleSheetsAttendanceLog(
        build_credentials(info),
        spreadsheet_id=str(getattr(settings, "SPREADSHEET_ID")),
        worksheet=getattr(settings, "LOG_WORKSHEET", DEFAULT_LOG_WORKSHEET),
    )


def assemble(settings: Any, *, store: AttendanceStore, log_sheet: AttendanceLogSheet) -> Container:
    """Wire the service around an already built store and log sheet."""

    log_strategy = AttendanceLogStrategyFactory().for_policy(getattr(settings, "LOG_POLICY", "action_tag"), log_sheet)
    attendance_service = AttendanceService(
        store,
        log_strategy,
        log_sheet,
        diagnostic_range=getattr(settings, "DIAGNOSTIC_RANGE", DEFAULT_DIAGNOSTIC_RANGE),
    )

    if bool(getattr(settings, "SEED_FROM_LOG", False)):
        attendance_service.seed_from_log()

    return Container(
        store=store,
        log_strategy=log_strategy,
        attendance_service=attendance_service,
    )


def build_container(settings: Any) -> Container:
    """Build the process-wide objects once at startup.

    Any failure here (roster, credentials, log replay) stops the app from serving.
    """

    log_sheet = build_log_sheet(settings)
    store = AttendanceStore(load_roster(resolve_path(getattr(settings, "ROSTER_PATH"))))
    return assemble(settings, store=store, log_sheet=log_sheet)
