from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import load_settings

from src.attendance_portal.attendance_portal.attendance_log.factory import AttendanceLogStrategyFactory
from src.attendance_portal.attendance_portal.container import build_log_sheet
from src.attendance_portal.attendance_portal.main import configure_logging


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    sheet = build_log_sheet(settings)
    sheet.check_auth()
    headers = sheet.read_range(settings.DIAGNOSTIC_RANGE)
    print(f"OK: authenticated, header row = {headers[0] if headers else []}")

    strategy = AttendanceLogStrategyFactory().for_policy(settings.LOG_POLICY, sheet)
    if not strategy.supports_read_back:
        print(f"Policy {settings.LOG_POLICY!r} cannot replay the log")
        return

    states = strategy.read_back()
    for key, present in sorted(states.items(), key=lambda kv: tuple(str(v) for v in kv[0])):
        print(f"{'PRESENT' if present else 'absent '}  {key.competition} | {key.leader} | {key.team}")
    print(f"{sum(states.values())} of {len(states)} logged participants present")


if __name__ == "__main__":
    main()
