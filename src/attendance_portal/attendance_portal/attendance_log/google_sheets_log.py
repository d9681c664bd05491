from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.service_account import Credentials
from gspread.exceptions import GSpreadException
from gspread.utils import rowcol_to_a1

from ..core.constants import DEFAULT_LOG_WORKSHEET
from ..core.exceptions import AttendanceLogError

log = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (GSpreadException, GoogleAuthError, requests.exceptions.RequestException)


def _error_details(exc: Exception):
    details = getattr(exc, "error", None)
    if details:
        return details
    response = getattr(exc, "response", None)
    if response is not None and getattr(response, "text", None):
        return response.text
    return "No additional details"


@contextmanager
def _log_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except _TRANSPORT_ERRORS as exc:
        details = _error_details(exc)
        log.exception("Attendance log %s failed: %s", operation, details)
        raise AttendanceLogError(f"Attendance log {operation} failed: {exc}", details=details) from exc


class GoogleSheetsAttendanceLog:
    """gspread-backed AttendanceLogSheet.

    One instance lives for the whole process; the spreadsheet handle is opened on
    first use and reused afterwards.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        spreadsheet_id: str,
        worksheet: str = DEFAULT_LOG_WORKSHEET,
        client: Optional[gspread.Client] = None,
    ):
        self._credentials = credentials
        self._client = client or gspread.authorize(credentials)
        self._spreadsheet_id = spreadsheet_id
        self._worksheet_title = worksheet
        self._spreadsheet: Optional[gspread.Spreadsheet] = None

    def _open(self) -> gspread.Spreadsheet:
        if self._spreadsheet is None:
            log.debug("Opening spreadsheet %s", self._spreadsheet_id)
            self._spreadsheet = self._client.open_by_key(self._spreadsheet_id)
        return self._spreadsheet

    def _worksheet(self) -> gspread.Worksheet:
        return self._open().worksheet(self._worksheet_title)

    def get_rows(self, cells: str) -> list[list[str]]:
        with _log_errors("read"):
            rows = self._worksheet().get(cells)
        return [list(r) for r in rows]

    def append_row(self, values: Sequence[str], *, table_range: str) -> None:
        with _log_errors("append"):
            response = self._worksheet().append_row(
                list(values),
                value_input_option="RAW",
                insert_data_option="INSERT_ROWS",
                table_range=table_range,
            )
        updated = (response or {}).get("updates", {}).get("updatedRows")
        log.debug("Appended %s row(s) to attendance log", updated)

    def update_row(self, row_number: int, values: Sequence[str]) -> None:
        first = rowcol_to_a1(row_number, 1)
        last = rowcol_to_a1(row_number, len(values))
        with _log_errors("update"):
            self._worksheet().update(
                range_name=f"{first}:{last}",
                values=[list(values)],
                value_input_option="RAW",
            )
        log.debug("Updated attendance log row %d", row_number)

    def delete_row(self, row_number: int) -> None:
        with _log_errors("delete"):
            self._worksheet().delete_rows(row_number)
        log.debug("Deleted attendance log row %d", row_number)

    def check_auth(self) -> None:
        with _log_errors("authentication"):
            self._credentials.refresh(Request())

    def read_range(self, a1_range: str) -> list[list[str]]:
        with _log_errors("read"):
            payload = self._open().values_get(a1_range)
        return [list(r) for r in payload.get("values", [])]
