from __future__ import annotations

from typing import Protocol, Sequence


class AttendanceLogSheet(Protocol):
    """Worksheet holding the attendance log.

    Ranges are A1 notation relative to the log worksheet unless they name a sheet
    themselves (`read_range`). Row numbers are 1-based sheet rows.
    """

    def get_rows(self, cells: str) -> list[list[str]]:
        raise NotImplementedError

    def append_row(self, values: Sequence[str], *, table_range: str) -> None:
        raise NotImplementedError

    def update_row(self, row_number: int, values: Sequence[str]) -> None:
        raise NotImplementedError

    def delete_row(self, row_number: int) -> None:
        raise NotImplementedError

    def check_auth(self) -> None:
        """Confirm the credentials can obtain an access token."""

        raise NotImplementedError

    def read_range(self, a1_range: str) -> list[list[str]]:
        raise NotImplementedError
