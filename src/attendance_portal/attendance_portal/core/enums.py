from __future__ import annotations

from enum import Enum


class LogAction(str, Enum):
    """Action recorded in the attendance log for a participant."""

    MARKED = "MARKED"
    REMOVED = "REMOVED"


class LogPolicy(str, Enum):
    """How attendance changes are mirrored to the external spreadsheet."""

    APPEND = "append"
    UPSERT = "upsert"
    ACTION_TAG = "action_tag"
    DELETE_ROW = "delete_row"
