from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.exceptions import ValidationError


def require_fields(payload: Mapping[str, Any], field_names: Sequence[str]) -> None:
    missing = [name for name in field_names if name not in payload]
    if missing:
        raise ValidationError(f"Missing field(s): {', '.join(missing)}")
