from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from google.oauth2.service_account import Credentials

from ..core.constants import REQUIRED_CREDENTIAL_FIELDS, SHEETS_SCOPES
from ..core.exceptions import ConfigurationError

log = logging.getLogger(__name__)


def load_service_account_info(
    *,
    inline_json: Optional[str] = None,
    file_path: Optional[str] = None,
    base_dir: Optional[Path] = None,
) -> dict:
    """Return the service-account payload from inline JSON, or else from a key file.

    A relative `file_path` is resolved against `base_dir` (the project root).
    """

    if inline_json:
        try:
            info = json.loads(inline_json)
        except json.JSONDecodeError as exc:
            log.exception("Inline service account JSON could not be parsed")
            raise ConfigurationError("Invalid service account JSON payload") from exc
        source = "inline JSON"
    elif file_path:
        path = Path(file_path)
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        if not path.is_file():
            raise ConfigurationError(f"Credential file not found: {path}")
        try:
            info = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            log.exception("Credential file %s could not be read", path)
            raise ConfigurationError(f"Cannot read credential file: {path}") from exc
        source = str(path)
    else:
        raise ConfigurationError(
            "No Google credentials configured. Set GOOGLE_APPLICATION_CREDENTIALS_JSON "
            "or GOOGLE_CREDENTIALS_FILE."
        )

    if not isinstance(info, dict):
        raise ConfigurationError("Service account credentials must be a JSON object")

    missing = [name for name in REQUIRED_CREDENTIAL_FIELDS if not info.get(name)]
    if missing:
        raise ConfigurationError(f"Credentials from {source} are missing: {', '.join(missing)}")
    return info


def build_credentials(info: dict) -> Credentials:
    try:
        creds = Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
    except ValueError as exc:
        log.exception("Failed to build Google credentials from service account info")
        raise ConfigurationError("Invalid service account credentials") from exc

    log.info("Google credentials ready for %s", info.get("client_email"))
    return creds
