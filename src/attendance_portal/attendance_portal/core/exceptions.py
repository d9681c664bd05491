from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request data is missing a required field."""


class ParticipantNotFoundError(DomainError):
    """Raised when an identity triple matches no roster record."""


class RosterLoadError(Exception):
    """Raised when the registrations workbook cannot be opened or parsed."""


class ConfigurationError(Exception):
    """Raised when startup configuration (credentials, policy) is unusable."""


class UnsupportedOperationError(Exception):
    """Raised when a log policy is asked for something it cannot do."""


class AttendanceLogError(Exception):
    """Raised when the external attendance log cannot be read or written."""

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details
