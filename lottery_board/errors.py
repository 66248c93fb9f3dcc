"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class EntryRejectedError(ValidationError):
    """A submitted number was refused by the tier gating/validation rules.

    The message is shown to the operator as-is. ``tier`` names the prize tier
    the number was submitted to.
    """

    def __init__(self, message: str, tier: str) -> None:
        super().__init__(message=message, details={"tier": tier})
        self.tier = tier


class StorageError(AppError):
    """The results document could not be written."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(code="storage_error", message=message, status_code=500, details=details)
