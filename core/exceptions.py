# Path: core/exceptions.py
# Purpose: Define the error types raised by services and form validation.
# Layer: core.
# Details: DbError wraps data access failures; ValidationError carries per-field messages.

from __future__ import annotations

from typing import Dict


class DbError(RuntimeError):
    """Raised when the seller database cannot complete an operation."""


class ValidationError(RuntimeError):
    """Raised when form input is rejected.

    ``errors`` maps field names to messages in the order they were found.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.errors: Dict[str, str] = {}

    def add_error(self, field_name: str, message: str) -> None:
        self.errors[field_name] = message


__all__ = ["DbError", "ValidationError"]
