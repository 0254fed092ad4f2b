# src/schedule_notes/errors.py

from __future__ import annotations


class ScheduleNotesError(Exception):
    """Base class for errors raised by schedule_notes."""


class ValidationError(ScheduleNotesError, ValueError):
    """
    Raised when task input is rejected.

    `field` names the offending input ("time" or "description") so the caller
    can prompt for it and move focus there. Nothing has been written.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class StorageError(ScheduleNotesError):
    """The key-value backend failed; the operation was aborted."""


class CorruptedDataError(StorageError):
    """A stored value exists but cannot be decoded."""
