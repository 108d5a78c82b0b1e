"""
Errors raised by the calendar backend.

All of them are user-facing and non-fatal: the operation that raised leaves
the calendar state unchanged and the GUI shows the message.
"""

from datetime import date
from typing import Optional


class CalendarError(Exception):
    """Base class for calendar operation failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmptyInputError(CalendarError):
    """Raised when an event is added with blank text."""

    def __init__(self, message: str = "Event text must not be empty"):
        super().__init__(message)


class NoSelectionError(CalendarError):
    """Raised when an operation needs a selected date and none is available."""

    def __init__(self, message: str = "Please select a date first."):
        super().__init__(message)


class EventNotFoundError(CalendarError):
    """Raised when a delete references an event that does not exist.

    Args:
        day: The date the event was looked up on.
        reference: The event id or text that was not found.
    """

    def __init__(self, day: date, reference: Optional[str] = None):
        self.day = day
        self.reference = reference
        if reference is None:
            message = f"No events on {day.isoformat()}"
        else:
            message = f"Event '{reference}' not found on {day.isoformat()}"
        super().__init__(message)


class InvalidDateError(CalendarError):
    """Raised for values that are not representable calendar dates."""
