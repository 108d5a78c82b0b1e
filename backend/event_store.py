"""
In-memory Event Store for Desk Calendar.

Maps a calendar date to the ordered list of events on that date. Lives for
the lifetime of the process; nothing is written to disk.
"""

from datetime import date, datetime
from typing import Optional, Callable

from .calendar_event import CalendarEvent
from .debug import debug_print
from .errors import EmptyInputError, EventNotFoundError, InvalidDateError


def require_date(day) -> date:
    """
    Validate a calendar date argument.

    datetimes are reduced to their date so they key the same entry as the
    plain date; anything else raises InvalidDateError.
    """
    if not isinstance(day, date):
        raise InvalidDateError(f"Not a calendar date: {day!r}")
    if isinstance(day, datetime):
        return day.date()
    return day


class EventStore:
    """
    Date -> events mapping.

    A date is present only while it has at least one event: adding creates
    the entry, removing the last event drops it.
    """

    def __init__(self):
        self._events: dict[date, list[CalendarEvent]] = {}
        self._on_change_callback: Optional[Callable[[], None]] = None

    def set_on_change_callback(self, callback: Optional[Callable[[], None]]) -> None:
        self._on_change_callback = callback

    def _notify_change(self) -> None:
        if self._on_change_callback:
            self._on_change_callback()

    # ==================== Mutations ====================

    def add(self, day: date, text: str) -> list[CalendarEvent]:
        """
        Append an event to a date.

        Returns:
            A copy of the date's events after the append.

        Raises:
            EmptyInputError: if text is empty or whitespace only.
            InvalidDateError: if day is not a date.
        """
        day = require_date(day)
        cleaned = (text or "").strip()
        if not cleaned:
            raise EmptyInputError()

        event = CalendarEvent(cleaned)
        self._events.setdefault(day, []).append(event)
        debug_print(f"Added event {event.id} on {day.isoformat()}: {cleaned!r}")
        self._notify_change()
        return self.get(day)

    def remove(self, day: date, event_id: str) -> list[CalendarEvent]:
        """
        Remove the event with the given id from a date.

        Returns:
            A copy of the date's remaining events (empty if it was the last one).

        Raises:
            EventNotFoundError: if the date has no events or none with that id.
        """
        day = require_date(day)
        events = self._events.get(day)
        if not events:
            raise EventNotFoundError(day)

        for index, event in enumerate(events):
            if event.id == event_id:
                break
        else:
            raise EventNotFoundError(day, event_id)

        del events[index]
        if not events:
            del self._events[day]
        debug_print(f"Removed event {event_id} on {day.isoformat()}, {len(events)} left")
        self._notify_change()
        return self.get(day)

    # ==================== Queries ====================

    def find_by_text(self, day: date, text: str) -> CalendarEvent:
        """
        First event on a date whose text matches, ignoring surrounding whitespace.

        Raises:
            EventNotFoundError: if nothing matches.
        """
        day = require_date(day)
        events = self._events.get(day)
        if not events:
            raise EventNotFoundError(day)

        wanted = (text or "").strip()
        for event in events:
            if event.text.strip() == wanted:
                return event
        raise EventNotFoundError(day, wanted)

    def get(self, day: date) -> list[CalendarEvent]:
        """Events on a date in insertion order; empty list if none."""
        day = require_date(day)
        return list(self._events.get(day, ()))

    def has_events(self, day: date) -> bool:
        return bool(self._events.get(day))

    def event_count(self) -> int:
        """Total number of events over all dates."""
        return sum(len(events) for events in self._events.values())

    def __contains__(self, day: object) -> bool:
        return day in self._events

    def __len__(self) -> int:
        return len(self._events)
