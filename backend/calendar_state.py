"""
Calendar State Controller for Desk Calendar.

Owns the displayed month, the selected date and the event store, and turns
user intents (navigate, select, add, delete) into state changes. The GUI
calls an operation, then pulls the month grid and the event list again and
re-renders. All calls are expected on the GUI thread.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable, NamedTuple, Optional

from .calendar_event import CalendarEvent
from .debug import debug_print
from .errors import InvalidDateError, NoSelectionError
from .event_store import EventStore, require_date
from .timezone_utils import local_today


def _is_int(value) -> bool:
    """True for real integers; bool is an int subclass but not a month or year."""
    return isinstance(value, int) and not isinstance(value, bool)


class NavigationMode(Enum):
    """What the previous/next controls step by."""
    MONTH = "month"
    DAY = "day"


class DisplayedMonth(NamedTuple):
    """Year and month currently rendered as a grid."""
    year: int
    month: int

    @classmethod
    def of(cls, year: int, month: int) -> 'DisplayedMonth':
        """Validated constructor; raises InvalidDateError for out-of-range values."""
        if not _is_int(month) or not 1 <= month <= 12:
            raise InvalidDateError(f"Month must be between 1 and 12, got {month!r}")
        if not _is_int(year) or not date.min.year <= year <= date.max.year:
            raise InvalidDateError(
                f"Year must be between {date.min.year} and {date.max.year}, got {year!r}"
            )
        return cls(year, month)

    @classmethod
    def containing(cls, day: date) -> 'DisplayedMonth':
        return cls(day.year, day.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def leading_blanks(self) -> int:
        """Blank cells before the 1st in a Sunday-first week (Sunday = 0)."""
        return self.first_day.isoweekday() % 7

    def shifted(self, months: int) -> 'DisplayedMonth':
        index = self.year * 12 + (self.month - 1) + months
        year, month_index = divmod(index, 12)
        return DisplayedMonth.of(year, month_index + 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class GridCell:
    """One square of the month grid; blank padding cells have no date."""
    date: Optional[date] = None
    is_today: bool = False
    is_selected: bool = False
    has_events: bool = False

    @property
    def is_blank(self) -> bool:
        return self.date is None

    @property
    def day(self) -> Optional[int]:
        return self.date.day if self.date is not None else None


class CalendarController:
    """
    View state plus event storage for a single calendar window.

    Every failing operation raises a CalendarError subclass before touching
    any state.
    """

    def __init__(
        self,
        event_store: Optional[EventStore] = None,
        today_provider: Optional[Callable[[], date]] = None,
    ):
        self.event_store = event_store if event_store is not None else EventStore()
        self._today_provider = today_provider or local_today

        today = self.today
        self._displayed_month = DisplayedMonth.containing(today)
        self._selected_date: Optional[date] = today

    # ==================== State accessors ====================

    @property
    def today(self) -> date:
        """The real current date, recomputed on every access."""
        return self._today_provider()

    @property
    def displayed_month(self) -> DisplayedMonth:
        return self._displayed_month

    @property
    def selected_date(self) -> Optional[date]:
        return self._selected_date

    def _require_selection(self) -> date:
        if self._selected_date is None:
            raise NoSelectionError()
        return self._selected_date

    # ==================== Navigation ====================

    def navigate_previous_month(self) -> DisplayedMonth:
        self._displayed_month = self._displayed_month.shifted(-1)
        debug_print(f"Displayed month -> {self._displayed_month}")
        return self._displayed_month

    def navigate_next_month(self) -> DisplayedMonth:
        self._displayed_month = self._displayed_month.shifted(1)
        debug_print(f"Displayed month -> {self._displayed_month}")
        return self._displayed_month

    def navigate_previous_day(self) -> date:
        return self._step_selected_date(-1)

    def navigate_next_day(self) -> date:
        return self._step_selected_date(1)

    def _step_selected_date(self, days: int) -> date:
        current = self._require_selection()
        try:
            new_date = current + timedelta(days=days)
        except OverflowError:
            raise InvalidDateError(f"Cannot move past {current.isoformat()}")
        self._selected_date = new_date
        self._displayed_month = DisplayedMonth.containing(new_date)
        debug_print(f"Selected date -> {new_date.isoformat()}")
        return new_date

    def navigate_previous(self, mode: NavigationMode = NavigationMode.MONTH):
        if mode == NavigationMode.DAY:
            return self.navigate_previous_day()
        return self.navigate_previous_month()

    def navigate_next(self, mode: NavigationMode = NavigationMode.MONTH):
        if mode == NavigationMode.DAY:
            return self.navigate_next_day()
        return self.navigate_next_month()

    def jump_to_today(self) -> date:
        today = self.today
        self._displayed_month = DisplayedMonth.containing(today)
        self._selected_date = today
        debug_print(f"Jumped to today: {today.isoformat()}")
        return today

    # ==================== Selection ====================

    def select_month_year(self, month: int, year: int) -> DisplayedMonth:
        """Show the given month; the selected date is left alone."""
        self._displayed_month = DisplayedMonth.of(year, month)
        debug_print(f"Displayed month -> {self._displayed_month}")
        return self._displayed_month

    def select_date(self, day: date) -> date:
        day = require_date(day)
        self._selected_date = day
        debug_print(f"Selected date -> {day.isoformat()}")
        return day

    # ==================== Events ====================

    def _target_date(self, day: Optional[date]) -> date:
        """The validated date an event operation applies to; None means the selection."""
        if day is None:
            return self._require_selection()
        return require_date(day)

    def add_event(self, day: Optional[date], text: str) -> list[CalendarEvent]:
        """Append an event; a day of None means the selected date."""
        target = self._target_date(day)
        return self.event_store.add(target, text)

    def delete_event(self, day: Optional[date], event_id: str) -> list[CalendarEvent]:
        """Remove an event by id; returns the date's remaining events."""
        target = self._target_date(day)
        return self.event_store.remove(target, event_id)

    def delete_event_by_text(self, day: Optional[date], text: str) -> list[CalendarEvent]:
        """Remove the first event whose trimmed text matches."""
        target = self._target_date(day)
        event = self.event_store.find_by_text(target, text)
        return self.event_store.remove(target, event.id)

    def get_events(self, day: date) -> list[CalendarEvent]:
        return self.event_store.get(day)

    def get_events_for_selected_date(self) -> list[CalendarEvent]:
        if self._selected_date is None:
            return []
        return self.event_store.get(self._selected_date)

    # ==================== Grid ====================

    def get_month_grid(self, displayed_month: Optional[DisplayedMonth] = None) -> list[GridCell]:
        """
        Cells for a month: leading blanks for a Sunday-first week, then one
        cell per day. Trailing cells of the last week are omitted.
        """
        month = displayed_month if displayed_month is not None else self._displayed_month
        today = self.today
        selected = self._selected_date

        cells = [GridCell() for _ in range(month.leading_blanks)]
        for day_number in range(1, month.days_in_month + 1):
            cell_date = date(month.year, month.month, day_number)
            cells.append(GridCell(
                date=cell_date,
                is_today=cell_date == today,
                is_selected=cell_date == selected,
                has_events=self.event_store.has_events(cell_date),
            ))
        return cells
