"""
Desk Calendar Backend Module

This module provides the core functionality for calendar operations:
- Configuration parsing (config.py)
- Calendar state controller (calendar_state.py)
- In-memory event store (event_store.py)
- Event value with stable id (calendar_event.py)
- Error taxonomy (errors.py)
"""

from .config import Config
from .calendar_event import CalendarEvent
from .event_store import EventStore
from .calendar_state import CalendarController, DisplayedMonth, GridCell, NavigationMode
from .errors import (
    CalendarError,
    EmptyInputError,
    NoSelectionError,
    EventNotFoundError,
    InvalidDateError,
)

__all__ = [
    'Config',
    'CalendarEvent',
    'EventStore',
    'CalendarController',
    'DisplayedMonth',
    'GridCell',
    'NavigationMode',
    'CalendarError',
    'EmptyInputError',
    'NoSelectionError',
    'EventNotFoundError',
    'InvalidDateError',
]
