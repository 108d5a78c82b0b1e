"""
Desk Calendar GUI Widgets

Custom widgets for displaying calendar data.
"""

from .event_widget import EventListPanel
from .calendar_widget import MonthView, MonthDayCell

__all__ = ['EventListPanel', 'MonthView', 'MonthDayCell']
