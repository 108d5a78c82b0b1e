"""
Desk Calendar GUI Module

PySide6-based graphical interface for the calendar application.
"""

from .main_window import MainWindow
from .event_dialog import EventDialog

__all__ = ['MainWindow', 'EventDialog']
