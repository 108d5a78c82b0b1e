"""
Event panel for Desk Calendar.

Lists the events of the selected date and offers add/delete buttons. Items
carry the event id, so deleting never depends on the displayed text.
"""

from datetime import date
from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QListWidget, QListWidgetItem, QPushButton
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont

from backend.calendar_event import CalendarEvent
from backend.config import LabelsConfig, ColorsConfig


class EventListPanel(QWidget):
    """Side panel with the selected date's events."""

    add_requested = Signal()
    delete_requested = Signal(str)  # event id
    delete_without_selection = Signal()

    def __init__(self, labels: LabelsConfig, colors: ColorsConfig,
                 interface_font: Optional[QFont] = None, parent=None):
        super().__init__(parent)
        self.labels = labels
        self.colors = colors
        self._interface_font = interface_font
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(4)

        self._title = QLabel(self.labels.events_header)
        title_font = QFont(self._interface_font) if self._interface_font else self._title.font()
        title_font.setBold(True)
        self._title.setFont(title_font)
        layout.addWidget(self._title)

        self._date_label = QLabel()
        layout.addWidget(self._date_label)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SingleSelection)
        layout.addWidget(self._list, 1)

        self._empty_label = QLabel(self.labels.no_events)
        self._empty_label.setStyleSheet(f"color: {self.colors.secondary_text};")
        layout.addWidget(self._empty_label)

        buttons = QHBoxLayout()
        self._add_btn = QPushButton(self.labels.button_add_event)
        self._add_btn.clicked.connect(self.add_requested.emit)
        buttons.addWidget(self._add_btn)

        self._delete_btn = QPushButton(self.labels.button_delete_event)
        self._delete_btn.clicked.connect(self._on_delete_clicked)
        buttons.addWidget(self._delete_btn)
        layout.addLayout(buttons)

        if self._interface_font:
            for widget in (self._date_label, self._add_btn, self._delete_btn):
                widget.setFont(self._interface_font)

    def set_events(self, day: Optional[date], events: list[CalendarEvent]):
        """Replace the list contents for the given date."""
        self._list.clear()
        if day is None:
            self._date_label.setText("")
        else:
            self._date_label.setText(self.labels.events_for_date.format(day.isoformat()))

        for event in events:
            item = QListWidgetItem(event.text)
            item.setData(Qt.UserRole, event.id)
            self._list.addItem(item)

        self._empty_label.setVisible(not events)

    def selected_event_id(self) -> Optional[str]:
        item = self._list.currentItem()
        if item is None or not item.isSelected():
            return None
        return item.data(Qt.UserRole)

    def selected_event_text(self) -> Optional[str]:
        item = self._list.currentItem()
        return item.text() if item is not None else None

    def _on_delete_clicked(self):
        event_id = self.selected_event_id()
        if event_id is None:
            self.delete_without_selection.emit()
        else:
            self.delete_requested.emit(event_id)
