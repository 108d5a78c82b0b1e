"""
Event Dialog for adding a calendar event.

An independent window that collects the event text for one date and hands
it to the controller. The date is fixed when the dialog opens.
"""

from datetime import date

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QLineEdit, QPushButton, QMessageBox
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QCloseEvent

from backend.calendar_state import CalendarController
from backend.config import LabelsConfig
from backend.debug import debug_print
from backend.errors import CalendarError, EmptyInputError


class EventDialog(QWidget):
    """Window for entering the text of a new event."""

    event_saved = Signal(object)  # date the event was added to
    closed = Signal()

    def __init__(self, controller: CalendarController, day: date,
                 labels: LabelsConfig = None, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.day = day
        self.labels = labels or LabelsConfig()
        self._setup_window()
        self._setup_ui()

    def _setup_window(self):
        self.setWindowFlag(Qt.Window, True)
        self.setWindowTitle(self.labels.dialog_add_event)
        self.setAttribute(Qt.WA_DeleteOnClose)
        self.setMinimumWidth(360)

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        prompt = QLabel(self.labels.prompt_event_text.format(self.day.isoformat()))
        layout.addWidget(prompt)

        self._text_edit = QLineEdit()
        self._text_edit.returnPressed.connect(self._on_save)
        layout.addWidget(self._text_edit)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self._cancel_btn = QPushButton(self.labels.button_cancel)
        self._cancel_btn.clicked.connect(self.close)
        buttons.addWidget(self._cancel_btn)

        self._save_btn = QPushButton(self.labels.button_save)
        self._save_btn.setDefault(True)
        self._save_btn.clicked.connect(self._on_save)
        buttons.addWidget(self._save_btn)
        layout.addLayout(buttons)

        self._text_edit.setFocus()

    def text(self) -> str:
        return self._text_edit.text()

    def _on_save(self):
        try:
            self.controller.add_event(self.day, self.text())
        except EmptyInputError as e:
            QMessageBox.warning(self, "Validation Error", e.message)
            self._text_edit.setFocus()
            return
        except CalendarError as e:
            QMessageBox.warning(self, "Error", e.message)
            return

        debug_print(f"EventDialog saved event on {self.day.isoformat()}")
        self.event_saved.emit(self.day)
        self.close()

    def closeEvent(self, close_event: QCloseEvent):
        self.closed.emit()
        super().closeEvent(close_event)
