"""
Main Window for Desk Calendar.

The primary application window: month/year selectors and navigation in the
toolbar, the month grid in the centre and the selected date's events on the
right. Every user action goes through the CalendarController, after which the
window pulls the grid and event list again and re-renders them.
"""

import base64
import json
from datetime import date
from typing import Callable

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QToolBar, QPushButton,
    QLabel, QComboBox, QSplitter, QStatusBar, QMessageBox,
    QApplication, QSizePolicy
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QFont, QKeySequence, QShortcut

from backend.calendar_state import CalendarController, NavigationMode
from backend.config import Config
from backend.debug import debug_print, error_print
from backend.errors import CalendarError

from .widgets.calendar_widget import MonthView, set_layout_config, set_localization_config, set_colors_config
from .widgets.event_widget import EventListPanel
from .event_dialog import EventDialog


def selectable_years(current_year: int, year_range: int, displayed_year: int) -> list[int]:
    """Years offered in the year selector: current year +- range, plus the displayed year."""
    years = set(range(current_year - year_range, current_year + year_range + 1))
    years.add(displayed_year)
    return sorted(y for y in years if date.min.year <= y <= date.max.year)


class MainWindow(QMainWindow):
    """
    Main application window.

    Contains:
    - Toolbar with month/year selection and navigation
    - Month grid
    - Event panel for the selected date
    """

    def __init__(self, config: Config, controller: CalendarController = None, parent=None):
        super().__init__(parent)
        self.config = config

        set_layout_config(config.layout)
        set_localization_config(config.localization)
        set_colors_config(config.colors)

        # Apply text_font as application default
        text_font = QFont(config.layout.text_font, config.layout.text_font_size)
        QApplication.instance().setFont(text_font)
        self._interface_font = QFont(config.layout.interface_font, config.layout.interface_font_size)

        self.controller = controller if controller is not None else CalendarController()
        self.controller.event_store.set_on_change_callback(self._on_data_changed)

        self._event_dialogs: list[EventDialog] = []
        self._updating_selectors = False

        # State file for window geometry (events are not persisted)
        self._state_file = config.state_file
        self._ui_state: dict = {}

        self._setup_window()
        self._setup_ui()
        self._setup_toolbar()
        self._setup_shortcuts()
        self._setup_statusbar()
        self._restore_layout_state()

        self._refresh_view()

    def _setup_window(self):
        """Configure main window properties."""
        self.setWindowTitle(self.config.labels.window_title)
        self.setMinimumSize(800, 600)

        self._load_ui_state()

        geometry = self._ui_state.get("geometry")
        if geometry:
            self.restoreGeometry(base64.b64decode(geometry))
        else:
            self.resize(800, 600)

    def _setup_ui(self):
        """Set up the main UI layout."""
        self._splitter = QSplitter(Qt.Horizontal)

        self._month_view = MonthView()
        self._month_view.day_clicked.connect(self._on_day_clicked)
        self._splitter.addWidget(self._month_view)

        self._event_panel = EventListPanel(
            self.config.labels, self.config.colors, interface_font=self._interface_font
        )
        self._event_panel.add_requested.connect(self._on_add_event)
        self._event_panel.delete_requested.connect(self._on_delete_event)
        self._event_panel.delete_without_selection.connect(self._on_delete_without_selection)
        self._event_panel.setMinimumWidth(200)
        self._splitter.addWidget(self._event_panel)

        self._splitter.setSizes([560, 240])
        self.setCentralWidget(self._splitter)

    def _setup_toolbar(self):
        """Set up the selection and navigation toolbar."""
        labels = self.config.labels
        toolbar = QToolBar("Navigation")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        if toolbar.layout():
            toolbar.layout().setContentsMargins(8, 8, 8, 8)

        # === LEFT BLOCK: month/year selection ===
        selection = QWidget()
        selection_layout = QHBoxLayout(selection)
        selection_layout.setContentsMargins(0, 0, 0, 0)

        month_label = QLabel(labels.label_month)
        month_label.setFont(self._interface_font)
        selection_layout.addWidget(month_label)

        self._month_combo = QComboBox()
        self._month_combo.setFont(self._interface_font)
        for month in range(1, 13):
            self._month_combo.addItem(self.config.localization.get_month_name(month), month)
        self._month_combo.currentIndexChanged.connect(self._on_month_year_selected)
        selection_layout.addWidget(self._month_combo)

        year_label = QLabel(labels.label_year)
        year_label.setFont(self._interface_font)
        selection_layout.addWidget(year_label)

        self._year_combo = QComboBox()
        self._year_combo.setFont(self._interface_font)
        self._year_combo.currentIndexChanged.connect(self._on_month_year_selected)
        selection_layout.addWidget(self._year_combo)

        toolbar.addWidget(selection)

        # === CENTER: month/year title ===
        left_spacer = QWidget()
        left_spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        toolbar.addWidget(left_spacer)

        self._title_label = QLabel()
        title_font = QFont(self._interface_font)
        title_font.setPointSize(self.config.layout.title_font_size)
        title_font.setBold(True)
        self._title_label.setFont(title_font)
        self._title_label.setAlignment(Qt.AlignCenter)
        toolbar.addWidget(self._title_label)

        right_spacer = QWidget()
        right_spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        toolbar.addWidget(right_spacer)

        # === RIGHT BLOCK: navigation ===
        step = "day" if self.config.navigation == NavigationMode.DAY else "month"

        self._prev_btn = QPushButton(labels.button_prev)
        self._prev_btn.setFont(self._interface_font)
        self._prev_btn.setToolTip(f"Previous {step}")
        self._prev_btn.clicked.connect(self._on_previous)
        toolbar.addWidget(self._prev_btn)

        self._today_btn = QPushButton(labels.button_today)
        self._today_btn.setFont(self._interface_font)
        self._today_btn.clicked.connect(self._on_today)
        toolbar.addWidget(self._today_btn)

        self._next_btn = QPushButton(labels.button_next)
        self._next_btn.setFont(self._interface_font)
        self._next_btn.setToolTip(f"Next {step}")
        self._next_btn.clicked.connect(self._on_next)
        toolbar.addWidget(self._next_btn)

    def _setup_shortcuts(self):
        """Set up keyboard shortcuts from config bindings."""
        bindings = self.config.bindings
        for key, handler in (
            (bindings.prev, self._on_previous),
            (bindings.next, self._on_next),
            (bindings.today, self._on_today),
            (bindings.add_event, self._on_add_event),
            (bindings.delete_event, self._on_delete_shortcut),
        ):
            if key:
                shortcut = QShortcut(QKeySequence(key), self)
                shortcut.activated.connect(handler)

    def _setup_statusbar(self):
        """Set up the status bar."""
        self._statusbar = QStatusBar()
        self._statusbar.setFont(self._interface_font)
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage("Ready")

    # ==================== UI state ====================

    def _load_ui_state(self):
        """Load UI state from the JSON state file."""
        self._ui_state = {}
        if self._state_file.exists():
            try:
                with open(self._state_file, 'r') as f:
                    state = json.load(f)
                self._ui_state = state.get('ui', {})
            except (OSError, ValueError) as e:
                error_print(f"Error loading UI state: {e}")

    def _save_ui_state(self):
        """Save UI state to the JSON state file."""
        try:
            self._state_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._state_file, 'w') as f:
                json.dump({'ui': self._ui_state}, f, indent=2)
        except OSError as e:
            error_print(f"Error saving UI state: {e}")

    def _restore_layout_state(self):
        splitter_sizes = self._ui_state.get("splitter_sizes")
        if splitter_sizes and isinstance(splitter_sizes, list) and len(splitter_sizes) == 2:
            self._splitter.setSizes(splitter_sizes)

    def _save_state(self):
        """Save window geometry and splitter sizes."""
        self._ui_state["geometry"] = base64.b64encode(self.saveGeometry().data()).decode('utf-8')
        self._ui_state["splitter_sizes"] = self._splitter.sizes()
        self._save_ui_state()

    # ==================== Rendering ====================

    def _refresh_view(self):
        """Pull the grid and the event list from the controller and re-render."""
        displayed = self.controller.displayed_month
        selected = self.controller.selected_date

        self._sync_selectors()
        month_name = self.config.localization.get_month_name(displayed.month)
        self._title_label.setText(f"{month_name} {displayed.year}")

        self._month_view.set_cells(self.controller.get_month_grid())
        self._event_panel.set_events(selected, self.controller.get_events_for_selected_date())

        debug_print(f"Rendered {displayed}, selected={selected}")

    def _sync_selectors(self):
        """Point the month/year combos at the displayed month without re-triggering."""
        displayed = self.controller.displayed_month
        self._updating_selectors = True
        try:
            self._month_combo.setCurrentIndex(displayed.month - 1)

            years = selectable_years(self.controller.today.year, self.config.year_range, displayed.year)
            self._year_combo.clear()
            for year in years:
                self._year_combo.addItem(str(year), year)
            self._year_combo.setCurrentIndex(years.index(displayed.year))
        finally:
            self._updating_selectors = False

    def _run(self, action: Callable, success_message: str = None) -> bool:
        """Run a controller operation, surface CalendarError, then re-render."""
        try:
            action()
        except CalendarError as e:
            self._statusbar.showMessage(e.message, 5000)
            QMessageBox.warning(self, "Error", e.message)
            return False
        self._refresh_view()
        if success_message:
            self._statusbar.showMessage(success_message, 3000)
        return True

    # ==================== Handlers ====================

    def _on_data_changed(self):
        """Handle data change from the event store."""
        self._refresh_view()

    def _on_previous(self):
        self._run(lambda: self.controller.navigate_previous(self.config.navigation))

    def _on_next(self):
        self._run(lambda: self.controller.navigate_next(self.config.navigation))

    def _on_today(self):
        self._run(self.controller.jump_to_today)

    def _on_month_year_selected(self, _index: int):
        if self._updating_selectors:
            return
        month = self._month_combo.currentData()
        year = self._year_combo.currentData()
        if month is None or year is None:
            return
        self._run(lambda: self.controller.select_month_year(month, year))

    def _on_day_clicked(self, day: date):
        self._run(lambda: self.controller.select_date(day))

    def _on_add_event(self):
        """Open an event dialog for the selected date."""
        day = self.controller.selected_date
        if day is None:
            QMessageBox.information(self, self.config.labels.dialog_add_event, "Please select a date first.")
            return

        dialog = EventDialog(self.controller, day, labels=self.config.labels)
        dialog.event_saved.connect(self._on_event_saved)
        dialog.closed.connect(lambda d=dialog: self._on_event_dialog_closed(d))
        self._event_dialogs.append(dialog)
        dialog.show()
        dialog.raise_()
        dialog.activateWindow()

    def _on_event_saved(self, day: date):
        self._statusbar.showMessage(f"Event added on {day.isoformat()}", 3000)

    def _on_event_dialog_closed(self, dialog: EventDialog):
        if dialog in self._event_dialogs:
            self._event_dialogs.remove(dialog)

    def _on_delete_shortcut(self):
        event_id = self._event_panel.selected_event_id()
        if event_id is None:
            self._on_delete_without_selection()
        else:
            self._on_delete_event(event_id)

    def _on_delete_without_selection(self):
        labels = self.config.labels
        if not self.controller.get_events_for_selected_date():
            QMessageBox.information(self, labels.button_delete_event, labels.nothing_to_delete)
        else:
            QMessageBox.information(self, labels.button_delete_event, labels.select_event_first)

    def _on_delete_event(self, event_id: str):
        """Confirm and delete the event selected in the event panel."""
        day = self.controller.selected_date
        text = self._event_panel.selected_event_text() or ""
        result = QMessageBox.question(
            self,
            self.config.labels.button_delete_event,
            self.config.labels.confirm_delete.format(text),
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No
        )
        if result != QMessageBox.Yes:
            return
        self._run(lambda: self.controller.delete_event(day, event_id), f"Event '{text}' deleted")

    def closeEvent(self, event: QCloseEvent):
        """Handle window close."""
        for dialog in self._event_dialogs[:]:
            dialog.close()

        self._save_state()
        super().closeEvent(event)
