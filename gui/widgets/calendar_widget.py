"""
Month grid widget for Desk Calendar.

Renders the cells produced by CalendarController.get_month_grid(): a
Sunday-first header, leading blanks and one clickable cell per day.
"""

from datetime import date

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QFrame, QSizePolicy
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFontMetrics, QMouseEvent

from backend.calendar_state import GridCell
from backend.config import LayoutConfig, LocalizationConfig, ColorsConfig

# Module-level configs (set by MainWindow at startup)
_layout_config: LayoutConfig = LayoutConfig()
_localization_config: LocalizationConfig = LocalizationConfig()
_colors_config: ColorsConfig = ColorsConfig()


def set_layout_config(config: LayoutConfig):
    """Set the layout configuration for this module."""
    global _layout_config
    _layout_config = config


def set_localization_config(config: LocalizationConfig):
    """Set the localization configuration for this module."""
    global _localization_config
    _localization_config = config


def get_localization_config() -> LocalizationConfig:
    """Get the current localization configuration."""
    return _localization_config


def set_colors_config(config: ColorsConfig):
    """Set the colors configuration for this module."""
    global _colors_config
    _colors_config = config


def get_colors_config() -> ColorsConfig:
    """Get the current colors configuration."""
    return _colors_config


def get_interface_font() -> tuple[str, int]:
    """Get the configured interface font name and size."""
    return (_layout_config.interface_font, _layout_config.interface_font_size)


def cell_style_sheet(cell: GridCell, colors: ColorsConfig) -> str:
    """Style sheet for a day cell: today fill, selected border, has-events text."""
    background = colors.today_background if cell.is_today else colors.cell_background
    text = colors.has_events_text if cell.has_events else colors.day_text
    if cell.is_selected:
        border = f"2px solid {colors.selected_border}"
    else:
        border = f"1px solid {colors.cell_border}"
    weight = "bold" if cell.has_events else "normal"
    return f"background-color: {background}; color: {text}; border: {border}; font-weight: {weight};"


class MonthDayCell(QFrame):
    """Single day cell in month view."""

    clicked = Signal(date)

    def __init__(self, cell: GridCell, parent=None):
        super().__init__(parent)
        self._cell = cell
        self._setup_ui()

    @property
    def cell(self) -> GridCell:
        return self._cell

    def _setup_ui(self):
        self.setFrameStyle(QFrame.Box | QFrame.Plain)
        fm = QFontMetrics(self.font())
        # Enough for day number "00" + padding
        min_width = fm.horizontalAdvance("00") + 16
        self.setMinimumSize(max(min_width, 48), max(fm.height() * 2, 40))
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._day_label = QLabel(str(self._cell.day))
        self._day_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._day_label)

        if not self._cell.is_blank:
            self.setCursor(Qt.PointingHandCursor)
            if self._cell.has_events:
                self.setToolTip("Has events")
        self._update_style()

    def _update_style(self):
        self.setStyleSheet(cell_style_sheet(self._cell, get_colors_config()))

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self._cell.date)
        super().mousePressEvent(event)


class MonthView(QWidget):
    """Month view showing a Sunday-first calendar grid."""

    day_clicked = Signal(date)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._cells: list[MonthDayCell] = []
        self._blanks: list[QWidget] = []
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        grid_widget = QWidget()
        self._grid_layout = QGridLayout(grid_widget)
        self._grid_layout.setContentsMargins(0, 0, 0, 0)
        self._grid_layout.setSpacing(1)

        # Day name headers in row 0
        font_name, _ = get_interface_font()
        header_size = _layout_config.day_header_font_size
        localization = get_localization_config()
        colors = get_colors_config()
        self._header_labels = []
        for col in range(7):
            label = QLabel(localization.get_day_name(col))
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(f"font-family: '{font_name}'; font-size: {header_size}pt; font-weight: bold; padding: 8px; background: {colors.header_background};")
            self._grid_layout.addWidget(label, 0, col)
            self._grid_layout.setColumnStretch(col, 1)
            self._header_labels.append(label)

        layout.addWidget(grid_widget, 1)

    def clear(self):
        for widget in self._cells + self._blanks:
            self._grid_layout.removeWidget(widget)
            widget.deleteLater()
        self._cells.clear()
        self._blanks.clear()

    def set_cells(self, cells: list[GridCell]):
        """Rebuild the grid from controller cells; always a full re-render."""
        self.clear()
        for index, cell in enumerate(cells):
            row, col = divmod(index, 7)
            if cell.is_blank:
                blank = QWidget()
                self._grid_layout.addWidget(blank, row + 1, col)
                self._blanks.append(blank)
                continue
            widget = MonthDayCell(cell)
            widget.clicked.connect(self.day_clicked.emit)
            self._grid_layout.addWidget(widget, row + 1, col)
            self._cells.append(widget)
