"""
Configuration parser for Desk Calendar.

Handles TOML file parsing into per-section dataclasses. Every key is optional;
an application started without a configuration file runs on the defaults.
"""

import calendar
import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

import pytz

from .calendar_state import NavigationMode
from .debug import debug_print


@dataclass
class LayoutConfig:
    """Configuration for UI layout and fonts."""
    interface_font: str = "Sans"
    interface_font_size: int = 12
    text_font: str = "Sans"
    text_font_size: int = 12
    title_font_size: int = 18  # Month/year label above the grid
    day_header_font_size: int = 14


@dataclass
class BindingsConfig:
    """Configuration for keyboard bindings."""
    next: str = "Right"  # Key to go to next month (or day)
    prev: str = "Left"   # Key to go to previous month (or day)
    today: str = "Home"
    add_event: str = "Ctrl+N"
    delete_event: str = "Delete"


@dataclass
class ColorsConfig:
    """Configuration for UI colors."""
    # Month grid
    today_background: str = "#ffff00"
    selected_border: str = "#ff0000"
    has_events_text: str = "#0000ff"
    day_text: str = "#000000"
    cell_background: str = "#ffffff"
    cell_border: str = "#e0e0e0"
    header_background: str = "#f5f5f5"

    # Event panel
    secondary_text: str = "rgba(0, 0, 0, 0.6)"


@dataclass
class LabelsConfig:
    """Configuration for UI labels."""
    # Main window
    window_title: str = "Calendar App"
    label_month: str = "Month:"
    label_year: str = "Year:"

    # Toolbar buttons
    button_prev: str = "<"
    button_next: str = ">"
    button_today: str = "Today"

    # Event panel
    events_header: str = "Events:"
    events_for_date: str = "Events for {}:"
    no_events: str = "No events for this date."
    button_add_event: str = "Add Event"
    button_delete_event: str = "Delete Selected Event"

    # Event dialog
    dialog_add_event: str = "Add Event"
    prompt_event_text: str = "Enter event for {}:"
    button_save: str = "Save"
    button_cancel: str = "Cancel"

    # Messages
    select_event_first: str = "Please select an event to delete."
    nothing_to_delete: str = "No events to delete."
    confirm_delete: str = "Delete '{}'?"


@dataclass
class LocalizationConfig:
    """Configuration for localized day and month names."""
    # Sunday-first abbreviated day names, matching the grid header
    day_names: list[str] = None
    # Full month names, January first
    month_names: list[str] = None

    def __post_init__(self):
        if self.day_names is None:
            # calendar.day_abbr is Monday-first and follows the current locale
            abbr = list(calendar.day_abbr)
            self.day_names = abbr[6:] + abbr[:6]
        if self.month_names is None:
            self.month_names = list(calendar.month_name)[1:]
        if len(self.day_names) != 7:
            raise ValueError(f"Localization.day_names needs 7 entries, got {len(self.day_names)}")
        if len(self.month_names) != 12:
            raise ValueError(f"Localization.month_names needs 12 entries, got {len(self.month_names)}")

    def get_day_name(self, column: int) -> str:
        """Get localized day name for a grid column (0=Sunday, 6=Saturday)."""
        return self.day_names[column] if 0 <= column < len(self.day_names) else ""

    def get_month_name(self, month: int) -> str:
        """Get localized month name (1=January, 12=December)."""
        return self.month_names[month - 1] if 1 <= month <= len(self.month_names) else ""


@dataclass
class Config:
    """Main configuration container for Desk Calendar."""

    state_file: Path
    timezone: Optional[str] = None  # None means the system local zone
    navigation: NavigationMode = NavigationMode.MONTH
    year_range: int = 5  # Years either side of the current year in the year selector
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    bindings: BindingsConfig = field(default_factory=BindingsConfig)
    localization: LocalizationConfig = field(default_factory=LocalizationConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    labels: LabelsConfig = field(default_factory=LabelsConfig)

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'desk-calendar' / 'desk-calendar.toml'

    @classmethod
    def get_default_state_path(cls) -> Path:
        """Get the default state file path."""
        xdg_state = os.environ.get('XDG_STATE_HOME', os.path.expanduser('~/.local/state'))
        return Path(xdg_state) / 'desk-calendar' / 'state.json'

    @classmethod
    def defaults(cls) -> 'Config':
        """Configuration used when no file exists."""
        return cls(state_file=cls.get_default_state_path())

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a TOML file.

        Without an explicit path the default location is tried, and its absence
        yields the defaults. An explicit path that does not exist is an error.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                debug_print(f"No configuration at {config_path}, using defaults")
                return cls.defaults()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        debug_print(f"TOML data keys: {list(data.keys())}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """Build a configuration from already-parsed TOML data."""
        # Parse General section
        general = data.get('General', {})

        state_file_str = general.get('state_file', str(cls.get_default_state_path()))
        state_file = Path(os.path.expanduser(state_file_str))

        timezone = general.get('timezone') or None
        if timezone is not None and timezone not in pytz.all_timezones_set:
            raise ValueError(f"General.timezone: unknown timezone '{timezone}'")

        navigation_str = general.get('navigation', NavigationMode.MONTH.value)
        try:
            navigation = NavigationMode(navigation_str)
        except ValueError:
            choices = ", ".join(mode.value for mode in NavigationMode)
            raise ValueError(f"General.navigation must be one of {choices}, got '{navigation_str}'")

        year_range = general.get('year_range', 5)
        if isinstance(year_range, bool) or not isinstance(year_range, int) or year_range < 0:
            raise ValueError(f"General.year_range must be a non-negative integer, got {year_range!r}")

        # Parse Layout section
        layout_data = data.get('Layout', {})
        layout = LayoutConfig(
            interface_font=layout_data.get('interface_font', LayoutConfig.interface_font),
            interface_font_size=layout_data.get('interface_font_size', LayoutConfig.interface_font_size),
            text_font=layout_data.get('text_font', LayoutConfig.text_font),
            text_font_size=layout_data.get('text_font_size', LayoutConfig.text_font_size),
            title_font_size=layout_data.get('title_font_size', LayoutConfig.title_font_size),
            day_header_font_size=layout_data.get('day_header_font_size', LayoutConfig.day_header_font_size),
        )

        # Parse Bindings section
        bindings_data = data.get('Bindings', {})
        bindings = BindingsConfig(
            next=bindings_data.get('next', BindingsConfig.next),
            prev=bindings_data.get('prev', BindingsConfig.prev),
            today=bindings_data.get('today', BindingsConfig.today),
            add_event=bindings_data.get('add_event', BindingsConfig.add_event),
            delete_event=bindings_data.get('delete_event', BindingsConfig.delete_event),
        )

        # Parse Localization section (space-separated name lists)
        localization_data = data.get('Localization', {})
        day_names_str = localization_data.get('day_names', '')
        month_names_str = localization_data.get('month_names', '')
        localization = LocalizationConfig(
            day_names=day_names_str.split() if day_names_str else None,
            month_names=month_names_str.split() if month_names_str else None,
        )

        # Parse Colors section
        colors_data = data.get('Colors', {})
        colors = ColorsConfig(
            today_background=colors_data.get('today_background', ColorsConfig.today_background),
            selected_border=colors_data.get('selected_border', ColorsConfig.selected_border),
            has_events_text=colors_data.get('has_events_text', ColorsConfig.has_events_text),
            day_text=colors_data.get('day_text', ColorsConfig.day_text),
            cell_background=colors_data.get('cell_background', ColorsConfig.cell_background),
            cell_border=colors_data.get('cell_border', ColorsConfig.cell_border),
            header_background=colors_data.get('header_background', ColorsConfig.header_background),
            secondary_text=colors_data.get('secondary_text', ColorsConfig.secondary_text),
        )

        # Parse Labels section; every LabelsConfig field can be overridden
        labels_data = data.get('Labels', {})
        labels = LabelsConfig(**{
            name: labels_data[name]
            for name in LabelsConfig.__dataclass_fields__
            if name in labels_data
        })

        return cls(
            state_file=state_file,
            timezone=timezone,
            navigation=navigation,
            year_range=year_range,
            layout=layout,
            bindings=bindings,
            localization=localization,
            colors=colors,
            labels=labels,
        )
