"""Unit tests for configuration loading."""

import calendar
from pathlib import Path

import pytest

from backend.calendar_state import NavigationMode
from backend.config import Config, LabelsConfig, LocalizationConfig


SAMPLE_TOML = """
[General]
state_file = "{state}"
navigation = "day"
year_range = 3
timezone = "Europe/Amsterdam"

[Layout]
title_font_size = 22

[Bindings]
next = "N"

[Localization]
day_names = "Zo Ma Di Wo Do Vr Za"

[Colors]
today_background = "#fff59d"

[Labels]
button_today = "Vandaag"
no_events = "Geen afspraken."
"""


class TestLoad:

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))

        config = Config.load()

        assert config.navigation == NavigationMode.MONTH
        assert config.year_range == 5
        assert config.timezone is None
        assert config.state_file == tmp_path / "state" / "desk-calendar" / "state.json"

    def test_missing_explicit_file_is_an_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load(tmp_path / "absent.toml")

    def test_full_file(self, tmp_path):
        path = tmp_path / "desk-calendar.toml"
        path.write_text(SAMPLE_TOML.format(state=tmp_path / "ui.json"))

        config = Config.load(path)

        assert config.state_file == tmp_path / "ui.json"
        assert config.navigation == NavigationMode.DAY
        assert config.year_range == 3
        assert config.timezone == "Europe/Amsterdam"
        assert config.layout.title_font_size == 22
        assert config.layout.interface_font == "Sans"
        assert config.bindings.next == "N"
        assert config.bindings.prev == "Left"
        assert config.localization.get_day_name(0) == "Zo"
        assert config.colors.today_background == "#fff59d"
        assert config.colors.selected_border == "#ff0000"
        assert config.labels.button_today == "Vandaag"
        assert config.labels.no_events == "Geen afspraken."
        assert config.labels.button_prev == LabelsConfig.button_prev

    def test_default_path_follows_xdg(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert Config.get_default_config_path() == Path(tmp_path) / "desk-calendar" / "desk-calendar.toml"


class TestValidation:

    def test_unknown_navigation(self):
        with pytest.raises(ValueError, match="navigation"):
            Config.from_dict({"General": {"navigation": "week"}})

    def test_negative_year_range(self):
        with pytest.raises(ValueError, match="year_range"):
            Config.from_dict({"General": {"year_range": -1}})

    @pytest.mark.parametrize("value", [True, False, 2.5, "3"])
    def test_year_range_must_be_an_integer(self, value):
        with pytest.raises(ValueError, match="year_range"):
            Config.from_dict({"General": {"year_range": value}})

    def test_unknown_timezone(self):
        with pytest.raises(ValueError, match="timezone"):
            Config.from_dict({"General": {"timezone": "Mars/Olympus"}})

    def test_wrong_number_of_day_names(self):
        with pytest.raises(ValueError, match="day_names"):
            Config.from_dict({"Localization": {"day_names": "Mon Tue"}})


class TestLocalization:

    def test_defaults_are_sunday_first_locale_names(self):
        localization = LocalizationConfig()
        assert localization.get_day_name(0) == calendar.day_abbr[6]
        assert localization.get_day_name(1) == calendar.day_abbr[0]
        assert localization.get_month_name(1) == calendar.month_name[1]
        assert localization.get_month_name(12) == calendar.month_name[12]

    def test_out_of_range_lookups(self):
        localization = LocalizationConfig()
        assert localization.get_day_name(7) == ""
        assert localization.get_month_name(0) == ""
