"""Unit tests for CalendarController.

Covers grid geometry, navigation in both modes, selection, and event
add/delete as seen through the controller.
"""

import calendar
from datetime import date, datetime

import pytest

from backend.calendar_state import CalendarController, DisplayedMonth, GridCell, NavigationMode
from backend.errors import (
    EmptyInputError,
    EventNotFoundError,
    InvalidDateError,
    NoSelectionError,
)
from tests.conftest import FIXED_TODAY


def day_cells(cells: list[GridCell]) -> list[GridCell]:
    return [cell for cell in cells if not cell.is_blank]


def leading_blanks(cells: list[GridCell]) -> int:
    count = 0
    for cell in cells:
        if not cell.is_blank:
            break
        count += 1
    return count


class TestDisplayedMonth:
    """DisplayedMonth validation and arithmetic."""

    def test_of_rejects_month_out_of_range(self):
        with pytest.raises(InvalidDateError):
            DisplayedMonth.of(2024, 13)
        with pytest.raises(InvalidDateError):
            DisplayedMonth.of(2024, 0)

    def test_of_rejects_unrepresentable_year(self):
        with pytest.raises(InvalidDateError):
            DisplayedMonth.of(10000, 1)
        with pytest.raises(InvalidDateError):
            DisplayedMonth.of(0, 1)

    def test_of_rejects_bools(self):
        with pytest.raises(InvalidDateError):
            DisplayedMonth.of(2024, True)
        with pytest.raises(InvalidDateError):
            DisplayedMonth.of(True, 1)

    def test_shift_crosses_year_boundaries(self):
        assert DisplayedMonth(2024, 1).shifted(-1) == DisplayedMonth(2023, 12)
        assert DisplayedMonth(2023, 12).shifted(1) == DisplayedMonth(2024, 1)
        assert DisplayedMonth(2024, 5).shifted(-17) == DisplayedMonth(2022, 12)

    def test_days_in_month_is_leap_aware(self):
        assert DisplayedMonth(2024, 2).days_in_month == 29
        assert DisplayedMonth(2023, 2).days_in_month == 28
        assert DisplayedMonth(2000, 2).days_in_month == 29
        assert DisplayedMonth(1900, 2).days_in_month == 28

    def test_leading_blanks_maps_sunday_to_zero(self):
        # 2024-09-01 is a Sunday, 2024-06-01 a Saturday
        assert DisplayedMonth(2024, 9).leading_blanks == 0
        assert DisplayedMonth(2024, 6).leading_blanks == 6

    def test_str(self):
        assert str(DisplayedMonth(2024, 3)) == "2024-03"


class TestMonthGrid:
    """Grid geometry and per-cell flags."""

    def test_march_2024_layout(self, controller):
        controller.select_month_year(3, 2024)
        cells = controller.get_month_grid()

        assert leading_blanks(cells) == 5
        assert len(day_cells(cells)) == 31
        assert len(cells) == 36

    @pytest.mark.parametrize("year", [1900, 1999, 2000, 2023, 2024, 2100])
    def test_every_month_matches_calendar_arithmetic(self, controller, year):
        for month in range(1, 13):
            cells = controller.get_month_grid(DisplayedMonth(year, month))
            first = date(year, month, 1)

            assert leading_blanks(cells) == first.isoweekday() % 7
            assert len(day_cells(cells)) == calendar.monthrange(year, month)[1]
            assert len(cells) <= 42
            assert [c.day for c in day_cells(cells)] == list(range(1, len(day_cells(cells)) + 1))

    def test_february_lengths(self, controller):
        assert len(day_cells(controller.get_month_grid(DisplayedMonth(2024, 2)))) == 29
        assert len(day_cells(controller.get_month_grid(DisplayedMonth(2023, 2)))) == 28

    def test_blank_cells_carry_no_flags(self, controller):
        cells = controller.get_month_grid(DisplayedMonth(2024, 6))
        blanks = cells[:6]
        assert all(c.is_blank and c.day is None for c in blanks)
        assert not any(c.is_today or c.is_selected or c.has_events for c in blanks)

    def test_today_and_selected_flags(self, controller):
        controller.select_date(date(2024, 6, 3))
        cells = day_cells(controller.get_month_grid())

        today = [c.date for c in cells if c.is_today]
        selected = [c.date for c in cells if c.is_selected]
        assert today == [FIXED_TODAY]
        assert selected == [date(2024, 6, 3)]

    def test_has_events_follows_the_store(self, controller):
        day = date(2024, 6, 20)
        added = controller.add_event(day, "Dentist")

        cell = next(c for c in controller.get_month_grid() if c.date == day)
        assert cell.has_events

        controller.delete_event(day, added[0].id)
        cell = next(c for c in controller.get_month_grid() if c.date == day)
        assert not cell.has_events

    def test_grid_defaults_to_displayed_month(self, controller):
        controller.select_month_year(2, 2023)
        cells = controller.get_month_grid()
        assert day_cells(cells)[0].date == date(2023, 2, 1)


class TestNavigation:
    """Month stepping, day stepping and jumping to today."""

    def test_starts_on_today(self, controller):
        assert controller.selected_date == FIXED_TODAY
        assert controller.displayed_month == DisplayedMonth(2024, 6)

    def test_month_stepping_leaves_selection(self, controller):
        controller.navigate_next_month()
        assert controller.displayed_month == DisplayedMonth(2024, 7)
        controller.navigate_previous_month()
        controller.navigate_previous_month()
        assert controller.displayed_month == DisplayedMonth(2024, 5)
        assert controller.selected_date == FIXED_TODAY

    def test_month_stepping_wraps_year(self, controller):
        controller.select_month_year(12, 2024)
        controller.navigate_next_month()
        assert controller.displayed_month == DisplayedMonth(2025, 1)
        controller.navigate_previous_month()
        controller.navigate_previous_month()
        assert controller.displayed_month == DisplayedMonth(2024, 11)

    def test_day_stepping_resyncs_displayed_month(self, controller):
        controller.select_date(date(2024, 6, 30))
        controller.navigate_next_day()

        assert controller.selected_date == date(2024, 7, 1)
        assert controller.displayed_month == DisplayedMonth(2024, 7)

        controller.navigate_previous_day()
        assert controller.selected_date == date(2024, 6, 30)
        assert controller.displayed_month == DisplayedMonth(2024, 6)

    def test_day_stepping_across_leap_day(self, controller):
        controller.select_date(date(2024, 2, 28))
        controller.navigate_next_day()
        assert controller.selected_date == date(2024, 2, 29)
        controller.navigate_next_day()
        assert controller.selected_date == date(2024, 3, 1)

    def test_navigation_mode_dispatch(self, controller):
        controller.navigate_next(NavigationMode.DAY)
        assert controller.selected_date == date(2024, 6, 16)
        assert controller.displayed_month == DisplayedMonth(2024, 6)

        controller.navigate_next(NavigationMode.MONTH)
        assert controller.displayed_month == DisplayedMonth(2024, 7)
        assert controller.selected_date == date(2024, 6, 16)

        controller.navigate_previous()
        assert controller.displayed_month == DisplayedMonth(2024, 6)

    def test_month_stepping_past_last_year_fails_without_change(self, controller):
        controller.select_month_year(12, 9999)
        with pytest.raises(InvalidDateError):
            controller.navigate_next_month()
        assert controller.displayed_month == DisplayedMonth(9999, 12)

    def test_day_stepping_past_last_date_fails_without_change(self, controller):
        controller.select_date(date.max)
        with pytest.raises(InvalidDateError):
            controller.navigate_next_day()
        assert controller.selected_date == date.max

    def test_jump_to_today_resets_both(self, controller):
        controller.select_month_year(1, 1999)
        controller.select_date(date(1999, 1, 5))

        assert controller.jump_to_today() == FIXED_TODAY
        assert controller.selected_date == FIXED_TODAY
        assert controller.displayed_month == DisplayedMonth(2024, 6)

    def test_today_is_recomputed_on_each_call(self, controller, clock):
        clock.today = date(2024, 7, 1)
        controller.jump_to_today()

        assert controller.selected_date == date(2024, 7, 1)
        assert controller.displayed_month == DisplayedMonth(2024, 7)
        today_cells = [c for c in controller.get_month_grid() if c.is_today]
        assert [c.date for c in today_cells] == [date(2024, 7, 1)]


class TestSelection:
    """selectMonthYear and selectDate."""

    def test_select_month_year_keeps_selected_date(self, controller):
        controller.select_month_year(3, 2030)
        assert controller.displayed_month == DisplayedMonth(2030, 3)
        assert controller.selected_date == FIXED_TODAY

    def test_select_month_year_accepts_any_valid_year(self, controller):
        controller.select_month_year(1, 1)
        assert controller.displayed_month == DisplayedMonth(1, 1)

    def test_invalid_month_leaves_state(self, controller):
        with pytest.raises(InvalidDateError):
            controller.select_month_year(13, 2024)
        assert controller.displayed_month == DisplayedMonth(2024, 6)
        with pytest.raises(InvalidDateError):
            controller.select_month_year(True, 2024)
        assert controller.displayed_month == DisplayedMonth(2024, 6)

    def test_select_date_outside_displayed_month(self, controller):
        controller.select_date(date(2025, 1, 1))
        assert controller.selected_date == date(2025, 1, 1)
        assert controller.displayed_month == DisplayedMonth(2024, 6)

    def test_select_date_normalises_datetime(self, controller):
        controller.select_date(datetime(2024, 6, 2, 9, 30))
        assert controller.selected_date == date(2024, 6, 2)
        assert type(controller.selected_date) is date

    def test_select_date_rejects_non_dates(self, controller):
        with pytest.raises(InvalidDateError):
            controller.select_date("2024-06-01")
        with pytest.raises(InvalidDateError):
            controller.select_date(None)
        assert controller.selected_date == FIXED_TODAY


class TestEvents:
    """Event operations through the controller."""

    def test_add_then_read_for_selected_date(self, controller):
        controller.add_event(FIXED_TODAY, "Standup")
        controller.add_event(FIXED_TODAY, "Review")

        texts = [e.text for e in controller.get_events_for_selected_date()]
        assert texts == ["Standup", "Review"]

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_text_is_rejected(self, controller, store, text):
        with pytest.raises(EmptyInputError):
            controller.add_event(FIXED_TODAY, text)
        assert len(store) == 0
        assert controller.get_events_for_selected_date() == []

    def test_none_day_uses_selection(self, controller):
        controller.select_date(date(2024, 6, 1))
        controller.add_event(None, "Market")
        assert [e.text for e in controller.get_events(date(2024, 6, 1))] == ["Market"]

    def test_missing_selection_is_reported(self, store, clock):
        controller = CalendarController(event_store=store, today_provider=clock)
        controller._selected_date = None

        with pytest.raises(NoSelectionError):
            controller.add_event(None, "Anything")
        with pytest.raises(NoSelectionError):
            controller.navigate_next_day()
        assert controller.get_events_for_selected_date() == []
        assert len(store) == 0

    def test_meeting_lunch_scenario(self, controller, store):
        day = date(2024, 6, 15)
        controller.add_event(day, "Meeting")
        controller.add_event(day, "Lunch")
        assert [e.text for e in controller.get_events_for_selected_date()] == ["Meeting", "Lunch"]

        remaining = controller.delete_event_by_text(day, "Meeting")
        assert [e.text for e in remaining] == ["Lunch"]

        remaining = controller.delete_event_by_text(day, "Lunch")
        assert remaining == []
        assert day not in store

    def test_delete_by_id_distinguishes_duplicates(self, controller):
        day = date(2024, 6, 10)
        controller.add_event(day, "Call")
        events = controller.add_event(day, "Call")

        remaining = controller.delete_event(day, events[1].id)
        assert [e.id for e in remaining] == [events[0].id]

    def test_delete_unknown_event(self, controller):
        with pytest.raises(EventNotFoundError):
            controller.delete_event(FIXED_TODAY, "missing")
        controller.add_event(FIXED_TODAY, "Real")
        with pytest.raises(EventNotFoundError):
            controller.delete_event_by_text(FIXED_TODAY, "Imaginary")
        assert [e.text for e in controller.get_events_for_selected_date()] == ["Real"]

    def test_returned_lists_are_copies(self, controller, store):
        events = controller.add_event(FIXED_TODAY, "Gym")
        events.clear()
        controller.get_events_for_selected_date().clear()
        assert store.event_count() == 1

    def test_add_with_datetime_keys_the_date(self, controller):
        controller.add_event(datetime(2024, 6, 15, 18, 45), "Dinner")

        assert [e.text for e in controller.get_events_for_selected_date()] == ["Dinner"]
        cell = next(c for c in controller.get_month_grid() if c.date == FIXED_TODAY)
        assert cell.has_events

    def test_delete_with_datetime_finds_the_date(self, controller):
        events = controller.add_event(FIXED_TODAY, "Gym")
        evening = datetime(2024, 6, 15, 21, 0)
        assert controller.delete_event(evening, events[0].id) == []

    @pytest.mark.parametrize("day", ["2024-06-15", 20240615, 1.5])
    def test_add_with_invalid_day_leaves_store(self, controller, store, day):
        controller.add_event(FIXED_TODAY, "Existing")

        with pytest.raises(InvalidDateError):
            controller.add_event(day, "Meeting")
        assert store.event_count() == 1
        assert len(store) == 1
        assert [e.text for e in controller.get_events_for_selected_date()] == ["Existing"]

    @pytest.mark.parametrize("day", ["2024-06-15", 15])
    def test_delete_with_invalid_day_leaves_store(self, controller, store, day):
        event = controller.add_event(FIXED_TODAY, "Existing")[0]

        with pytest.raises(InvalidDateError):
            controller.delete_event(day, event.id)
        with pytest.raises(InvalidDateError):
            controller.delete_event_by_text(day, "Existing")
        assert store.event_count() == 1
        assert len(store) == 1
        assert controller.get_events_for_selected_date() == [event]
