"""Shared fixtures for the Desk Calendar test suite."""

from datetime import date

import pytest

from backend.calendar_state import CalendarController
from backend.debug import set_debug
from backend.event_store import EventStore
from backend.timezone_utils import set_timezone


FIXED_TODAY = date(2024, 6, 15)


class FakeClock:
    """Mutable stand-in for the real-date provider."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture(autouse=True)
def _reset_module_state():
    yield
    set_debug(False)
    set_timezone(None)


@pytest.fixture
def clock():
    return FakeClock(FIXED_TODAY)


@pytest.fixture
def store():
    return EventStore()


@pytest.fixture
def controller(store, clock):
    return CalendarController(event_store=store, today_provider=clock)
