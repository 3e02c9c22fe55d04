import time
from datetime import timedelta, timezone

import pytest

from agenda_timeline.config import get_settings
from agenda_timeline.domain import CalendarEvent

EASTERN = timezone(timedelta(hours=-5))


@pytest.fixture
def eastern():
    return EASTERN


@pytest.fixture
def host_eastern(monkeypatch):
    """Pin the host local zone to a fixed UTC-5 offset."""

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "EST+05")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_event():
    def factory(start, end, title="", all_day=False):
        return CalendarEvent(start=start, end=end, all_day=all_day, title=title or "(no title)")

    return factory
