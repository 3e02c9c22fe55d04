from __future__ import annotations

from ..domain import CalendarEvent
from .timestamps import epoch_seconds


def event_duration_minutes(event: CalendarEvent) -> float:
    """Duration of a timed event in minutes; all-day events report ``0``.

    A reversed interval (``end`` before ``start``) yields the absolute span.
    """

    if event.all_day:
        return 0
    return abs(epoch_seconds(event.end) - epoch_seconds(event.start)) / 60
