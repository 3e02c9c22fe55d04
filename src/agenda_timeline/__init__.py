"""Day timeline layout for calendar agendas."""

from __future__ import annotations

from .core import (
    PX_PER_HOUR,
    InvalidTimestampError,
    event_duration_minutes,
    layout_events,
    minute_of_day,
    timeline_bounds,
)
from .domain import CalendarEvent, CalendarSummary, LayoutEntry, TimelineBounds
from .services import DayView, build_day_view

__all__ = [
    "PX_PER_HOUR",
    "CalendarEvent",
    "CalendarSummary",
    "DayView",
    "InvalidTimestampError",
    "LayoutEntry",
    "TimelineBounds",
    "build_day_view",
    "event_duration_minutes",
    "layout_events",
    "minute_of_day",
    "timeline_bounds",
]
