"""Composition of the core layout functions for agenda consumers."""

from __future__ import annotations

from .day_view import DayView, TimelineBlock, build_day_view
from .normalize import (
    calendar_colors,
    merge_calendar_events,
    normalize_calendar,
    normalize_event,
    normalize_events,
    sort_agenda,
)

__all__ = [
    "DayView",
    "TimelineBlock",
    "build_day_view",
    "calendar_colors",
    "merge_calendar_events",
    "normalize_calendar",
    "normalize_event",
    "normalize_events",
    "sort_agenda",
]
