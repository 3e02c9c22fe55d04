"""Domain models for the day timeline."""

from __future__ import annotations

from .models import CalendarEvent, CalendarSummary, LayoutEntry, TimelineBounds

__all__ = ["CalendarEvent", "CalendarSummary", "LayoutEntry", "TimelineBounds"]
