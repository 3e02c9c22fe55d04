"""Map Google Calendar API resources onto domain records."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..core.timestamps import epoch_seconds
from ..domain import CalendarEvent, CalendarSummary
from ..domain.models import DEFAULT_CALENDAR_COLOR, UNTITLED_EVENT


def normalize_event(
    item: Mapping[str, Any],
    calendar_id: str = "primary",
    calendar_colors: Optional[Mapping[str, str]] = None,
) -> CalendarEvent:
    """Convert one ``events.list`` item; events without ``dateTime`` are all-day."""

    start = item.get("start") or {}
    end = item.get("end") or {}
    colors = calendar_colors or {}
    return CalendarEvent(
        id=item.get("id"),
        title=item.get("summary") or UNTITLED_EVENT,
        start=start.get("dateTime") or start.get("date"),
        end=end.get("dateTime") or end.get("date"),
        all_day=not start.get("dateTime"),
        description=item.get("description") or "",
        location=item.get("location") or "",
        calendar_id=calendar_id,
        calendar_color=colors.get(calendar_id) or DEFAULT_CALENDAR_COLOR,
    )


def normalize_events(
    items: Iterable[Mapping[str, Any]],
    calendar_id: str = "primary",
    calendar_colors: Optional[Mapping[str, str]] = None,
) -> List[CalendarEvent]:
    return [normalize_event(item, calendar_id, calendar_colors) for item in items]


def normalize_calendar(item: Mapping[str, Any]) -> CalendarSummary:
    identifier = str(item["id"])
    return CalendarSummary(
        id=identifier,
        name=item.get("summary") or identifier,
        primary=bool(item.get("primary", False)),
        background_color=item.get("backgroundColor") or DEFAULT_CALENDAR_COLOR,
    )


def calendar_colors(calendars: Iterable[CalendarSummary]) -> Dict[str, str]:
    return {calendar.id: calendar.background_color for calendar in calendars}


def sort_agenda(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    """All-day events first, then ascending start; ties keep their order."""

    return sorted(events, key=lambda event: (not event.all_day, epoch_seconds(event.start)))


def merge_calendar_events(
    calendar_list: Optional[Mapping[str, Any]],
    event_responses: Mapping[str, Mapping[str, Any]],
) -> List[CalendarEvent]:
    """Flatten per-calendar events responses into one agenda.

    Colours come from the ``calendarList`` body; calendars missing from it
    fall back to the default colour.
    """

    summaries = [normalize_calendar(item) for item in (calendar_list or {}).get("items") or []]
    colors = calendar_colors(summaries)
    merged: list[CalendarEvent] = []
    for calendar_id, response in event_responses.items():
        merged.extend(normalize_events(response.get("items") or [], calendar_id, colors))
    return sort_agenda(merged)
