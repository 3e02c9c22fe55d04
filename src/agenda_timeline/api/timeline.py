from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..config import get_settings
from ..core import event_duration_minutes, layout_events, timeline_bounds
from ..data import parse_events
from ..domain import CalendarEvent
from ..services import build_day_view, sort_agenda
from .registry import register_tool
from .serializers import serialize_bounds, serialize_day_view, serialize_event, serialize_layout


@register_tool(
    "event_duration",
    description="Return the duration in minutes of one event record (0 for all-day events).",
    category="timeline",
    tags=("timeline", "duration"),
)
def event_duration(event: dict) -> Dict[str, float]:
    return {"minutes": event_duration_minutes(CalendarEvent.from_record(event))}


@register_tool(
    "timeline_bounds",
    description="Return the start and end hour of the timeline needed to show the given events.",
    category="timeline",
    tags=("timeline", "bounds"),
)
def timeline_bounds_tool(events: list, timezone: Optional[str] = None) -> Dict[str, int]:
    settings = get_settings().timeline
    bounds = timeline_bounds(
        parse_events(events),
        default=settings.default_bounds,
        tz=settings.zone(timezone),
    )
    return serialize_bounds(bounds)


@register_tool(
    "timeline_layout",
    description="Assign side-by-side columns to overlapping timed events.",
    category="timeline",
    tags=("timeline", "layout"),
)
def timeline_layout(events: list) -> List[Dict[str, Any]]:
    return serialize_layout(layout_events(parse_events(events)))


@register_tool(
    "day_view",
    description="Build the full day view: all-day strip, bounds and pixel-positioned event blocks.",
    category="timeline",
    tags=("timeline", "day"),
)
def day_view(events: list, px_per_hour: Optional[int] = None, timezone: Optional[str] = None) -> Dict[str, Any]:
    settings = get_settings().timeline
    view = build_day_view(
        parse_events(events),
        px_per_hour=px_per_hour or settings.px_per_hour,
        default_bounds=settings.default_bounds,
        tz=settings.zone(timezone),
    )
    return serialize_day_view(view)


@register_tool(
    "agenda_events",
    description="Return event records in agenda order: all-day events first, then by start time.",
    category="timeline",
    tags=("timeline", "agenda"),
)
def agenda_events(events: list) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in sort_agenda(parse_events(events))]
