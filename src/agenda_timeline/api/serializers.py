from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..domain import CalendarEvent, LayoutEntry, TimelineBounds
from ..services.day_view import DayView
from .models import BoundsPayload, DayViewPayload, EventPayload, LayoutEntryPayload


def serialize_event(event: CalendarEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_bounds(bounds: TimelineBounds) -> Dict[str, Any]:
    return BoundsPayload.from_domain(bounds).model_dump(by_alias=True)


def serialize_layout(entries: Iterable[LayoutEntry]) -> List[Dict[str, Any]]:
    return [LayoutEntryPayload.from_domain(entry).model_dump(by_alias=True) for entry in entries]


def serialize_day_view(view: DayView) -> Dict[str, Any]:
    return DayViewPayload.from_domain(view).model_dump(by_alias=True)
