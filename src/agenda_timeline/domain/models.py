from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

Timestamp = Union[str, datetime, date]

DEFAULT_CALENDAR_COLOR = "#4285f4"
UNTITLED_EVENT = "(no title)"


def _iso(value: Timestamp) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


@dataclass(slots=True)
class CalendarEvent:
    """A normalized event as handed over by an upstream calendar source.

    ``start`` and ``end`` are kept exactly as supplied; they are parsed lazily
    by the layout functions. For all-day events they are calendar dates and
    ``end`` is exclusive.
    """

    start: Timestamp
    end: Timestamp
    all_day: bool = False
    id: Optional[str] = None
    title: str = UNTITLED_EVENT
    description: str = ""
    location: str = ""
    calendar_id: Optional[str] = None
    calendar_color: str = DEFAULT_CALENDAR_COLOR
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        return cls(
            start=record["start"],
            end=record["end"],
            all_day=bool(record.get("allDay", False)),
            id=str(record["id"]) if record.get("id") is not None else None,
            title=record.get("title") or UNTITLED_EVENT,
            description=record.get("description") or "",
            location=record.get("location") or "",
            calendar_id=record.get("calendarId"),
            calendar_color=record.get("calendarColor") or DEFAULT_CALENDAR_COLOR,
            metadata=dict(record.get("metadata") or {}),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "start": _iso(self.start),
            "end": _iso(self.end),
            "allDay": self.all_day,
            "description": self.description,
            "location": self.location,
            "calendarId": self.calendar_id,
            "calendarColor": self.calendar_color,
            "metadata": self.metadata,
        }


@dataclass(slots=True)
class CalendarSummary:
    id: str
    name: str
    primary: bool = False
    background_color: str = DEFAULT_CALENDAR_COLOR

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "primary": self.primary,
            "backgroundColor": self.background_color,
        }


@dataclass(frozen=True, slots=True)
class TimelineBounds:
    """Inclusive start hour and exclusive end hour of the visible timeline."""

    start_hour: int
    end_hour: int

    @property
    def hours(self) -> int:
        return self.end_hour - self.start_hour

    def to_record(self) -> Dict[str, int]:
        return {"startHour": self.start_hour, "endHour": self.end_hour}


@dataclass(slots=True)
class LayoutEntry:
    """Column slot assigned to one event inside its overlap group."""

    event: CalendarEvent
    column: int
    total_columns: int

    @property
    def width_fraction(self) -> float:
        return 1 / self.total_columns

    @property
    def offset_fraction(self) -> float:
        return self.column / self.total_columns
