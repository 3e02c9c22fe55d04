"""Pixel geometry for a single-day agenda column."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Iterable, List, Optional, Sequence

from ..core import DEFAULT_BOUNDS, PX_PER_HOUR, event_duration_minutes, layout_events, minute_of_day, to_local
from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from ..domain import CalendarEvent, LayoutEntry, TimelineBounds

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TimelineBlock:
    entry: LayoutEntry
    top_px: float
    height_px: float

    @property
    def event(self) -> CalendarEvent:
        return self.entry.event

    @property
    def offset_fraction(self) -> float:
        return self.entry.offset_fraction

    @property
    def width_fraction(self) -> float:
        return self.entry.width_fraction


@dataclass(slots=True)
class DayView:
    bounds: TimelineBounds
    px_per_hour: int
    all_day: List[CalendarEvent] = field(default_factory=list)
    blocks: List[TimelineBlock] = field(default_factory=list)

    @property
    def height_px(self) -> int:
        return self.bounds.hours * self.px_per_hour


def _end_minute(event: CalendarEvent, start_minute: int, tz: Optional[tzinfo]) -> int:
    """End minute on the start's day; anything spilling past midnight pins to 1440."""

    if to_local(event.end, tz).date() > to_local(event.start, tz).date():
        return MINUTES_PER_DAY
    return max(start_minute + 1, minute_of_day(event.end, tz=tz))


def _axis_bounds(timed: Sequence[CalendarEvent], default: TimelineBounds, tz: Optional[tzinfo]) -> TimelineBounds:
    if not timed:
        return default

    earliest = MINUTES_PER_DAY
    latest = 0
    for event in timed:
        start_minute = minute_of_day(event.start, tz=tz)
        earliest = min(earliest, start_minute)
        latest = max(latest, _end_minute(event, start_minute, tz))

    start_hour = earliest // MINUTES_PER_HOUR
    end_hour = max(start_hour + 1, math.ceil(latest / MINUTES_PER_HOUR))
    return TimelineBounds(start_hour=start_hour, end_hour=min(end_hour, 24))


def build_day_view(
    events: Iterable[CalendarEvent],
    *,
    px_per_hour: int = PX_PER_HOUR,
    default_bounds: TimelineBounds = DEFAULT_BOUNDS,
    tz: Optional[tzinfo] = None,
) -> DayView:
    """Split all-day from timed events and position the timed ones on the axis.

    Unlike ``timeline_bounds``, the axis always runs forward: an event that
    ends on a later day extends the axis to midnight, and a zero-length event
    still gets one hour of room.
    """

    events = list(events)
    all_day = [event for event in events if event.all_day]
    timed = [event for event in events if not event.all_day]

    bounds = _axis_bounds(timed, default_bounds, tz)
    origin = bounds.start_hour * MINUTES_PER_HOUR

    blocks = [
        TimelineBlock(
            entry=entry,
            top_px=(minute_of_day(entry.event.start, tz=tz) - origin) * px_per_hour / MINUTES_PER_HOUR,
            height_px=event_duration_minutes(entry.event) * px_per_hour / MINUTES_PER_HOUR,
        )
        for entry in layout_events(timed)
    ]
    logger.debug("Day view: %d all-day, %d timed, bounds %s", len(all_day), len(blocks), bounds)
    return DayView(bounds=bounds, px_per_hour=px_per_hour, all_day=all_day, blocks=blocks)
