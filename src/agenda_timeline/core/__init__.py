"""Pure time arithmetic and layout for the day timeline."""

from __future__ import annotations

from .bounds import DEFAULT_BOUNDS, timeline_bounds
from .constants import PX_PER_HOUR
from .duration import event_duration_minutes
from .layout import layout_events
from .timestamps import InvalidTimestampError, epoch_seconds, minute_of_day, parse_timestamp, to_local

__all__ = [
    "DEFAULT_BOUNDS",
    "InvalidTimestampError",
    "PX_PER_HOUR",
    "epoch_seconds",
    "event_duration_minutes",
    "layout_events",
    "minute_of_day",
    "parse_timestamp",
    "timeline_bounds",
    "to_local",
]
