from __future__ import annotations

import logging
import math
from datetime import tzinfo
from typing import Iterable, Optional

from ..domain import CalendarEvent, TimelineBounds
from .constants import DEFAULT_END_HOUR, DEFAULT_START_HOUR, MINUTES_PER_HOUR
from .timestamps import minute_of_day

logger = logging.getLogger(__name__)

DEFAULT_BOUNDS = TimelineBounds(start_hour=DEFAULT_START_HOUR, end_hour=DEFAULT_END_HOUR)


def timeline_bounds(
    events: Iterable[CalendarEvent],
    *,
    default: TimelineBounds = DEFAULT_BOUNDS,
    tz: Optional[tzinfo] = None,
) -> TimelineBounds:
    """Hour range covering every timed event.

    The start hour is floored and the end hour ceiled, except that an event
    ending exactly on the hour does not pull in the following hour. All-day
    events are ignored; with no timed events ``default`` is returned.

    Only the local hour and minute of each timestamp are considered, so an
    event ending on a later day contributes that day's clock time.
    """

    timed = [event for event in events if not event.all_day]
    if not timed:
        logger.debug("No timed events; using default bounds %s", default)
        return default

    earliest = min(minute_of_day(event.start, tz=tz) for event in timed)
    latest = max(minute_of_day(event.end, tz=tz) for event in timed)

    start_hour = earliest // MINUTES_PER_HOUR
    if latest % MINUTES_PER_HOUR == 0:
        end_hour = latest // MINUTES_PER_HOUR
    else:
        end_hour = math.ceil(latest / MINUTES_PER_HOUR)
    return TimelineBounds(start_hour=start_hour, end_hour=end_hour)
