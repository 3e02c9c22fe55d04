"""Side-by-side column layout for overlapping timed events."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..domain import CalendarEvent, LayoutEntry
from .timestamps import epoch_seconds

logger = logging.getLogger(__name__)

Span = Tuple[float, float]


def _overlap_groups(order: Sequence[int], spans: Sequence[Span]) -> List[List[int]]:
    """Split start-ordered indices into runs of transitively overlapping events.

    An event joins the current run when it starts before the latest end seen
    so far in that run, not merely before the previous event's end.
    """

    groups: list[list[int]] = []
    current = [order[0]]
    group_end = spans[order[0]][1]
    for index in order[1:]:
        start, end = spans[index]
        if start < group_end:
            current.append(index)
            group_end = max(group_end, end)
        else:
            groups.append(current)
            current = [index]
            group_end = end
    groups.append(current)
    return groups


def _first_free_lane(lanes: Sequence[float], start: float) -> int:
    for column, lane_end in enumerate(lanes):
        if start >= lane_end:
            return column
    return len(lanes)


def layout_events(events: Iterable[CalendarEvent]) -> List[LayoutEntry]:
    """Assign every event a column within its overlap group.

    Entries come back in input order and reference the input events. Events
    are processed by ascending start (stable for ties), and each one takes the
    lowest-index column whose previous occupant has ended by its start.
    ``total_columns`` is the number of columns its group needed.
    """

    events = list(events)
    if not events:
        return []

    spans = [(epoch_seconds(event.start), epoch_seconds(event.end)) for event in events]
    order = sorted(range(len(events)), key=lambda index: spans[index][0])

    entries: list[Optional[LayoutEntry]] = [None] * len(events)
    groups = _overlap_groups(order, spans)
    for group in groups:
        lanes: list[float] = []
        for index in group:
            start, end = spans[index]
            column = _first_free_lane(lanes, start)
            if column == len(lanes):
                lanes.append(end)
            else:
                lanes[column] = end
            entries[index] = LayoutEntry(event=events[index], column=column, total_columns=0)

        for index in group:
            entries[index].total_columns = len(lanes)

    logger.debug("Laid out %d events in %d overlap groups", len(events), len(groups))
    return entries  # type: ignore[return-value]
