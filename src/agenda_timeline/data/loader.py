from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import orjson

from ..domain import CalendarEvent
from ..services.normalize import merge_calendar_events, normalize_events, sort_agenda

logger = logging.getLogger(__name__)


class EventSourceError(ValueError):
    """Raised when an event file cannot be turned into calendar events."""


def _parse_record(item: Any, index: int) -> CalendarEvent:
    if not isinstance(item, dict):
        raise EventSourceError(f"Item {index}: expected an object, got {type(item).__name__}")
    missing = [name for name in ("start", "end") if not item.get(name)]
    if missing:
        raise EventSourceError(f"Item {index}: missing required fields {missing}")
    return CalendarEvent.from_record(item)


def parse_events(
    payload: Any,
    *,
    calendar_id: str = "primary",
    calendar_colors: Optional[Mapping[str, str]] = None,
) -> List[CalendarEvent]:
    """Turn a decoded event file into calendar events.

    Accepted shapes: a list of normalized records (kept in file order), a
    single Google ``{"items": [...]}`` events response, or an object with
    ``events`` mapping calendar ids to events responses plus an optional
    ``calendars`` calendar-list body. Google shapes come back in agenda order.
    """

    if isinstance(payload, list):
        return [_parse_record(item, index) for index, item in enumerate(payload, start=1)]
    if isinstance(payload, dict) and isinstance(payload.get("items"), list):
        try:
            return sort_agenda(normalize_events(payload["items"], calendar_id, calendar_colors))
        except (AttributeError, KeyError, TypeError) as exc:
            raise EventSourceError("Malformed calendar events response") from exc
    if isinstance(payload, dict) and isinstance(payload.get("events"), dict):
        try:
            return merge_calendar_events(payload.get("calendars"), payload["events"])
        except (AttributeError, KeyError, TypeError) as exc:
            raise EventSourceError("Malformed calendar list or events responses") from exc
    raise EventSourceError("Event payload must be a list of records or an object with 'items' or 'events'")


def load_events(path: Union[str, Path], **kwargs: Any) -> List[CalendarEvent]:
    source = Path(path)
    try:
        payload = orjson.loads(source.read_bytes() or b"[]")
    except orjson.JSONDecodeError as exc:
        raise EventSourceError(f"{source}: invalid JSON") from exc
    except OSError as exc:
        raise EventSourceError(f"{source}: {exc.strerror or exc}") from exc

    events = parse_events(payload, **kwargs)
    logger.info("Loaded %d events from %s", len(events), source)
    return events
