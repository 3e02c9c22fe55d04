"""Timestamp parsing and local wall-clock helpers."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional

from ..domain.models import Timestamp
from .constants import MINUTES_PER_HOUR


class InvalidTimestampError(ValueError):
    """Raised when an event timestamp cannot be parsed."""


def parse_timestamp(value: Timestamp) -> datetime:
    """Parse an ISO-8601 string, ``date`` or ``datetime`` into a ``datetime``.

    Embedded UTC offsets are preserved. Values without an offset (including
    bare dates) come back naive and are treated as local wall-clock time.
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise InvalidTimestampError(f"Unparseable timestamp: {value!r}") from exc
    raise InvalidTimestampError(f"Unsupported timestamp value: {value!r}")


def epoch_seconds(value: Timestamp) -> float:
    return parse_timestamp(value).timestamp()


def to_local(value: Timestamp, tz: Optional[tzinfo] = None) -> datetime:
    """Return the instant as wall-clock time in ``tz`` (host local zone when ``None``)."""

    moment = parse_timestamp(value)
    if moment.tzinfo is None:
        if tz is None:
            return moment
        moment = moment.astimezone()
    return moment.astimezone(tz)


def minute_of_day(value: Timestamp, *, tz: Optional[tzinfo] = None) -> int:
    """Minutes since local midnight, e.g. ``14:30`` -> ``870``."""

    local = to_local(value, tz)
    return local.hour * MINUTES_PER_HOUR + local.minute
