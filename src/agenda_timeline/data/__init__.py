"""Event sources."""

from __future__ import annotations

from .loader import EventSourceError, load_events, parse_events

__all__ = ["EventSourceError", "load_events", "parse_events"]
