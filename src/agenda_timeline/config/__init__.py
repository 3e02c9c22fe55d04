"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, LoggingSettings, TimelineSettings, get_settings, resolve_timezone

__all__ = ["AppSettings", "LoggingSettings", "TimelineSettings", "get_settings", "resolve_timezone"]
