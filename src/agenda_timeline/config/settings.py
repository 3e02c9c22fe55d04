from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import tzinfo
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from platformdirs import user_log_dir

from ..core.constants import DEFAULT_END_HOUR, DEFAULT_START_HOUR, PX_PER_HOUR
from ..domain import TimelineBounds

load_dotenv()

APP_NAME = "agenda-timeline"
APP_AUTHOR = "AgendaTimeline"


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """IANA zone for ``name``; ``None`` means the host local zone.

    Raises ``ZoneInfoNotFoundError`` for unknown names and ``ValueError`` for
    malformed ones.
    """

    return ZoneInfo(name) if name else None


@dataclass(frozen=True)
class TimelineSettings:
    px_per_hour: int
    default_start_hour: int
    default_end_hour: int
    timezone: Optional[str]

    @property
    def default_bounds(self) -> TimelineBounds:
        return TimelineBounds(start_hour=self.default_start_hour, end_hour=self.default_end_hour)

    @property
    def tzinfo(self) -> Optional[tzinfo]:
        return resolve_timezone(self.timezone)

    def zone(self, override: Optional[str] = None) -> Optional[tzinfo]:
        return resolve_timezone(override or self.timezone)


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path


@dataclass(frozen=True)
class AppSettings:
    timeline: TimelineSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _default_hours() -> Tuple[int, int]:
    start_hour = _int_from_env("AGENDA_DEFAULT_START_HOUR", DEFAULT_START_HOUR)
    end_hour = _int_from_env("AGENDA_DEFAULT_END_HOUR", DEFAULT_END_HOUR)
    if not 0 <= start_hour < end_hour <= 24:
        return DEFAULT_START_HOUR, DEFAULT_END_HOUR
    return start_hour, end_hour


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    start_hour, end_hour = _default_hours()
    timeline = TimelineSettings(
        px_per_hour=_int_from_env("AGENDA_PX_PER_HOUR", PX_PER_HOUR),
        default_start_hour=start_hour,
        default_end_hour=end_hour,
        timezone=os.getenv("AGENDA_TIMEZONE") or None,
    )

    logging_settings = LoggingSettings(
        level=os.getenv("AGENDA_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("AGENDA_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    return AppSettings(timeline=timeline, logging=logging_settings)
