from __future__ import annotations

PX_PER_HOUR = 40
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

DEFAULT_START_HOUR = 8
DEFAULT_END_HOUR = 18
