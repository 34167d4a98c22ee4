from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

_TIME_OF_DAY_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def parse_time_of_day(value: Any) -> Optional[int]:
    """Return minutes since midnight, or None when ``value`` is not a time of day.

    Accepted forms:
    - ``"HH:MM"`` or ``"HH:MM:SS"`` (seconds are truncated)
    - ``datetime.time``
    - ``datetime.timedelta`` (mysql-connector returns TIME columns this way)
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value.hour * 60 + value.minute

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds())
        if total_seconds < 0 or total_seconds >= 86400:
            return None
        return total_seconds // 60

    if not isinstance(value, str):
        return None

    m = _TIME_OF_DAY_RE.match(value.strip())
    if not m:
        return None

    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        return None
    return hours * 60 + minutes


def format_time_of_day(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
