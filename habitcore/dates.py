"""Day keys: calendar-day identifiers shifted by a configurable day start."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, tzinfo

logger = logging.getLogger(__name__)

_DAY_START_RE = re.compile(r"([0-9]{2}):([0-9]{2})")


def parse_day_start(value: str) -> tuple[int, int]:
    """Parse 'HH:mm' into (hours, minutes).

    Malformed input falls back to (0, 0); hours and minutes are clamped
    independently to 0..23 and 0..59.
    """
    match = _DAY_START_RE.fullmatch(value or "")
    if not match:
        logger.debug("Malformed day start %r, using 00:00", value)
        return 0, 0
    hours = min(23, max(0, int(match.group(1))))
    minutes = min(59, max(0, int(match.group(2))))
    return hours, minutes


def to_day_key(ts: datetime | str, day_start: str, tz: tzinfo | None = None) -> str:
    """Return the YYYY-MM-DD day key that *ts* belongs to.

    A day runs from *day_start* to *day_start* of the next calendar day.
    Aware timestamps are converted to *tz* (local time when None); naive
    timestamps are taken as already local. Unparseable ISO strings raise
    ValueError.
    """
    if isinstance(ts, str):
        ts = datetime.fromisoformat(ts)
    if ts.tzinfo is not None:
        ts = ts.astimezone(tz)
    hours, minutes = parse_day_start(day_start)
    shifted = ts - timedelta(hours=hours, minutes=minutes)
    return shifted.date().isoformat()


def is_future(
    day_key: str,
    day_start: str,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> bool:
    """True if *day_key* is after today's key. Keys are zero-padded, so they sort by date."""
    if now is None:
        now = datetime.now(tz)
    return day_key > to_day_key(now, day_start, tz)


def shift_day_key(day_key: str, days: int) -> str:
    """Move a day key by whole calendar days."""
    return (date.fromisoformat(day_key) + timedelta(days=days)).isoformat()
