"""Date-range and series helpers for trend views."""

from __future__ import annotations

from collections import OrderedDict
from datetime import date, timedelta

from habitcore.dates import shift_day_key


def clamp01(n: float) -> float:
    return max(0.0, min(1.0, n))


def enumerate_date_keys(from_key: str, to_key: str) -> list[str]:
    """All day keys from *from_key* to *to_key* inclusive; empty if reversed."""
    out = []
    key = from_key
    while key <= to_key:
        out.append(key)
        key = shift_day_key(key, 1)
    return out


def start_of_iso_week(day_key: str) -> str:
    d = date.fromisoformat(day_key)
    return (d - timedelta(days=d.weekday())).isoformat()


def end_of_iso_week(day_key: str) -> str:
    return shift_day_key(start_of_iso_week(day_key), 6)


def group_by_iso_week(day_keys: list[str]) -> OrderedDict[str, list[str]]:
    """Monday key -> day keys in that week, in input order."""
    by_week: OrderedDict[str, list[str]] = OrderedDict()
    for key in day_keys:
        by_week.setdefault(start_of_iso_week(key), []).append(key)
    return by_week


def rolling_average(series: list[tuple[str, float]], window: int) -> list[tuple[str, float]]:
    """Trailing mean over up to *window* points; early points average what exists."""
    out = []
    buf: list[float] = []
    total = 0.0
    for x, y in series:
        buf.append(y)
        total += y
        if len(buf) > window:
            total -= buf.pop(0)
        out.append((x, total / len(buf) if buf else 0.0))
    return out
