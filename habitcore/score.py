"""Contribution scoring and per-day aggregation.

contribution_raw maps one habit's entry to [0, 1.1]; the extra 0.1 keeps
overachievement visible until compute_day_summary caps each habit at 100%.
"""

from __future__ import annotations

import math

from habitcore.legacy import DimensionRule, read_entry, scoring_profile
from habitcore.models import DailyEntry, DaySummary, Habit, HabitBreakdown, finite_or_none
from habitcore.trends import enumerate_date_keys

MAX_RAW = 1.1


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def normalize(value: float, lo: float | None, hi: float | None) -> float:
    """Scale *value* between *lo* and *hi*.

    lo defaults to 0 and hi to max(lo, value), so a value with no ceiling is
    its own ceiling. A non-positive span is replaced by 1.
    """
    lo_v = 0.0 if lo is None else lo
    hi_v = max(lo_v, value) if hi is None else hi
    span = hi_v - lo_v
    if span <= 0:
        span = 1.0
    return clamp((value - lo_v) / span, 0.0, MAX_RAW)


def dimension_score(rule: DimensionRule, value: float | None) -> float | None:
    """Score one dimension, or None when nothing was logged for it."""
    if value is None:
        return None
    if rule.target is not None:
        ratio = 0.0 if rule.target == 0 else value / rule.target
        return clamp(ratio, 0.0, MAX_RAW)
    return normalize(value, rule.min, rule.max)


def contribution_raw(entry: DailyEntry | None, habit: Habit) -> float:
    if entry is None:
        return 0.0
    profile = scoring_profile(habit)
    reading = read_entry(entry)

    q = dimension_score(profile.quantity, reading.quantity)
    t = dimension_score(profile.time, reading.minutes)

    if profile.mode == "quantity":
        score = q
    elif profile.mode == "time":
        score = t
    elif q is not None and t is not None:
        score = (q + t) / 2
    else:
        score = q if q is not None else t

    if score is None:
        return 1.0 if reading.completed else 0.0
    return score


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_day_summary(day_key: str, habits: list[Habit], entries: list[DailyEntry]) -> DaySummary:
    """Aggregate weighted contributions of active habits into a 0..100 score."""
    entry_by_habit = {e.habit_id: e for e in entries}

    sum_weighted = 0.0
    sum_max = 0.0
    by_habit = []
    for h in habits:
        if h.is_archived:
            continue
        e = entry_by_habit.get(h.id)
        raw = contribution_raw(e, h)
        sum_weighted += raw * h.weight
        sum_max += h.weight

        completed = False
        value = None
        if e is not None:
            completed = bool(e.completed)
            if scoring_profile(h).has_thresholds:
                completed = completed or raw >= 1
            value = read_entry(e).display_value
            if value is None:
                value = finite_or_none(e.value)

        by_habit.append(HabitBreakdown(
            habit_id=h.id,
            contribution=round_half_up(clamp(raw, 0.0, 1.0) * 100),
            completed=completed,
            value=value,
        ))

    total = 0 if sum_max == 0 else round_half_up(clamp(sum_weighted / sum_max, 0.0, 1.0) * 100)
    return DaySummary(date=day_key, total_score=total, by_habit=by_habit)


def daily_scores(
    from_key: str,
    to_key: str,
    habits: list[Habit],
    entries: list[DailyEntry],
) -> list[DaySummary]:
    """Day summaries for every key in [from_key, to_key], oldest first."""
    by_day: dict[str, list[DailyEntry]] = {}
    for e in entries:
        by_day.setdefault(e.date, []).append(e)
    return [
        compute_day_summary(key, habits, by_day.get(key, []))
        for key in enumerate_date_keys(from_key, to_key)
    ]
