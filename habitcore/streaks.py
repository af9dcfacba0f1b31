"""Streak, cold-streak and is-new computation over a bounded back-window.

Two definitions of a "done" day exist: the manual completed toggle
(completed_done, the default) and a full score (score_done). Both are
exposed as done tests so callers pick one explicitly.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Callable

from habitcore.dates import shift_day_key
from habitcore.models import DailyEntry, Habit, StreakStats
from habitcore.score import contribution_raw

DEFAULT_WINDOW_DAYS = 366

DoneTest = Callable[[DailyEntry | None, Habit], bool]


def completed_done(entry: DailyEntry | None, habit: Habit) -> bool:
    return bool(entry is not None and entry.completed)


def score_done(entry: DailyEntry | None, habit: Habit) -> bool:
    return contribution_raw(entry, habit) >= 1


DONE_TESTS: dict[str, DoneTest] = {
    "completed": completed_done,
    "score": score_done,
}


def get_done_test(name: str) -> DoneTest:
    try:
        return DONE_TESTS[name]
    except KeyError:
        raise ValueError(f"Unknown done mode: {name!r}") from None


def window_start(anchor_key: str, window_days: int = DEFAULT_WINDOW_DAYS) -> str:
    """First day key inside a window of *window_days* ending at *anchor_key*."""
    return shift_day_key(anchor_key, -(max(1, window_days) - 1))


def index_entries(
    entries: list[DailyEntry],
    from_key: str,
    to_key: str,
) -> dict[str, dict[str, DailyEntry]]:
    """habit_id -> day key -> entry, restricted to [from_key, to_key]."""
    out: dict[str, dict[str, DailyEntry]] = defaultdict(dict)
    for e in entries:
        if from_key <= e.date <= to_key:
            out[e.habit_id][e.date] = e
    return out


def _walk_back(
    habit: Habit,
    by_day: dict[str, DailyEntry],
    anchor_key: str,
    window_days: int,
    start_offset: int,
    want_done: bool,
    done: DoneTest,
) -> int:
    """Count consecutive days whose done-state equals *want_done*, newest first."""
    count = 0
    key = shift_day_key(anchor_key, -start_offset)
    for _ in range(start_offset, window_days):
        if done(by_day.get(key), habit) != want_done:
            break
        count += 1
        key = shift_day_key(key, -1)
    return count


def current_streak(
    habit: Habit,
    by_day: dict[str, DailyEntry],
    anchor_key: str,
    window_days: int = DEFAULT_WINDOW_DAYS,
    done: DoneTest = completed_done,
) -> int:
    """Consecutive done days ending at the anchor, or the day before it if the anchor is not done."""
    start_offset = 0 if done(by_day.get(anchor_key), habit) else 1
    return _walk_back(habit, by_day, anchor_key, window_days, start_offset, True, done)


def cold_streak(
    habit: Habit,
    by_day: dict[str, DailyEntry],
    anchor_key: str,
    window_days: int = DEFAULT_WINDOW_DAYS,
    done: DoneTest = completed_done,
) -> int:
    """Consecutive not-done days strictly before the anchor, in an unbroken gap including the anchor."""
    count = _walk_back(habit, by_day, anchor_key, window_days, 0, False, done)
    return max(0, count - 1)


def done_ever(habit: Habit, by_day: dict[str, DailyEntry], done: DoneTest = completed_done) -> bool:
    return any(done(e, habit) for e in by_day.values())


def _indexed(
    entries: list[DailyEntry], anchor_key: str, window_days: int
) -> dict[str, dict[str, DailyEntry]]:
    return index_entries(entries, window_start(anchor_key, window_days), anchor_key)


def streak_by_habit(
    habits: list[Habit],
    entries: list[DailyEntry],
    anchor_key: str,
    window_days: int = DEFAULT_WINDOW_DAYS,
    done: DoneTest = completed_done,
) -> dict[str, int]:
    idx = _indexed(entries, anchor_key, window_days)
    return {h.id: current_streak(h, idx.get(h.id, {}), anchor_key, window_days, done) for h in habits}


def cold_streak_by_habit(
    habits: list[Habit],
    entries: list[DailyEntry],
    anchor_key: str,
    window_days: int = DEFAULT_WINDOW_DAYS,
    done: DoneTest = completed_done,
) -> dict[str, int]:
    idx = _indexed(entries, anchor_key, window_days)
    return {h.id: cold_streak(h, idx.get(h.id, {}), anchor_key, window_days, done) for h in habits}


def done_ever_by_habit(
    habits: list[Habit],
    entries: list[DailyEntry],
    anchor_key: str,
    window_days: int = DEFAULT_WINDOW_DAYS,
    done: DoneTest = completed_done,
) -> dict[str, bool]:
    idx = _indexed(entries, anchor_key, window_days)
    return {h.id: done_ever(h, idx.get(h.id, {}), done) for h in habits}


def compute_streak_stats(
    habits: list[Habit],
    entries: list[DailyEntry],
    anchor_key: str,
    window_days: int = DEFAULT_WINDOW_DAYS,
    done: DoneTest = completed_done,
) -> dict[str, StreakStats]:
    """Streak, cold streak and is-new flag per habit id for one anchor day."""
    idx = _indexed(entries, anchor_key, window_days)
    out = {}
    for h in habits:
        by_day = idx.get(h.id, {})
        out[h.id] = StreakStats(
            habit_id=h.id,
            streak=current_streak(h, by_day, anchor_key, window_days, done),
            cold_streak=cold_streak(h, by_day, anchor_key, window_days, done),
            is_new=not done_ever(h, by_day, done),
        )
    return out


# ── Segments ──────────────────────────────────────────────────


def streak_segments(
    habit: Habit,
    by_day: dict[str, DailyEntry],
    ordered_keys: list[str],
    done: DoneTest = completed_done,
) -> list[tuple[str, str]]:
    """Runs of consecutive done days over *ordered_keys*, as (start, end) pairs."""
    out = []
    run_start = None
    prev = None
    for key in ordered_keys:
        if done(by_day.get(key), habit):
            if run_start is None:
                run_start = key
        elif run_start is not None:
            out.append((run_start, prev))
            run_start = None
        prev = key
    if run_start is not None:
        out.append((run_start, ordered_keys[-1]))
    return out


def longest_streak(segments: list[tuple[str, str]]) -> int:
    best = 0
    for start, end in segments:
        best = max(best, (date.fromisoformat(end) - date.fromisoformat(start)).days + 1)
    return best
