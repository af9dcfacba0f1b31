"""Loading storage exports and refreshing the derived summary.

Habits come from habits.yaml (a list, or a mapping with a ``habits`` key) and
entries from entries.json (a list, or a mapping with an ``entries`` key).
The computed report is cached in summary.json; nothing here writes habits
or entries.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from habitcore.fileio import read_json, read_yaml, write_json_atomic
from habitcore.models import DailyEntry, Habit, Settings
from habitcore.score import compute_day_summary
from habitcore.streaks import compute_streak_stats, get_done_test, window_start
from habitcore.workspace import (
    entries_path,
    habits_path,
    load_settings,
    summary_path,
    today_key,
    workspace_root,
)

logger = logging.getLogger(__name__)


def _records(data: Any, key: str) -> list[dict[str, Any]]:
    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        return []
    return [r for r in data if isinstance(r, dict)]


def load_habits(root: Path | None = None) -> list[Habit]:
    if root is None:
        root = workspace_root()
    return [Habit.from_dict(d) for d in _records(read_yaml(habits_path(root)), "habits")]


def load_entries(
    root: Path | None = None,
    from_key: str | None = None,
    to_key: str | None = None,
) -> list[DailyEntry]:
    """Entries whose day key falls in the inclusive [from_key, to_key] range."""
    if root is None:
        root = workspace_root()
    entries = [DailyEntry.from_dict(d) for d in _records(read_json(entries_path(root)), "entries")]
    if from_key is not None:
        entries = [e for e in entries if e.date >= from_key]
    if to_key is not None:
        entries = [e for e in entries if e.date <= to_key]
    return entries


def build_report(
    day_key: str,
    habits: list[Habit],
    entries: list[DailyEntry],
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Day summary for *day_key* plus per-habit streak stats anchored there."""
    if settings is None:
        settings = Settings()
    summary = compute_day_summary(day_key, habits, [e for e in entries if e.date == day_key])
    report: dict[str, Any] = {
        "date": day_key,
        "dayStart": settings.day_start,
        "summary": summary.to_dict(),
    }
    if settings.show_streaks:
        done = get_done_test(settings.done_mode)
        stats = compute_streak_stats(habits, entries, day_key, settings.streak_window_days, done)
        report["doneMode"] = settings.done_mode
        report["streaks"] = {hid: s.to_dict() for hid, s in stats.items()}
    return report


def refresh_summary(root: Path | None = None, day_key: str | None = None) -> dict[str, Any]:
    """Recompute the report for *day_key* (default today) and save it to summary.json."""
    if root is None:
        root = workspace_root()
    settings = load_settings(root)
    if day_key is None:
        day_key = today_key(root, settings)

    habits = load_habits(root)
    entries = load_entries(root, window_start(day_key, settings.streak_window_days), day_key)
    logger.info("Refreshing summary for %s: %d habits, %d entries", day_key, len(habits), len(entries))

    report = build_report(day_key, habits, entries, settings)
    write_json_atomic(summary_path(root), report)
    return report


def load_summary(root: Path | None = None) -> dict[str, Any] | None:
    """Load the cached report from summary.json."""
    if root is None:
        root = workspace_root()
    data = read_json(summary_path(root))
    return data if isinstance(data, dict) else None
