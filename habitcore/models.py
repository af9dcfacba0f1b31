"""Typed dataclasses for the habitscore data model.

All stored records use from_dict/to_dict for JSON/YAML serialization.
camelCase in stored data is mapped to snake_case in Python.
Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

HABIT_KINDS = ("boolean", "quantified", "time")
SCORE_MODES = ("quantity", "time", "both")


def finite_or_none(value: Any) -> float | None:
    """Return *value* as a float, or None when it is absent or not a finite number.

    Booleans are not numbers here: a legacy ``value: true`` means "done", not 1.
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def _kind(value: Any) -> str | None:
    return value if value in HABIT_KINDS else None


def _put(d: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        d[key] = value


def _day_start(value: Any) -> str:
    # YAML 1.1 reads an unquoted 16:00 as the base-60 integer 960.
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value // 60:02d}:{value % 60:02d}"
    if value is None:
        return "00:00"
    return str(value)


# ── Habit ─────────────────────────────────────────────────────


@dataclass
class Habit:
    id: str = ""
    title: str = ""
    weight: float = 1.0
    score_mode: str | None = None  # quantity, time, both
    min_quantity: float | None = None
    max_quantity: float | None = None
    min_time_minutes: float | None = None
    max_time_minutes: float | None = None
    quantity_unit: str | None = None
    tags: list[str] = field(default_factory=list)
    created_at: str = ""
    archived_at: str | None = None
    icon: str | None = None
    color: str | None = None
    # legacy shape, read only
    kind: str | None = None  # boolean, quantified, time
    unit: str | None = None
    target: float | None = None
    min: float | None = None
    max: float | None = None

    @property
    def is_archived(self) -> bool:
        return bool(self.archived_at)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Habit:
        weight = finite_or_none(d.get("weight"))
        tags: list[str] = []
        for t in d.get("tags") or []:
            t = str(t)
            if t not in tags:
                tags.append(t)
        mode = d.get("scoreMode")
        return cls(
            id=str(d.get("id", "")),
            title=str(d.get("title", "")),
            weight=1.0 if weight is None else max(0.0, weight),
            score_mode=mode if mode in SCORE_MODES else None,
            min_quantity=finite_or_none(d.get("minQuantity")),
            max_quantity=finite_or_none(d.get("maxQuantity")),
            min_time_minutes=finite_or_none(d.get("minTimeMinutes")),
            max_time_minutes=finite_or_none(d.get("maxTimeMinutes")),
            quantity_unit=d.get("quantityUnit"),
            tags=tags,
            created_at=str(d.get("createdAt", "")),
            archived_at=d.get("archivedAt") or None,
            icon=d.get("icon"),
            color=d.get("color"),
            kind=_kind(d.get("kind")),
            unit=d.get("unit"),
            target=finite_or_none(d.get("target")),
            min=finite_or_none(d.get("min")),
            max=finite_or_none(d.get("max")),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "weight": self.weight,
            "createdAt": self.created_at,
        }
        if self.tags:
            d["tags"] = list(self.tags)
        _put(d, "scoreMode", self.score_mode)
        _put(d, "minQuantity", self.min_quantity)
        _put(d, "maxQuantity", self.max_quantity)
        _put(d, "minTimeMinutes", self.min_time_minutes)
        _put(d, "maxTimeMinutes", self.max_time_minutes)
        _put(d, "quantityUnit", self.quantity_unit)
        _put(d, "archivedAt", self.archived_at)
        _put(d, "icon", self.icon)
        _put(d, "color", self.color)
        _put(d, "kind", self.kind)
        _put(d, "unit", self.unit)
        _put(d, "target", self.target)
        _put(d, "min", self.min)
        _put(d, "max", self.max)
        return d


# ── Entries ───────────────────────────────────────────────────


@dataclass
class LogSession:
    """One discrete logging session inside a day."""

    id: str = ""
    quantity: float | None = None
    start_minutes: float | None = None
    end_minutes: float | None = None
    edited_at: str | None = None

    def duration_minutes(self) -> float | None:
        start = finite_or_none(self.start_minutes)
        end = finite_or_none(self.end_minutes)
        if start is None or end is None:
            return None
        return max(0.0, end - start)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> LogSession:
        return cls(
            id=str(d.get("id", "")),
            quantity=finite_or_none(d.get("quantity")),
            start_minutes=finite_or_none(d.get("startMinutes")),
            end_minutes=finite_or_none(d.get("endMinutes")),
            edited_at=d.get("editedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "quantity": self.quantity,
            "startMinutes": self.start_minutes,
            "endMinutes": self.end_minutes,
        }
        _put(d, "editedAt", self.edited_at)
        return d


@dataclass
class DailyEntry:
    habit_id: str = ""
    date: str = ""  # day key, YYYY-MM-DD
    completed: bool | None = None
    quantity: float | None = None
    start_minutes: float | None = None
    end_minutes: float | None = None
    logs: list[LogSession] = field(default_factory=list)
    # legacy
    value: float | bool | None = None
    kind_at_entry: str | None = None
    note: str | None = None
    edited_at: str | None = None

    def duration_minutes(self) -> float | None:
        start = finite_or_none(self.start_minutes)
        end = finite_or_none(self.end_minutes)
        if start is None or end is None:
            return None
        return max(0.0, end - start)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DailyEntry:
        completed = d.get("completed")
        raw_value = d.get("value")
        value = raw_value if isinstance(raw_value, bool) else finite_or_none(raw_value)
        return cls(
            habit_id=str(d.get("habitId", "")),
            date=str(d.get("date", "")),
            completed=completed if isinstance(completed, bool) else None,
            quantity=finite_or_none(d.get("quantity")),
            start_minutes=finite_or_none(d.get("startMinutes")),
            end_minutes=finite_or_none(d.get("endMinutes")),
            logs=[LogSession.from_dict(l) for l in (d.get("logs") or []) if isinstance(l, dict)],
            value=value,
            kind_at_entry=_kind(d.get("kindAtEntry")),
            note=d.get("note"),
            edited_at=d.get("editedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"habitId": self.habit_id, "date": self.date}
        _put(d, "completed", self.completed)
        _put(d, "quantity", self.quantity)
        _put(d, "startMinutes", self.start_minutes)
        _put(d, "endMinutes", self.end_minutes)
        if self.logs:
            d["logs"] = [l.to_dict() for l in self.logs]
        _put(d, "value", self.value)
        _put(d, "kindAtEntry", self.kind_at_entry)
        _put(d, "note", self.note)
        _put(d, "editedAt", self.edited_at)
        return d


# ── Derived ───────────────────────────────────────────────────


@dataclass
class HabitBreakdown:
    habit_id: str = ""
    contribution: int = 0  # 0..100
    completed: bool = False
    value: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "habitId": self.habit_id,
            "contribution": self.contribution,
            "completed": self.completed,
            "value": self.value,
        }


@dataclass
class DaySummary:
    date: str = ""
    total_score: int = 0  # 0..100
    by_habit: list[HabitBreakdown] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "totalScore": self.total_score,
            "byHabit": [b.to_dict() for b in self.by_habit],
        }


@dataclass
class StreakStats:
    habit_id: str = ""
    streak: int = 0
    cold_streak: int = 0
    is_new: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "habitId": self.habit_id,
            "streak": self.streak,
            "coldStreak": self.cold_streak,
            "isNew": self.is_new,
        }


# ── Settings ──────────────────────────────────────────────────


@dataclass
class Settings:
    day_start: str = "00:00"
    timezone: str | None = None
    show_streaks: bool = True
    streak_window_days: int = 366
    done_mode: str = "completed"  # completed, score

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        window = finite_or_none(d.get("streak_window_days", d.get("streakWindowDays")))
        show = d.get("show_streaks", d.get("showStreaks"))
        return cls(
            day_start=_day_start(d.get("day_start", d.get("dayStart"))),
            timezone=d.get("timezone") or None,
            show_streaks=show if isinstance(show, bool) else True,
            streak_window_days=366 if window is None else max(1, int(window)),
            done_mode=str(d.get("done_mode", d.get("doneMode", "completed"))).strip().lower(),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "day_start": self.day_start,
            "show_streaks": self.show_streaks,
            "streak_window_days": self.streak_window_days,
            "done_mode": self.done_mode,
        }
        _put(d, "timezone", self.timezone)
        return d
