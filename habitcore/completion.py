"""Completion gating: whether logged values satisfy a habit's thresholds.

Completion is a harder gate than the score. When both quantity and time
thresholds are configured, each must pass on its own.
"""

from __future__ import annotations

from dataclasses import dataclass

from habitcore.legacy import DimensionRule, EntryReading, read_entry, scoring_profile
from habitcore.models import DailyEntry, Habit, finite_or_none


@dataclass(frozen=True)
class NextEntry:
    completed: bool
    value: float | None

    def to_dict(self) -> dict:
        return {"completed": self.completed, "value": self.value}


def meets_dimension(rule: DimensionRule, value: float | None) -> bool:
    """Inclusive bounds check for one dimension. min > max is never satisfiable."""
    if value is None:
        return False
    lo = rule.lower_bound
    hi = rule.max
    if lo is not None and hi is not None:
        if lo > hi:
            return False
        return lo <= value <= hi
    if lo is not None:
        return value >= lo
    if hi is not None:
        return value <= hi
    return True


def _meets_reading(habit: Habit, reading: EntryReading) -> bool:
    profile = scoring_profile(habit)
    has_q = profile.quantity.configured
    has_t = profile.time.configured
    q_ok = meets_dimension(profile.quantity, reading.quantity)
    t_ok = meets_dimension(profile.time, reading.minutes)

    if has_q and has_t:
        return q_ok and t_ok
    if has_q:
        return q_ok
    if has_t:
        return t_ok
    return True


def _reading_for_value(habit: Habit, value: float | None) -> EntryReading:
    # A single number counts as quantity unless only time thresholds exist.
    profile = scoring_profile(habit)
    if profile.time.configured and not profile.quantity.configured:
        return EntryReading(minutes=value)
    return EntryReading(quantity=value)


def meets_completion_thresholds(habit: Habit, candidate: DailyEntry | float | int | None) -> bool:
    """Check a single numeric value, or a whole entry, against the habit's thresholds."""
    if candidate is None:
        return False
    if isinstance(candidate, DailyEntry):
        return _meets_reading(habit, read_entry(candidate))

    if habit.kind == "boolean":
        return False
    value = finite_or_none(candidate)
    if value is None:
        return False
    return _meets_reading(habit, _reading_for_value(habit, value))


def requires_value_for_completion(habit: Habit) -> bool:
    return scoring_profile(habit).has_thresholds


def compute_next_entry_on_set_value(
    habit: Habit,
    current_completed: bool | None,
    next_value: float | None,
) -> NextEntry:
    """Return the completed/value pair to persist after a value is set.

    With thresholds configured, completion follows them; otherwise the
    existing manual completed flag is kept.
    """
    if requires_value_for_completion(habit):
        value = finite_or_none(next_value)
        completed = _meets_reading(habit, _reading_for_value(habit, value))
    else:
        completed = bool(current_completed)
    return NextEntry(completed=completed, value=next_value)
