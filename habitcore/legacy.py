"""Translation of legacy and unified habit shapes into one scoring view.

Habits may be stored in the old ``kind``/``target``/``min``/``max`` shape or in
the unified per-dimension threshold shape, and entries may carry a legacy
``value`` whose meaning depends on ``kindAtEntry``. Everything downstream
(score, completion, streaks) reads only ScoringProfile and EntryReading.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from habitcore.models import SCORE_MODES, DailyEntry, Habit, finite_or_none


@dataclass(frozen=True)
class DimensionRule:
    """Thresholds for one dimension (quantity or minutes)."""

    min: float | None = None
    max: float | None = None
    target: float | None = None

    @property
    def configured(self) -> bool:
        return self.min is not None or self.max is not None or self.target is not None

    @property
    def lower_bound(self) -> float | None:
        """Lower bound for completion; a legacy target acts as a minimum."""
        return self.min if self.min is not None else self.target


@dataclass(frozen=True)
class ScoringProfile:
    quantity: DimensionRule = field(default_factory=DimensionRule)
    time: DimensionRule = field(default_factory=DimensionRule)
    mode: str = "both"

    @property
    def has_thresholds(self) -> bool:
        return self.quantity.configured or self.time.configured


@dataclass(frozen=True)
class EntryReading:
    """What an entry actually logged, per dimension. None means not logged."""

    quantity: float | None = None
    minutes: float | None = None
    completed: bool = False

    @property
    def display_value(self) -> float | None:
        if self.quantity is not None:
            return self.quantity
        return self.minutes


def _rule(lo: float | None, hi: float | None, target: float | None = None) -> DimensionRule:
    return DimensionRule(min=finite_or_none(lo), max=finite_or_none(hi), target=finite_or_none(target))


def scoring_profile(habit: Habit) -> ScoringProfile:
    if habit.min_quantity is not None or habit.max_quantity is not None:
        quantity = _rule(habit.min_quantity, habit.max_quantity)
    elif habit.kind == "quantified":
        quantity = _rule(habit.min, habit.max, habit.target)
    else:
        quantity = DimensionRule()

    if habit.min_time_minutes is not None or habit.max_time_minutes is not None:
        time = _rule(habit.min_time_minutes, habit.max_time_minutes)
    elif habit.kind == "time":
        time = _rule(habit.min, habit.max, habit.target)
    else:
        time = DimensionRule()

    mode = habit.score_mode if habit.score_mode in SCORE_MODES else "both"
    return ScoringProfile(quantity=quantity, time=time, mode=mode)


def _sum_present(values: list[float | None]) -> float | None:
    present = [v for v in values if v is not None]
    if not present:
        return None
    return float(sum(present))


def read_entry(entry: DailyEntry) -> EntryReading:
    """Resolve the effective quantity and minutes logged by *entry*.

    Multiple log sessions are summed. Without logs the flat fields are read,
    then the legacy ``value`` according to the kind it was logged under.
    """
    if entry.logs:
        quantity = _sum_present([finite_or_none(l.quantity) for l in entry.logs])
        minutes = _sum_present([l.duration_minutes() for l in entry.logs])
    else:
        quantity = finite_or_none(entry.quantity)
        minutes = entry.duration_minutes()

    legacy = finite_or_none(entry.value)
    if legacy is not None:
        if quantity is None and entry.kind_at_entry in (None, "quantified"):
            quantity = legacy
        elif minutes is None and entry.kind_at_entry == "time":
            minutes = legacy

    return EntryReading(quantity=quantity, minutes=minutes, completed=bool(entry.completed))
