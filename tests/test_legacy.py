"""Tests for habitcore/legacy.py: translating habit and entry shapes."""

from habitcore.legacy import DimensionRule, read_entry, scoring_profile
from habitcore.models import DailyEntry, Habit, LogSession


def test_profile_unified_thresholds_win():
    h = Habit(kind="quantified", target=5, min_quantity=2, max_quantity=8)
    p = scoring_profile(h)
    assert p.quantity == DimensionRule(min=2, max=8)
    assert p.time.configured is False
    assert p.mode == "both"


def test_profile_legacy_quantified():
    p = scoring_profile(Habit(kind="quantified", target=5))
    assert p.quantity == DimensionRule(target=5)
    assert p.quantity.lower_bound == 5
    assert p.time.configured is False


def test_profile_legacy_time():
    p = scoring_profile(Habit(kind="time", min=30, max=120, score_mode="time"))
    assert p.time == DimensionRule(min=30, max=120)
    assert p.quantity.configured is False
    assert p.mode == "time"


def test_profile_boolean_has_no_thresholds():
    p = scoring_profile(Habit(kind="boolean", target=3))
    assert p.has_thresholds is False


def test_read_entry_flat_fields():
    r = read_entry(DailyEntry(quantity=4, start_minutes=600, end_minutes=645, completed=True))
    assert r.quantity == 4
    assert r.minutes == 45
    assert r.completed is True


def test_read_entry_sums_logs():
    e = DailyEntry(
        quantity=99,
        logs=[
            LogSession(id="a", quantity=2, start_minutes=60, end_minutes=90),
            LogSession(id="b", quantity=3, start_minutes=None, end_minutes=None),
            LogSession(id="c", quantity=None, start_minutes=120, end_minutes=135),
        ],
    )
    r = read_entry(e)
    assert r.quantity == 5
    assert r.minutes == 45


def test_read_entry_legacy_value_by_kind_at_entry():
    assert read_entry(DailyEntry(value=7)).quantity == 7
    assert read_entry(DailyEntry(value=7, kind_at_entry="quantified")).quantity == 7
    r = read_entry(DailyEntry(value=30, kind_at_entry="time"))
    assert r.minutes == 30
    assert r.quantity is None
    r = read_entry(DailyEntry(value=7, kind_at_entry="boolean"))
    assert r.quantity is None
    assert r.minutes is None


def test_read_entry_prefers_quantity_over_value():
    assert read_entry(DailyEntry(quantity=2, value=9)).quantity == 2


def test_read_entry_non_finite_is_absent():
    r = read_entry(DailyEntry(quantity=float("nan"), start_minutes=0, end_minutes=float("inf")))
    assert r.quantity is None
    assert r.minutes is None
