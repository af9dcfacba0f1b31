"""Tests for habitcore/models.py: dict mapping and numeric sanitizing."""

from habitcore.models import DailyEntry, Habit, LogSession, Settings, finite_or_none


def test_finite_or_none():
    assert finite_or_none(3) == 3.0
    assert finite_or_none(0) == 0.0
    assert finite_or_none(None) is None
    assert finite_or_none(float("nan")) is None
    assert finite_or_none(float("inf")) is None
    assert finite_or_none(True) is None
    assert finite_or_none("5") is None


def test_habit_from_dict_defaults():
    h = Habit.from_dict({"id": "h1", "title": "Read"})
    assert h.weight == 1.0
    assert h.score_mode is None
    assert h.kind is None
    assert h.tags == []
    assert h.is_archived is False


def test_habit_from_dict_unified_and_legacy():
    h = Habit.from_dict({
        "id": "h2",
        "title": "Run",
        "weight": 2.5,
        "scoreMode": "time",
        "minQuantity": 1,
        "maxTimeMinutes": 60,
        "kind": "quantified",
        "target": 5,
        "tags": ["a", "b", "a"],
        "archivedAt": "2024-02-01T00:00:00",
        "somethingElse": 1,
    })
    assert h.weight == 2.5
    assert h.score_mode == "time"
    assert h.min_quantity == 1.0
    assert h.max_time_minutes == 60.0
    assert h.kind == "quantified"
    assert h.target == 5.0
    assert h.tags == ["a", "b"]
    assert h.is_archived is True


def test_habit_invalid_values_dropped():
    h = Habit.from_dict({"id": "h3", "weight": -2, "scoreMode": "fast", "kind": "weird"})
    assert h.weight == 0.0
    assert h.score_mode is None
    assert h.kind is None


def test_habit_to_dict_roundtrip():
    d = {
        "id": "h4",
        "title": "Meditate",
        "weight": 1.0,
        "createdAt": "2024-01-01T00:00:00",
        "minTimeMinutes": 10.0,
        "tags": ["calm"],
    }
    assert Habit.from_dict(d).to_dict() == d


def test_entry_from_dict():
    e = DailyEntry.from_dict({
        "habitId": "h1",
        "date": "2024-01-01",
        "completed": True,
        "quantity": float("nan"),
        "startMinutes": 60,
        "endMinutes": 90,
        "value": 3,
        "kindAtEntry": "time",
        "logs": [{"id": "l1", "quantity": 2, "startMinutes": None, "endMinutes": None}],
    })
    assert e.completed is True
    assert e.quantity is None
    assert e.duration_minutes() == 30.0
    assert e.value == 3.0
    assert e.kind_at_entry == "time"
    assert len(e.logs) == 1
    assert e.logs[0].quantity == 2.0


def test_entry_boolean_value_kept():
    e = DailyEntry.from_dict({"habitId": "h1", "date": "2024-01-01", "value": True})
    assert e.value is True


def test_duration_clamped_to_zero():
    assert DailyEntry(start_minutes=90, end_minutes=60).duration_minutes() == 0.0
    assert LogSession(start_minutes=10).duration_minutes() is None


def test_settings_from_dict():
    s = Settings.from_dict({"dayStart": "05:00", "timezone": "Europe/Berlin", "doneMode": "Score"})
    assert s.day_start == "05:00"
    assert s.timezone == "Europe/Berlin"
    assert s.done_mode == "score"
    assert s.streak_window_days == 366
    assert Settings.from_dict({}) == Settings()


def test_settings_unquoted_yaml_time():
    # YAML reads an unquoted 16:00 as 960
    assert Settings.from_dict({"day_start": 960}).day_start == "16:00"
    assert Settings.from_dict({"dayStart": 270}).day_start == "04:30"
    assert Settings.from_dict({"day_start": None}).day_start == "00:00"


def test_settings_bad_window_uses_default():
    assert Settings.from_dict({"streak_window_days": None}).streak_window_days == 366
    assert Settings.from_dict({"streak_window_days": "lots"}).streak_window_days == 366
    assert Settings.from_dict({"streak_window_days": 0}).streak_window_days == 1
    assert Settings.from_dict({"streak_window_days": 30.0}).streak_window_days == 30


def test_settings_show_streaks_needs_real_bool():
    assert Settings.from_dict({"show_streaks": False}).show_streaks is False
    assert Settings.from_dict({"show_streaks": "false"}).show_streaks is True


def test_entry_completed_needs_real_bool():
    assert DailyEntry.from_dict({"completed": "false"}).completed is None
    assert DailyEntry.from_dict({"completed": 1}).completed is None
    assert DailyEntry.from_dict({"completed": False}).completed is False
