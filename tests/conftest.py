"""Shared test fixtures for habitscore tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary data root with settings and storage exports."""
    root = tmp_path / "habits"
    root.mkdir(parents=True)

    settings = {
        "day_start": "04:00",
        "show_streaks": True,
        "streak_window_days": 30,
        "done_mode": "completed",
    }
    (root / "settings.yaml").write_text(
        yaml.dump(settings, default_flow_style=False), encoding="utf-8"
    )

    habits = {
        "habits": [
            {
                "id": "read",
                "title": "Read",
                "weight": 1,
                "createdAt": "2024-01-01T08:00:00",
            },
            {
                "id": "run",
                "title": "Run",
                "weight": 1,
                "scoreMode": "both",
                "minQuantity": 0,
                "maxQuantity": 5,
                "quantityUnit": "km",
                "tags": ["health", "outdoor", "health"],
                "createdAt": "2024-01-01T08:00:00",
            },
            {
                "id": "journal",
                "title": "Journal",
                "weight": 2,
                "createdAt": "2024-01-01T08:00:00",
                "archivedAt": "2024-02-01T08:00:00",
            },
        ]
    }
    (root / "habits.yaml").write_text(
        yaml.dump(habits, default_flow_style=False), encoding="utf-8"
    )

    entries = [
        {"habitId": "read", "date": "2024-03-08", "completed": True},
        {"habitId": "read", "date": "2024-03-09", "completed": True},
        {"habitId": "read", "date": "2024-03-10", "completed": True},
        {"habitId": "run", "date": "2024-03-10", "quantity": 2.5},
        {"habitId": "run", "date": "2024-03-01", "quantity": 5, "completed": True},
        {"habitId": "journal", "date": "2024-03-10", "completed": True},
        {"habitId": "read", "date": "2023-12-01", "completed": True},
    ]
    (root / "entries.json").write_text(json.dumps(entries, indent=2), encoding="utf-8")

    os.environ["HABITS_ROOT"] = str(root)
    yield root
    if "HABITS_ROOT" in os.environ:
        del os.environ["HABITS_ROOT"]
