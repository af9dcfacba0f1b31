"""Data root, settings, timezone and path helpers."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from habitcore.dates import to_day_key
from habitcore.fileio import read_yaml
from habitcore.models import Settings

logger = logging.getLogger(__name__)


def workspace_root() -> Path:
    """Directory holding settings.yaml and the storage exports."""
    return Path(
        os.environ.get("HABITS_ROOT", str(Path.home() / "habits"))
    ).expanduser().resolve()


def load_settings(root: Path | None = None) -> Settings:
    """Read settings.yaml, defaulting every missing field."""
    if root is None:
        root = workspace_root()
    data = read_yaml(settings_path(root))
    if not isinstance(data, dict):
        logger.debug("No settings at %s, using defaults", settings_path(root))
        return Settings()
    return Settings.from_dict(data)


def get_user_timezone(settings: Settings) -> ZoneInfo | None:
    """Configured timezone, or None for the machine's local time."""
    if not settings.timezone:
        return None
    try:
        return ZoneInfo(settings.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using local time", settings.timezone)
        return None


def today_key(root: Path | None = None, settings: Settings | None = None) -> str:
    """Today's day key under the configured day start and timezone."""
    if settings is None:
        settings = load_settings(root)
    tz = get_user_timezone(settings)
    return to_day_key(datetime.now(tz), settings.day_start, tz)


# ── Path helpers ──────────────────────────────────────────────

def settings_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "settings.yaml"


def habits_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "habits.yaml"


def entries_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "entries.json"


def summary_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "summary.json"
