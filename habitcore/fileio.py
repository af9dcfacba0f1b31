"""File I/O for the storage exports and the derived summary file."""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml


def read_text(path: Path) -> str:
    """Read a text file, returning empty string if missing."""
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def read_json(path: Path) -> Any:
    """Read a JSON file, returning None if missing or empty."""
    text = read_text(path)
    if not text.strip():
        return None
    return json.loads(text)


def read_yaml(path: Path) -> Any:
    """Read a YAML file, returning None if missing or empty."""
    text = read_text(path)
    if not text.strip():
        return None
    return yaml.safe_load(text)


def write_json_atomic(path: Path, data: dict[str, Any]) -> None:
    """Atomic JSON write with file locking: temp file + flock + rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                f.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
                f.flush()
                os.fsync(f.fileno())
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        os.rename(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
