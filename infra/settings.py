# -*- coding: utf-8 -*-
"""
User preferences stored in a per-user writable folder (no admin).

Only application preferences live here. Calculation inputs and results are
never written to disk.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

from infra.paths import settings_file

log = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _defaults() -> Dict[str, Any]:
    return {
        "log_level": "INFO",
    }


def _clean(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep known keys with usable values; fall back to defaults otherwise."""
    merged = _defaults()
    for key, value in data.items():
        if key not in merged or value is None:
            continue
        merged[key] = value
    level = str(merged.get("log_level") or "").strip().upper()
    merged["log_level"] = level if level in _LOG_LEVELS else "INFO"
    return merged


def load_settings() -> Dict[str, Any]:
    path = settings_file()
    defaults = _defaults()
    if not path.exists():
        save_settings(defaults)
        return defaults

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        # Recover from corruption gracefully
        log.warning("Settings file %s is unreadable; restoring defaults", path)
        save_settings(defaults)
        return defaults

    if not isinstance(data, dict):
        log.warning("Settings file %s is not a JSON object; restoring defaults", path)
        save_settings(defaults)
        return defaults
    return _clean(data)


def save_settings(data: Dict[str, Any]) -> None:
    path = settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def log_level() -> int:
    return getattr(logging, load_settings()["log_level"], logging.INFO)
