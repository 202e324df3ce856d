# -*- coding: utf-8 -*-
"""
Centralized path resolver for per-user writable data (logs, settings).
No admin rights required.
"""
from __future__ import annotations

import os
from pathlib import Path

APP_DIR_NAME = "ElecCalc"
HOME_ENV = "ELECCALC_HOME"

def ensure_dir(p: Path) -> Path:
    p.mkdir(parents=True, exist_ok=True)
    return p

def user_data_dir() -> Path:
    """
    Per-user writable directory.

    ELECCALC_HOME wins when set (tests, portable runs); otherwise LOCALAPPDATA
    (non-roaming), APPDATA, then the home folder.
    """
    override = os.getenv(HOME_ENV)
    if override:
        return ensure_dir(Path(override))
    base = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA") or str(Path.home())
    return ensure_dir(Path(base) / APP_DIR_NAME)

def logs_dir() -> Path:
    return ensure_dir(user_data_dir() / "logs")

def settings_file() -> Path:
    return user_data_dir() / "eleccalc_settings.json"
