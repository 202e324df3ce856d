# -*- coding: utf-8 -*-
"""ElecCalc version.

Installed distribution metadata wins; a source checkout falls back to
version.json at the repo root.
"""

from __future__ import annotations

import importlib.metadata
import json
from pathlib import Path

DIST_NAME = "eleccalc"
_DEFAULT_VERSION = "0.0.0"
VERSION_JSON = Path(__file__).resolve().parents[1] / "version.json"


def _read_version_json(path: Path = VERSION_JSON) -> str:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _DEFAULT_VERSION
    if not isinstance(data, dict):
        return _DEFAULT_VERSION
    return str(data.get("semver") or data.get("version") or _DEFAULT_VERSION)


def _resolve_version(dist_name: str = DIST_NAME, path: Path = VERSION_JSON) -> str:
    try:
        return importlib.metadata.version(dist_name)
    except importlib.metadata.PackageNotFoundError:
        return _read_version_json(path)


__version__ = _resolve_version()


def get_version() -> str:
    return __version__
