# -*- coding: utf-8 -*-
"""Layer rules: core/ stays pure, services/ and infra/ stay UI-free."""

from __future__ import annotations

import importlib.util
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _load_checker():
    spec = importlib.util.spec_from_file_location("check_architecture", ROOT / "scripts" / "check_architecture.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_no_layer_violations():
    assert _load_checker().find_violations() == []


def test_checker_scans_core_files():
    files = _load_checker().iter_layer_files("core")
    names = {p.name for p in files}
    assert {"usage.py", "inputs.py", "formatting.py"} <= names
