# -*- coding: utf-8 -*-

"""Pytest configuration.

This project uses a flat app folder layout (core/, services/, infra/, ...).
For local testing we add the repository root to sys.path so that imports like
`from core...` work without installing the package.
"""

from __future__ import annotations

import os
import sys

import pytest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def user_home(tmp_path, monkeypatch):
    """Point per-user data (settings, logs) at a temporary folder."""
    monkeypatch.setenv("ELECCALC_HOME", str(tmp_path))
    return tmp_path
