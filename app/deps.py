# -*- coding: utf-8 -*-
"""Runtime dependency checks for ElecCalc.

Only the UI needs third-party packages; core/ and services/ are stdlib.
"""
from __future__ import annotations

from importlib import import_module

# (pip name, module that must import)
RUNTIME_PACKAGES = (
    ("PyQt5", "PyQt5.QtWidgets"),
)


def _importable(module_name: str) -> bool:
    try:
        import_module(module_name)
    except ImportError:
        return False
    return True


def missing_runtime_packages() -> list[str]:
    return [pip_name for pip_name, module_name in RUNTIME_PACKAGES if not _importable(module_name)]


def ensure_runtime_deps() -> None:
    """Raise RuntimeError with install guidance if the UI stack is missing."""
    missing = missing_runtime_packages()
    if missing:
        raise RuntimeError(
            f"Missing required Python packages: {', '.join(missing)}.\n\n"
            "Install them with:\n"
            "  pip install -e ."
        )
