# -*- coding: utf-8 -*-
"""UI error handling helpers.

Wrap UI callbacks so an unexpected exception is logged with its traceback and
shown in a dialog instead of escaping into the Qt event loop.
"""

from __future__ import annotations

import logging
import traceback
from typing import Callable, Optional, TypeVar

from PyQt5.QtWidgets import QWidget

from ui.common import dialogs

T = TypeVar("T")


def run_guarded(
    fn: Callable[[], T],
    *,
    parent: Optional[QWidget] = None,
    title: str = "Error",
    user_message: str = "An unexpected error occurred.",
    logger_name: str = "eleccalc.ui",
) -> Optional[T]:
    """Run a callable; on exception log it, show a dialog and return None."""
    try:
        return fn()
    except Exception as e:
        logging.getLogger(logger_name).exception("Unhandled UI exception: %s", e)
        dialogs.error(parent, title, user_message, details=traceback.format_exc())
        return None
