# -*- coding: utf-8 -*-
"""Global crash/exception handlers.

Routes uncaught exceptions (main thread and worker threads) to the app log
instead of letting the window vanish silently. UI callbacks have their own
wrapper in ui/common/error_handler.py.

Safe to import before QApplication is created.
"""

from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType
from typing import Optional, Type

log = logging.getLogger(__name__)


def log_uncaught(exc_type: Type[BaseException], exc: BaseException, tb: Optional[TracebackType]) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    log.critical("Unhandled exception", exc_info=(exc_type, exc, tb))


def _thread_hook(args) -> None:  # pragma: no cover
    log_uncaught(args.exc_type, args.exc_value, args.exc_traceback)


def install_global_exception_handlers() -> None:
    """Install sys/thread exception hooks to ensure crashes are logged."""
    sys.excepthook = log_uncaught  # type: ignore[assignment]
    threading.excepthook = _thread_hook  # type: ignore[assignment]
