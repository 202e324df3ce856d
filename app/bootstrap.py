# -*- coding: utf-8 -*-
"""
Application bootstrap (runs before UI):
- Init logging (app log, optional perf log)
- Route uncaught exceptions to the log
"""
from __future__ import annotations

import logging

from infra.crash_handler import install_global_exception_handlers
from infra.logging_setup import init_logging, init_perf_logging
from infra.perf import is_enabled as perf_enabled

log = logging.getLogger(__name__)


def bootstrap() -> None:
    log_path = init_logging()
    if perf_enabled():
        init_perf_logging()
    install_global_exception_handlers()
    log.info("Logging to %s", log_path)
