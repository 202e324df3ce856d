# -*- coding: utf-8 -*-
"""Lightweight performance instrumentation.

Enable by setting env var:
    ELECCALC_PERF=1

When enabled, timings are written to logger ``eleccalc.perf``.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager

PERF_ENV = "ELECCALC_PERF"

log = logging.getLogger("eleccalc.perf")


def is_enabled() -> bool:
    return os.environ.get(PERF_ENV, "").strip().lower() in ("1", "true", "yes", "on")


@contextmanager
def span(label: str, *, threshold_ms: float = 50.0):
    """Measure a block duration and log it if above threshold.

    No-op unless ELECCALC_PERF is enabled.
    """
    if not is_enabled():
        yield
        return
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt_ms = (time.perf_counter() - t0) * 1000.0
        if dt_ms >= float(threshold_ms or 0.0):
            log.info("PERF %s %.3fms", label, dt_ms)
