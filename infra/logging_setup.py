# -*- coding: utf-8 -*-
"""
Logging setup: app log in user space plus console output.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from infra.paths import logs_dir
from infra.settings import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == str(log_path)
        for h in logger.handlers
    )


def init_logging(filename: str = "app.log", level: Optional[int] = None) -> Path:
    if level is None:
        level = log_level()
    log_path = logs_dir() / filename
    root = logging.getLogger()
    # Don't add multiple handlers if init called twice
    if not _has_file_handler(root, log_path):
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(fh)
        root.addHandler(sh)
    root.setLevel(level)
    return log_path


def init_perf_logging(filename: str = "perf.log") -> Path:
    """Attach a dedicated file handler for performance timings.

    Timings are emitted by infra.perf.span when ELECCALC_PERF=1.
    """
    log_path = logs_dir() / filename
    logger = logging.getLogger("eleccalc.perf")
    logger.setLevel(logging.INFO)
    if not _has_file_handler(logger, log_path):
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)
    return log_path
