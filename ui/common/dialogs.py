# -*- coding: utf-8 -*-
"""Common dialogs helpers.

Thin wrappers around QMessageBox to keep UI messages consistent.
"""

from __future__ import annotations

from typing import Optional

from PyQt5.QtWidgets import QMessageBox, QWidget


def error(parent: Optional[QWidget], title: str, text: str, details: Optional[str] = None) -> None:
    box = QMessageBox(QMessageBox.Critical, title, text, QMessageBox.Ok, parent)
    if details:
        box.setDetailedText(details)
    box.exec_()
