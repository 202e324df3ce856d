# -*- coding: utf-8 -*-
"""Main window hosting the calculator screen."""

from __future__ import annotations

from datetime import date

from PyQt5.QtWidgets import QLabel, QMainWindow

from app.config import FOOTER_TEXT, WINDOW_TITLE
from screens.calculator.calculator_screen import CalculatorScreen


class MainWindow(QMainWindow):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.screen = CalculatorScreen(parent=self)
        self.setCentralWidget(self.screen)
        self.statusBar().addPermanentWidget(QLabel(f"© {date.today().year} {FOOTER_TEXT}"))
        self.resize(640, 760)


def create_main_window() -> MainWindow:
    return MainWindow()
