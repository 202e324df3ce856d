# -*- coding: utf-8 -*-
"""Electricity calculator screen.

Layout (top to bottom): title, error banner, three inputs, Calculate button,
power/rate summary, 24-row results table.
"""

from __future__ import annotations

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QVBoxLayout,
    QWidget,
)

from app.config import CALCULATE_TEXT, CALCULATE_TOOLTIP, INPUT_FIELDS, SCREEN_TITLE, TABLE_HEADERS
from screens.calculator.calculator_controller import CalculatorController
from screens.calculator.results_table_presenter import ResultsTablePresenter
from ui.common.error_handler import run_guarded
from ui.table_utils import configure_readonly_table


class CalculatorScreen(QWidget):
    def __init__(self, controller: CalculatorController | None = None, parent=None):
        super().__init__(parent)
        self.controller = controller or CalculatorController()
        self.inputs: dict[str, QLineEdit] = {}
        self._build_ui()
        self.results = ResultsTablePresenter(self)
        self.results.clear()

    # ------------------------------
    # UI
    # ------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        title = QLabel(SCREEN_TITLE)
        title.setAlignment(Qt.AlignCenter)
        font = title.font()
        font.setPointSize(font.pointSize() + 6)
        font.setBold(True)
        title.setFont(font)
        layout.addWidget(title)

        self.lbl_error = QLabel()
        self.lbl_error.setWordWrap(True)
        self.lbl_error.setStyleSheet("color: #721c24; background: #f8d7da; padding: 6px;")
        self.lbl_error.setVisible(False)
        layout.addWidget(self.lbl_error)

        form_group = QGroupBox()
        form = QFormLayout(form_group)
        for key, label, tooltip in INPUT_FIELDS:
            edit = QLineEdit()
            edit.setToolTip(tooltip)
            edit.returnPressed.connect(self._on_calculate)
            form.addRow(QLabel(label), edit)
            self.inputs[key] = edit
        layout.addWidget(form_group)

        self.btn_calculate = QPushButton(CALCULATE_TEXT)
        self.btn_calculate.setToolTip(CALCULATE_TOOLTIP)
        self.btn_calculate.clicked.connect(self._on_calculate)
        layout.addWidget(self.btn_calculate)

        self.lbl_summary = QLabel()
        self.lbl_summary.setStyleSheet("color: #0c5460; background: #d1ecf1; padding: 6px;")
        layout.addWidget(self.lbl_summary)

        self.tbl_results = QTableWidget()
        configure_readonly_table(self.tbl_results, TABLE_HEADERS)
        layout.addWidget(self.tbl_results, 1)

    # ------------------------------
    # Actions
    # ------------------------------
    def _on_calculate(self) -> None:
        run_guarded(self.calculate, parent=self, title="Calculation error")

    def calculate(self) -> bool:
        values = [self.inputs[key].text() for key, _label, _tip in INPUT_FIELDS]
        response = self.controller.calculate(*values)

        if response.ok:
            self.lbl_error.clear()
            self.lbl_error.setVisible(False)
        else:
            self.lbl_error.setText(response.message)
            self.lbl_error.setVisible(True)
        return self.results.update(response)
