# -*- coding: utf-8 -*-
"""Calculator - results table presenter.

UI-only logic that fills the Hour / Energy / Total table and the summary
label from a CalcResponse. The screen stays focused on layout and wiring.
"""

from __future__ import annotations

from core.formatting import summary_line
from services.calc_service import CalcResponse
from ui.table_utils import centered_item


class ResultsTablePresenter:
    def __init__(self, screen):
        self.screen = screen

    def clear(self) -> None:
        scr = self.screen
        scr.tbl_results.setRowCount(0)
        scr.lbl_summary.clear()
        scr.lbl_summary.setVisible(False)
        scr.tbl_results.setVisible(False)

    def update(self, response: CalcResponse) -> bool:
        """Render a successful response; clears the table on rejection."""
        scr = self.screen
        if not response.ok:
            self.clear()
            return False

        summary, rows = response.display()
        scr.lbl_summary.setText(summary_line(summary))
        scr.lbl_summary.setVisible(True)

        scr.tbl_results.blockSignals(True)
        try:
            scr.tbl_results.setRowCount(len(rows))
            for r, row in enumerate(rows):
                scr.tbl_results.setItem(r, 0, centered_item(row.hour))
                scr.tbl_results.setItem(r, 1, centered_item(row.energy_kwh))
                scr.tbl_results.setItem(r, 2, centered_item(row.total_rm))
        finally:
            scr.tbl_results.blockSignals(False)

        scr.tbl_results.setVisible(True)
        scr.tbl_results.resizeRowsToContents()
        return True
