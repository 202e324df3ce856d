# -*- coding: utf-8 -*-
"""Controller for the calculator screen (no PyQt dependency)."""

from __future__ import annotations

from typing import Any, Optional

from services.calc_service import CalcResponse, CalcService


class CalculatorController:
    def __init__(self, service: Optional[CalcService] = None):
        self.service = service or CalcService()

    def calculate(self, voltage: Any, current: Any, rate: Any) -> CalcResponse:
        # Raw text goes through untouched; the service owns validation.
        return self.service.submit(voltage, current, rate)
