# -*- coding: utf-8 -*-
"""Calculation orchestration service.

This service provides a stable API for the presentation layer:
raw form values in, a CalcResponse out (either a rejection or a result).

Validation and calculation live in `core/` and stay pure; this layer only
sequences them, converts InputRejected into a value, and logs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from core.calculations.usage import compute_usage_table
from core.formatting import format_result
from core.models.usage import CalculationResult, DisplayRow, DisplaySummary
from core.types import Rejection
from core.validators.inputs import InputRejected, validated_input
from infra.perf import span


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalcResponse:
    result: Optional[CalculationResult] = None
    rejection: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    @property
    def message(self) -> str:
        return self.rejection.message if self.rejection is not None else ""

    def display(self) -> Tuple[DisplaySummary, List[DisplayRow]]:
        """Formatted summary and rows; only valid for a successful response."""
        if self.result is None:
            raise ValueError("Cannot display a rejected calculation.")
        return format_result(self.result)


class CalcService:
    """Stateless entry point: validate, then calculate once."""

    def submit(self, voltage: Any, current: Any, rate: Any) -> CalcResponse:
        try:
            inp = validated_input(voltage, current, rate)
        except InputRejected as exc:
            rej = exc.rejection
            log.info("Input rejected (%s) fields=%s", rej.code, ",".join(rej.fields))
            return CalcResponse(rejection=rej)

        with span("calc.usage_table", threshold_ms=5.0):
            result = compute_usage_table(inp)

        log.debug(
            "Calculated usage table: power_kw=%r rate_rm_per_kwh=%r rows=%d",
            result.power_kw,
            result.rate_rm_per_kwh,
            len(result.rows),
        )
        return CalcResponse(result=result)
