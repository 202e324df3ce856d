# -*- coding: utf-8 -*-
"""Display formatting for calculation results.

Values are kept as full-precision floats in CalculationResult and only
rounded here, when turned into strings. Rounding is half away from zero on
the shortest decimal form of the float (so 1.005 -> "1.01"), with ","
thousands grouping.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Tuple

from core.constants import ENERGY_PLACES, POWER_PLACES, RATE_PLACES, THOUSANDS_SEP, TOTAL_PLACES
from core.models.usage import CalculationResult, DisplayRow, DisplaySummary

# Enough digits for any finite float (max ~1.8e308) plus the decimals.
_DECIMAL_PREC = 400


def format_fixed(value: float, places: int, thousands_sep: str = THOUSANDS_SEP) -> str:
    if not math.isfinite(value):
        return str(value)

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        dec = Decimal(repr(float(value))).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        if dec.is_zero():
            dec = abs(dec)
        text = f"{dec:,.{places}f}"

    if thousands_sep != ",":
        text = text.replace(",", thousands_sep)
    return text


def format_summary(result: CalculationResult) -> DisplaySummary:
    return DisplaySummary(
        power_kw=format_fixed(result.power_kw, POWER_PLACES),
        rate_rm_per_kwh=format_fixed(result.rate_rm_per_kwh, RATE_PLACES),
    )


def format_rows(result: CalculationResult) -> List[DisplayRow]:
    return [
        DisplayRow(
            hour=str(row.hour),
            energy_kwh=format_fixed(row.energy_kwh, ENERGY_PLACES),
            total_rm=format_fixed(row.total_rm, TOTAL_PLACES),
        )
        for row in result.rows
    ]


def format_result(result: CalculationResult) -> Tuple[DisplaySummary, List[DisplayRow]]:
    return format_summary(result), format_rows(result)


def summary_line(summary: DisplaySummary) -> str:
    return f"Power: {summary.power_kw} kW | Rate: {summary.rate_rm_per_kwh} RM/kWh"
