# -*- coding: utf-8 -*-
"""Pure usage/cost calculations.

NOTE: This module must not depend on PyQt, services or display formatting.
"""

from __future__ import annotations

from core.constants import HOURS_PER_DAY, SEN_PER_RM, WATTS_PER_KW
from core.models.usage import CalculationResult, HourlyRow, ValidatedInput


def compute_usage_table(inp: ValidatedInput, hours: int = HOURS_PER_DAY) -> CalculationResult:
    """Tabulate cumulative energy and cost for 1..hours hours of constant load.

    - power_kw        : voltage * current / 1000
    - rate_rm_per_kwh : rate (sen/kWh) / 100
    - row n           : energy = power_kw * n, total = energy * rate_rm_per_kwh
    Inputs are assumed validated; nothing is re-checked here.
    """
    power_kw = (inp.voltage_v * inp.current_a) / WATTS_PER_KW
    rate_rm = inp.rate_sen_per_kwh / SEN_PER_RM

    rows = []
    for hour in range(1, hours + 1):
        energy = power_kw * hour
        rows.append(HourlyRow(hour=hour, energy_kwh=energy, total_rm=energy * rate_rm))

    return CalculationResult(
        power_kw=power_kw,
        rate_rm_per_kwh=rate_rm,
        rows=tuple(rows),
    )
