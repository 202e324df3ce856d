# -*- coding: utf-8 -*-
"""Models for the electricity usage/cost table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ValidatedInput:
    """Electrical inputs that already passed validation (all >= 0)."""

    voltage_v: float
    current_a: float
    rate_sen_per_kwh: float


@dataclass(frozen=True)
class HourlyRow:
    """Cumulative energy and cost after ``hour`` hours of constant load."""

    hour: int
    energy_kwh: float
    total_rm: float


@dataclass(frozen=True)
class CalculationResult:
    power_kw: float
    rate_rm_per_kwh: float
    rows: Tuple[HourlyRow, ...]


@dataclass(frozen=True)
class DisplayRow:
    hour: str
    energy_kwh: str
    total_rm: str


@dataclass(frozen=True)
class DisplaySummary:
    power_kw: str
    rate_rm_per_kwh: str
