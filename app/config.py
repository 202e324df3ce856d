# -*- coding: utf-8 -*-
"""Application-level configuration (UI strings, names).

This module is intentionally tiny and *import-safe*: plain constants only.

Calculation constants (hours, unit conversions, decimal places, messages)
live in ``core.constants`` so that core/ never depends on app/.
User-adjustable preferences (log level) live in ``infra.settings``.
"""

from __future__ import annotations

APP_NAME: str = "ElecCalc"
WINDOW_TITLE: str = "Electricity Rate Calculator"
SCREEN_TITLE: str = "Electricity Calculator"
FOOTER_TEXT: str = "Electricity Bill Calculator"

# Input fields in submission order: (key, label, tooltip).
INPUT_FIELDS = (
    ("voltage", "Voltage (V)", "Supply voltage in volts"),
    ("current", "Current (A)", "Load current in amperes"),
    ("rate", "Rate (sen/kWh)", "Tariff in sen per kWh (100 sen = 1 RM)"),
)

CALCULATE_TEXT: str = "Calculate"
CALCULATE_TOOLTIP: str = "Click to calculate electricity usage and cost"

TABLE_HEADERS = ("Hour", "Energy (kWh)", "Total (RM)")
