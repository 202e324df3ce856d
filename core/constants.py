# -*- coding: utf-8 -*-
"""Single source of truth for calculation constants.

Why:
- The display contract (decimal places) must be identical everywhere a value
  is shown.
- Keep core/ free from app/ and UI imports.
"""

from __future__ import annotations

# Table length: cumulative rows for 1..HOURS_PER_DAY hours.
HOURS_PER_DAY = 24

WATTS_PER_KW = 1000.0
SEN_PER_RM = 100.0

ENERGY_PLACES = 5
TOTAL_PLACES = 2
POWER_PLACES = 5
RATE_PLACES = 3

THOUSANDS_SEP = ","

# Raw input field names, in the order they are checked and reported.
FIELDS = ("voltage", "current", "rate")

MSG_INVALID_FORMAT = "Please enter only numbers in all fields."
MSG_NEGATIVE_VALUE = "Values cannot be negative. Please enter positive numbers."
