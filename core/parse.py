# -*- coding: utf-8 -*-
"""
core/parse.py

Strict numeric parsing for raw form values.

Accepted: optional sign, digits with an optional decimal point, optional
exponent, surrounding whitespace ("12", "-0.5", ".5", "5.", "1e3", " 7 ").
Rejected: blanks, "nan"/"inf", hex, digit separators ("1_000"), comma
decimals ("1,5"), units ("12v") and booleans.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)


def is_blank(val: Any) -> bool:
    """True when the value is missing or only whitespace."""
    if val is None:
        return True

    # bool is a subclass of int; it is rejected later, not treated as blank.
    if isinstance(val, (int, float)):
        return False

    return str(val).strip() == ""


def parse_number(val: Any) -> Optional[float]:
    """Return ``val`` as a float, or None if it is not a number.

    A well-formed numeral too large for a float (``"1e400"``) is still a
    number and comes back as signed infinity. Native nan/inf floats are not
    accepted, matching the rejected ``"nan"``/``"inf"`` spellings.
    """
    if is_blank(val):
        return None

    if isinstance(val, bool):
        return None

    if isinstance(val, (int, float)):
        try:
            num = float(val)
        except OverflowError:
            # int beyond float range
            return math.inf if val > 0 else -math.inf
        return num if math.isfinite(num) else None

    if not isinstance(val, str):
        return None

    if not _NUMBER_RE.match(val):
        return None

    return float(val)
