# -*- coding: utf-8 -*-
"""Validations for raw calculator inputs (voltage, current, rate).

Checks run in a fixed order: every value must be numeric before any sign
check happens, so a format problem is always reported first.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from core.constants import FIELDS, MSG_INVALID_FORMAT, MSG_NEGATIVE_VALUE
from core.models.usage import ValidatedInput
from core.parse import parse_number
from core.types import Rejection, RejectionKind


class InputRejected(ValueError):
    """Raised when raw inputs cannot be turned into a ValidatedInput."""

    def __init__(self, rejection: Rejection):
        super().__init__(rejection.message)
        self.rejection = rejection


def _check(raw: Sequence[Any]) -> Tuple[Optional[Rejection], List[float]]:
    parsed = [parse_number(v) for v in raw]

    bad_format = tuple(name for name, num in zip(FIELDS, parsed) if num is None)
    if bad_format:
        return Rejection(RejectionKind.INVALID_FORMAT, MSG_INVALID_FORMAT, bad_format), []

    negative = tuple(name for name, num in zip(FIELDS, parsed) if num < 0)
    if negative:
        return Rejection(RejectionKind.NEGATIVE_VALUE, MSG_NEGATIVE_VALUE, negative), []

    # -0.0 passes the sign check; store it as plain zero.
    return None, [num if num != 0 else 0.0 for num in parsed]


def validated_input(voltage: Any, current: Any, rate: Any) -> ValidatedInput:
    """Parse and check the three raw values.

    Raises InputRejected with an InvalidFormat rejection if any value is not
    numeric, otherwise with a NegativeValue rejection if any value is < 0.
    """
    rejection, values = _check((voltage, current, rate))
    if rejection is not None:
        raise InputRejected(rejection)
    v, i, r = values
    return ValidatedInput(voltage_v=v, current_a=i, rate_sen_per_kwh=r)
