# -*- coding: utf-8 -*-
"""Shared domain types (pure, test-friendly)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RejectionKind(str, Enum):
    """Why a set of raw inputs was refused before any calculation."""

    INVALID_FORMAT = "InvalidFormat"
    NEGATIVE_VALUE = "NegativeValue"


@dataclass(frozen=True)
class Rejection:
    kind: RejectionKind
    message: str
    fields: Tuple[str, ...] = ()

    @property
    def code(self) -> str:
        """Stable upper-case code for logs, e.g. ``NEGATIVE_VALUE``."""
        return self.kind.name
