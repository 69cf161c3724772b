# -*- coding: utf-8 -*-
"""
Length validation shared by rods and pieces.
"""

from __future__ import annotations
import math
from numbers import Real

from .errors import StateValidationError


def check_length(value: object, label: str) -> None:
    """
    Reject anything that would corrupt remainder arithmetic.

    Accepts any finite, non-negative ``numbers.Real`` (int, float, Fraction).
    ``bool`` is refused even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise StateValidationError(
            f"{label} length must be a real number, got {type(value).__name__}: {value!r}"
        )
    if not math.isfinite(value):
        raise StateValidationError(f"{label} length must be finite, got {value!r}.")
    if value < 0:
        raise StateValidationError(f"{label} length must be >= 0, got {value!r}.")
