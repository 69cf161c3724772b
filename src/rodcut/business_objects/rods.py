# -*- coding: utf-8 -*-
"""
Rod model (stock material available for cutting).
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real

from .errors import StateValidationError
from .lengths import check_length


@dataclass(frozen=True)
class RodSpec:
    """
    Immutable rod of stock material.

    Attributes
    ----------
    id : str
        Unique identifier.
    length : Real
        Finite, nonnegative length. Kept at full precision; rounding is for display only.
    """
    id: str
    length: Real

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.id:
            raise StateValidationError("RodSpec.id must be non-empty.")
        check_length(self.length, f"RodSpec[{self.id}]")
