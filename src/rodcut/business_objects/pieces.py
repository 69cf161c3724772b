# -*- coding: utf-8 -*-
"""
Piece model for rod cutting.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real

from .errors import StateValidationError
from .lengths import check_length


@dataclass(frozen=True)
class Piece:
    """
    A required length that must be cut from exactly one rod.

    Attributes
    ----------
    id : str
        Unique identifier.
    length : Real
        Finite, nonnegative length.
    """
    id: str
    length: Real

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.id:
            raise StateValidationError("Piece.id must be non-empty.")
        check_length(self.length, f"Piece[{self.id}]")
