# -*- coding: utf-8 -*-
"""
Solution models for cutting results.

These data classes define the shape of outputs produced by the exhaustive
solver and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class CutPattern:
    """
    Pieces cut from a single rod.

    Attributes
    ----------
    original_length : Real
        Length of the rod before cutting.
    cuts : tuple[Real, ...]
        Piece lengths cut from this rod, in piece input order.
    remainder : Real
        original_length - sum(cuts); never negative in a feasible pattern.
    """
    original_length: Real
    cuts: Tuple[Real, ...]
    remainder: Real

    @property
    def used(self) -> Real:
        return self.original_length - self.remainder

    def as_dict(self) -> Dict[str, Any]:
        return {
            "original_length": self.original_length,
            "cuts": list(self.cuts),
            "remainder": self.remainder,
        }


@dataclass(frozen=True)
class Solution:
    """
    Best feasible cutting plan for a full run.

    Attributes
    ----------
    patterns : tuple[CutPattern, ...]
        One pattern per rod, in input rod order.
    reward : Real
        Sum over rods of remainder ** 2.
    assignment : tuple[int, ...]
        Identifier that produced this plan: digit j is the rod index of piece j.
    """
    patterns: Tuple[CutPattern, ...]
    reward: Real
    assignment: Tuple[int, ...]

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [p.as_dict() for p in self.patterns]
