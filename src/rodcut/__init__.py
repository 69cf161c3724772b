# -*- coding: utf-8 -*-
"""
rodcut: exhaustive rod-cutting optimizer.

Assigns every required piece to a rod so that the sum of squared leftovers is
as large as possible. Brute force over rods ** pieces assignments; meant for
small instances.

    >>> from rodcut import optimize
    >>> optimize([5], [2, 3]).reward
    0
"""

from rodcut.business_objects import (
    Piece,
    RodSpec,
    SchemaError,
    SearchSpaceTooLargeError,
    StateValidationError,
)
from rodcut.planning import CutPattern, CuttingState, Policy, Solution
from rodcut.planning.solvers.exhaustive import SearchProgress, optimize, run_exhaustive

__version__ = "0.1.0"

__all__ = [
    "optimize",
    "run_exhaustive",
    "SearchProgress",
    "CuttingState",
    "Policy",
    "CutPattern",
    "Solution",
    "Piece",
    "RodSpec",
    "SchemaError",
    "SearchSpaceTooLargeError",
    "StateValidationError",
]
