# -*- coding: utf-8 -*-
"""
Display and test-data helpers.

Rounding here is for printing only; the solver always works at full precision.
"""

from __future__ import annotations
import random
from typing import Iterable, List, Optional

from rodcut.business_objects.errors import StateValidationError
from rodcut.planning import Solution


def to_2dp(values: Iterable[float]) -> List[float]:
    return [round(float(x), 2) for x in values]


def random_lengths(n: int, max_length: float, seed: Optional[int] = None) -> List[float]:
    """n random floats in [0, max_length), for probing tractability."""
    if n < 0:
        raise StateValidationError("n must be >= 0.")
    if max_length <= 0:
        raise StateValidationError("max_length must be > 0.")
    rng = random.Random(seed)
    return [rng.random() * max_length for _ in range(n)]


def format_solution(solution: Optional[Solution]) -> str:
    """Human-readable, 2-dp summary of a solution (one line per rod)."""
    if solution is None:
        return "No valid cutting pattern exists."
    lines = [f"Reward: {float(solution.reward):.2f}"]
    for i, p in enumerate(solution.patterns):
        lines.append(
            f"  Rod {i}: length={float(p.original_length):.2f} "
            f"cuts={to_2dp(p.cuts)} remainder={float(p.remainder):.2f}"
        )
    return "\n".join(lines)
