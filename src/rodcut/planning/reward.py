# -*- coding: utf-8 -*-
"""
Reward for a feasible set of cut patterns.

Squaring the remainder favours concentrating waste on few rods: one long
offcut scores higher than several short ones of the same total length.
"""

from __future__ import annotations
from numbers import Real
from typing import Iterable

from .solution import CutPattern


def compute_reward(patterns: Iterable[CutPattern]) -> Real:
    """Sum over rods of remainder ** 2 (0 for no rods)."""
    return sum((p.remainder ** 2 for p in patterns), 0)
