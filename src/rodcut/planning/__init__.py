# -*- coding: utf-8 -*-
"""
Planning layer public API for the rod-cutting pipeline.

This module exposes the core planning-time data contracts:
  - State model (CuttingState)
  - Policy configuration
  - CutPattern and Solution models

Search internals (odometer, decoder, reward), the solvers and the tracker are
intentionally not exported here. They should be imported explicitly when needed.
"""

from .state import CuttingState
from .policy import Policy
from .solution import CutPattern, Solution

__all__ = [
    "CuttingState",
    "Policy",
    "CutPattern",
    "Solution",
]
