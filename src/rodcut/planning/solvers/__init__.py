# -*- coding: utf-8 -*-
"""
Solvers for the rod-cutting pipeline.
"""

from .exhaustive import SearchProgress, optimize, run_exhaustive

__all__ = ["SearchProgress", "optimize", "run_exhaustive"]
