# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for a cutting Solution.
- No side effects
- No external dependencies
- Works off CuttingState and Solution

Public API:
  - compute_global_metrics(state, solution) -> Dict[str, float]
  - per_rod_metrics(state, solution) -> List[Dict]
"""

from __future__ import annotations
from typing import Any, Dict, List

from rodcut.business_objects.errors import StateValidationError
from rodcut.planning import CuttingState, Solution


def _check_shape(state: CuttingState, solution: Solution) -> None:
    if len(solution.patterns) != state.num_rods:
        raise StateValidationError(
            f"Solution has {len(solution.patterns)} patterns but state has {state.num_rods} rods."
        )


# ---------------------------------------------------------------------------
# 1) Global metrics (Reward, OU, Used/Remaining, rods cut)
# ---------------------------------------------------------------------------
def compute_global_metrics(state: CuttingState, solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Reward": ...,
        "OU": ...,                 # percent (0..100) of total rod length used
        "Capacity Sum": ...,
        "Piece Length Sum": ...,
        "Used Sum": ...,
        "Remaining Sum": ...,
        "Largest Remainder": ...,
        "Rods Cut": ...,           # rods with at least one piece
        "Untouched Rods": ...,
        "Total Rods": ...,
        "Total Pieces": ...
      }
    """
    _check_shape(state, solution)

    capacity_sum = sum(float(r.length) for r in state.rods)
    piece_sum = sum(float(p.length) for p in state.pieces)
    rem_sum = sum(float(p.remainder) for p in solution.patterns)
    used_sum = max(0.0, capacity_sum - rem_sum)

    OU = 0.0 if capacity_sum == 0.0 else (used_sum / capacity_sum) * 100.0
    rods_cut = sum(1 for p in solution.patterns if p.cuts)
    largest = max((float(p.remainder) for p in solution.patterns), default=0.0)

    return {
        "Reward": float(solution.reward),
        "OU": float(OU),
        "Capacity Sum": float(capacity_sum),
        "Piece Length Sum": float(piece_sum),
        "Used Sum": float(used_sum),
        "Remaining Sum": float(rem_sum),
        "Largest Remainder": float(largest),
        "Rods Cut": float(rods_cut),
        "Untouched Rods": float(state.num_rods - rods_cut),
        "Total Rods": float(state.num_rods),
        "Total Pieces": float(state.num_pieces),
    }


# ---------------------------------------------------------------------------
# 2) Per-rod metrics
# ---------------------------------------------------------------------------
def per_rod_metrics(state: CuttingState, solution: Solution) -> List[Dict[str, Any]]:
    """
    One row per rod, in input order:
      rod_id, original_length, pieces_cut, used, remainder,
      utilization_pct, remainder_sq, reward_share_pct
    """
    _check_shape(state, solution)
    total_reward = float(solution.reward)

    rows: List[Dict[str, Any]] = []
    for rod, pattern in zip(state.rods, solution.patterns):
        length = float(pattern.original_length)
        rem = float(pattern.remainder)
        used = length - rem
        rem_sq = rem * rem
        rows.append({
            "rod_id": rod.id,
            "original_length": length,
            "pieces_cut": len(pattern.cuts),
            "used": used,
            "remainder": rem,
            "utilization_pct": 0.0 if length == 0.0 else (used / length) * 100.0,
            "remainder_sq": rem_sq,
            "reward_share_pct": 0.0 if total_reward == 0.0 else (rem_sq / total_reward) * 100.0,
        })
    return rows
