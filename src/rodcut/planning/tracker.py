# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for an exhaustive cutting run.

Files produced (when Tracker is used):
  - improvement_log.csv    (append-as-you-go: every new best during the search)
  - cut_patterns.csv       (final per-rod cut patterns)
  - assignments.csv        (final per-piece assignment)
  - problem_summary.csv    (global KPIs)

Notes
-----
- Callers decide when to invoke the final writers; the solver only appends
  to the improvement log.
"""

from __future__ import annotations
import csv
import json
import os
from dataclasses import dataclass, field
from typing import Optional

from rodcut.planning import CuttingState, Solution
from rodcut.quality_metrics.core import compute_global_metrics, per_rod_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _improvement_log_path: str = field(init=False, repr=False)
    _improvement_started: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)
        self._improvement_log_path = os.path.join(self.out_dir, "improvement_log.csv")

    @property
    def improvement_log_path(self) -> str:
        return self._improvement_log_path

    # -----------------------------
    # During search: improvements
    # -----------------------------
    def append_improvement(self, step_index: int, solution: Solution) -> str:
        """
        Append one row per new best-so-far.

        Columns:
          step_index, reward, assignment_json, remainders_json
        """
        if not self._improvement_started:
            with open(self._improvement_log_path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(["step_index", "reward", "assignment_json", "remainders_json"])
            self._improvement_started = True

        with open(self._improvement_log_path, "a", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                int(step_index),
                _fmt(solution.reward),
                json.dumps(list(solution.assignment)),
                json.dumps([float(p.remainder) for p in solution.patterns]),
            ])
        return self._improvement_log_path

    # -----------------------------
    # Final artifacts after solve
    # -----------------------------
    def write_cut_patterns_csv(
        self,
        state: CuttingState,
        solution: Solution,
        filename: str = "cut_patterns.csv",
    ) -> str:
        """
        Per-rod cut patterns.

        Columns:
          rod_id, original_length, cuts_json, pieces_cut, used, remainder,
          utilization_pct, remainder_sq
        """
        path = os.path.join(self.out_dir, filename)
        rows = per_rod_metrics(state, solution)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "rod_id",
                "original_length",
                "cuts_json",
                "pieces_cut",
                "used",
                "remainder",
                "utilization_pct",
                "remainder_sq",
            ])
            for row, pattern in zip(rows, solution.patterns):
                w.writerow([
                    row["rod_id"],
                    _fmt(row["original_length"]),
                    json.dumps([float(c) for c in pattern.cuts]),
                    row["pieces_cut"],
                    _fmt(row["used"]),
                    _fmt(row["remainder"]),
                    _fmt(row["utilization_pct"]),
                    _fmt(row["remainder_sq"]),
                ])
        return path

    def write_assignments_csv(
        self,
        state: CuttingState,
        solution: Solution,
        filename: str = "assignments.csv",
    ) -> str:
        """
        Final per-piece assignment snapshot.

        Columns:
          piece_id, length, rod_index, rod_id
        """
        path = os.path.join(self.out_dir, filename)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["piece_id", "length", "rod_index", "rod_id"])
            for piece, rod_index in zip(state.pieces, solution.assignment):
                w.writerow([
                    piece.id,
                    _fmt(piece.length),
                    rod_index,
                    state.rods[rod_index].id,
                ])
        return path

    def write_problem_summary_csv(
        self,
        state: CuttingState,
        solution: Optional[Solution],
        *,
        evaluated: int = 0,
        feasible: int = 0,
        elapsed_seconds: float = 0.0,
        filename: str = "problem_summary.csv",
    ) -> str:
        """
        Global KPIs plus search statistics. A None solution is recorded with
        Feasible = 0 and blank quality columns.
        """
        path = os.path.join(self.out_dir, filename)

        header = [
            # Problem features
            "Total Rods",
            "Total Pieces",
            "Capacity Sum",
            "Piece Length Sum",
            # Search statistics
            "Evaluated",
            "Feasible Assignments",
            "Elapsed Seconds",
            # Quality metrics
            "Feasible",
            "Reward",
            "OU",
            "Used Sum",
            "Remaining Sum",
            "Largest Remainder",
            "Rods Cut",
            "Untouched Rods",
        ]

        base = [
            state.num_rods,
            state.num_pieces,
            _fmt(sum(float(r.length) for r in state.rods)),
            _fmt(sum(float(p.length) for p in state.pieces)),
            int(evaluated),
            int(feasible),
            _fmt(elapsed_seconds),
        ]
        if solution is None:
            quality = [0] + [""] * 7
        else:
            m = compute_global_metrics(state, solution)
            quality = [
                1,
                _fmt(m["Reward"]),
                _fmt(m["OU"]),
                _fmt(m["Used Sum"]),
                _fmt(m["Remaining Sum"]),
                _fmt(m["Largest Remainder"]),
                int(m["Rods Cut"]),
                int(m["Untouched Rods"]),
            ]

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(header)
            w.writerow(base + quality)
        return path


def _fmt(x: float) -> str:
    return f"{float(x):.3f}"
