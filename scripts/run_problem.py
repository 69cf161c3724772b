#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the exhaustive cutting search on problems/problem_1 and export CSV artifacts.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - improvement_log.csv  (every new best found during the search)
  - cut_patterns.csv     (per-rod cuts and remainders)
  - assignments.csv      (per-piece rod assignment)
  - problem_summary.csv  (global KPIs + search statistics)
"""

from __future__ import annotations
import logging

# ====== CONFIGURATION ======
RODS_PATH = "problems/problem_1/rods.json"
PIECES_PATH = "problems/problem_1/pieces.json"
OUT_DIR = "reports/problem_1"

# Sort rods and pieces ascending before solving (fixes tie-break order)
SORT_INPUTS = True

# Feasibility tolerance and tractability guard
EPS = 1e-9
MAX_COMBINATIONS = 1_000_000_000

LOG_LEVEL = logging.INFO
# ============================

from rodcut.planning import Policy
from rodcut.planning.odometer import estimate_seconds, search_space_size
from rodcut.planning.solvers.exhaustive import run_exhaustive
from rodcut.planning.tracker import Tracker
from rodcut.utils.formatting import format_solution, to_2dp
from rodcut.utils.read_jsons import read_problem


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Load problem
    state = read_problem(RODS_PATH, PIECES_PATH, sort=SORT_INPUTS)
    print("Rods:", to_2dp(state.rod_lengths))
    print("Pieces:", to_2dp(state.piece_lengths))
    print(
        f"Search space: {search_space_size(state.num_rods, state.num_pieces)} combinations "
        f"(~{estimate_seconds(state.num_rods, state.num_pieces):.1f}s at 5M/s)"
    )

    policy = Policy(eps=EPS, max_combinations=MAX_COMBINATIONS)
    tracker = Tracker(out_dir=OUT_DIR)

    # Solve
    progress = run_exhaustive(state, policy, tracker=tracker)
    solution = progress.best

    # Artifacts
    if solution is not None:
        tracker.write_cut_patterns_csv(state, solution)
        tracker.write_assignments_csv(state, solution)
    tracker.write_problem_summary_csv(
        state,
        solution,
        evaluated=progress.evaluated,
        feasible=progress.feasible,
        elapsed_seconds=progress.elapsed_seconds,
    )

    print("\n=== Solution ===")
    print(format_solution(solution))
    print(f"\nTime taken: {progress.elapsed_seconds:.3f} seconds")
    print(f"Artifacts written to: {OUT_DIR}")


if __name__ == "__main__":
    main()
