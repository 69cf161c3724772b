#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Probe tractability on a random instance, solving in resumable chunks.

Usage:
  python scripts/run_random_problem.py
"""

from __future__ import annotations
import logging

# ====== CONFIGURATION ======
NUM_RODS = 4
NUM_PIECES = 9
MAX_ROD_LENGTH = 500.0
MAX_PIECE_LENGTH = 150.0
SEED = 42

# Identifiers evaluated per chunk before printing progress
CHUNK_SIZE = 50_000
MAX_COMBINATIONS = 1_000_000_000

LOG_LEVEL = logging.WARNING
# ===========================

from rodcut.planning import CuttingState, Policy
from rodcut.planning.odometer import estimate_seconds, search_space_size
from rodcut.planning.solvers.exhaustive import run_exhaustive
from rodcut.utils.formatting import format_solution, random_lengths, to_2dp


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)

    rods = sorted(random_lengths(NUM_RODS, MAX_ROD_LENGTH, seed=SEED))
    pieces = sorted(random_lengths(NUM_PIECES, MAX_PIECE_LENGTH, seed=SEED + 1))
    state = CuttingState.from_lengths(rods, pieces)

    space = search_space_size(NUM_RODS, NUM_PIECES)
    print("Rods:", to_2dp(rods))
    print("Pieces:", to_2dp(pieces))
    print(f"Search space: {space} (~{estimate_seconds(NUM_RODS, NUM_PIECES):.2f}s at 5M/s)")

    policy = Policy(max_combinations=MAX_COMBINATIONS)
    progress = None
    while progress is None or not progress.done:
        progress = run_exhaustive(state, policy, progress=progress, max_steps=CHUNK_SIZE)
        pct = 100.0 * progress.evaluated / space if space else 100.0
        best = "-" if progress.best is None else f"{float(progress.best.reward):.2f}"
        print(f"  {progress.evaluated}/{space} ({pct:.1f}%) best={best}")

    print("\n=== Solution ===")
    print(format_solution(progress.best))
    rate = progress.evaluated / progress.elapsed_seconds if progress.elapsed_seconds else float("inf")
    print(f"\nTime taken: {progress.elapsed_seconds:.3f} seconds ({rate:,.0f} identifiers/s)")


if __name__ == "__main__":
    main()
