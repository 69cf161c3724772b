# -*- coding: utf-8 -*-
"""
Exhaustive (brute-force) cutting solver.

Visits every piece→rod mapping in odometer order and keeps the feasible plan
with the highest reward (sum of squared remainders).

Pipeline per identifier:
  1) Decode the identifier into per-rod cut patterns (None if a rod is overcut)
  2) Score feasible patterns with compute_reward
  3) Replace best-so-far only on a strictly greater reward, so ties keep the
     earliest identifier in enumeration order
  4) Advance the odometer; stop on overflow

Resumable mode:
  run_exhaustive(..., max_steps=N) stops after N identifiers and returns a
  SearchProgress. Feed it back via `progress=` to continue where it left off.
  Chunked runs return exactly the same Solution as one uninterrupted run.

Tractable for small instances only: rods ** pieces <= ~1e9.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Sequence

from rodcut.business_objects.errors import SearchSpaceTooLargeError, StateValidationError
from rodcut.planning import CuttingState, Policy, Solution
from rodcut.planning.decoder import decode_assignment
from rodcut.planning.odometer import AssignmentCounter, CounterCheckpoint, search_space_size
from rodcut.planning.reward import compute_reward
from rodcut.planning.tracker import Tracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchProgress:
    """
    Snapshot of an (possibly unfinished) exhaustive search.

    Attributes
    ----------
    checkpoint : CounterCheckpoint
        Next identifier to evaluate.
    best : Solution | None
        Best feasible plan seen so far; None if none yet (or none exists once done).
    evaluated : int
        Identifiers decoded so far.
    feasible : int
        Identifiers that produced a feasible plan.
    elapsed_seconds : float
        Wall time spent enumerating, summed over chunks.
    """
    checkpoint: CounterCheckpoint
    best: Optional[Solution]
    evaluated: int = 0
    feasible: int = 0
    elapsed_seconds: float = 0.0

    @property
    def done(self) -> bool:
        return self.checkpoint.exhausted


def _check_progress_matches(state: CuttingState, progress: SearchProgress) -> None:
    cp = progress.checkpoint
    if cp.base != state.num_rods or len(cp.digits) != state.num_pieces:
        raise StateValidationError(
            f"Checkpoint shape (rods={cp.base}, pieces={len(cp.digits)}) does not match "
            f"the problem (rods={state.num_rods}, pieces={state.num_pieces})."
        )
    if progress.best is not None and len(progress.best.patterns) != state.num_rods:
        raise StateValidationError("Checkpoint best solution does not match the rod count.")


def run_exhaustive(
    state: CuttingState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
    *,
    progress: Optional[SearchProgress] = None,
    max_steps: Optional[int] = None,
) -> SearchProgress:
    """
    Enumerate assignments (optionally only a chunk of them).

    Parameters
    ----------
    state : CuttingState
        Immutable problem input. Order of rods/pieces drives tie-breaking.
    policy : Policy | None
        Uses policy.eps, policy.max_combinations and policy.progress_every.
    tracker : Tracker | None
        If provided, appends a row to improvement_log.csv on every new best.
    progress : SearchProgress | None
        Resume from a previous chunk; None starts at the all-zeros identifier.
    max_steps : int | None
        Evaluate at most this many identifiers in this call.

    Returns
    -------
    SearchProgress
        `done` is True once the whole space was visited; `best` is then the
        optimum, or None when no feasible assignment exists.
    """
    policy = policy or Policy()
    if max_steps is not None and max_steps < 0:
        raise StateValidationError("max_steps must be >= 0 or None.")

    space = search_space_size(state.num_rods, state.num_pieces)
    if policy.max_combinations is not None and space > policy.max_combinations:
        raise SearchSpaceTooLargeError(
            f"{state.num_rods} rods ** {state.num_pieces} pieces = {space} combinations "
            f"exceeds the limit of {policy.max_combinations}."
        )

    if progress is None:
        counter = AssignmentCounter(base=state.num_rods, length=state.num_pieces)
        best: Optional[Solution] = None
        evaluated = 0
        feasible = 0
        elapsed = 0.0
        logger.info(
            "Starting exhaustive search: %d rods, %d pieces, %d combinations",
            state.num_rods, state.num_pieces, space,
        )
    else:
        _check_progress_matches(state, progress)
        counter = AssignmentCounter.from_checkpoint(progress.checkpoint)
        best = progress.best
        evaluated = progress.evaluated
        feasible = progress.feasible
        elapsed = progress.elapsed_seconds
        logger.debug("Resuming exhaustive search at identifier %s", counter.current)

    rod_lengths = state.rod_lengths
    piece_lengths = state.piece_lengths
    steps = 0
    start = time.perf_counter()

    while not counter.exhausted:
        if max_steps is not None and steps >= max_steps:
            break

        patterns = decode_assignment(counter.digits, rod_lengths, piece_lengths, eps=policy.eps)
        evaluated += 1
        steps += 1

        if patterns is not None:
            feasible += 1
            reward = compute_reward(patterns)
            if best is None or reward > best.reward:
                best = Solution(patterns=tuple(patterns), reward=reward, assignment=counter.current)
                logger.debug("New best reward %r at identifier %s", reward, best.assignment)
                if tracker is not None:
                    tracker.append_improvement(step_index=evaluated - 1, solution=best)

        if policy.progress_every and evaluated % policy.progress_every == 0:
            logger.debug("Evaluated %d / %d identifiers (%d feasible)", evaluated, space, feasible)

        counter.advance()

    elapsed += time.perf_counter() - start
    result = SearchProgress(
        checkpoint=counter.checkpoint(),
        best=best,
        evaluated=evaluated,
        feasible=feasible,
        elapsed_seconds=elapsed,
    )

    if result.done:
        if best is None:
            logger.info(
                "Exhaustive search finished: no feasible assignment among %d identifiers (%.3fs)",
                evaluated, elapsed,
            )
        else:
            logger.info(
                "Exhaustive search finished: best reward %r, %d evaluated, %d feasible (%.3fs)",
                best.reward, evaluated, feasible, elapsed,
            )
    return result


def optimize(
    rod_lengths: Sequence[Real],
    piece_lengths: Sequence[Real],
    policy: Optional[Policy] = None,
) -> Optional[Solution]:
    """
    Best way to cut `piece_lengths` from `rod_lengths`.

    Inputs are validated eagerly (StateValidationError) and used in the given
    order; sort them beforehand if a canonical tie-break is wanted.

    Returns
    -------
    Solution | None
        The plan maximising the sum of squared remainders, or None when no
        assignment fits.
    """
    state = CuttingState.from_lengths(rod_lengths, piece_lengths)
    return run_exhaustive(state, policy).best
