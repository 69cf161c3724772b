"""Shared fixtures and the independent brute-force oracle."""

from __future__ import annotations

import itertools
from typing import Optional, Sequence, Tuple

import pytest

from rodcut.planning import CuttingState, Policy


def oracle_best(
    rods: Sequence[int], pieces: Sequence[int]
) -> Optional[Tuple[int, Tuple[int, ...]]]:
    """(reward, identifier) of the first optimum, via itertools.product; None if infeasible."""
    best: Optional[Tuple[int, Tuple[int, ...]]] = None
    for ident in itertools.product(range(len(rods)), repeat=len(pieces)):
        rem = list(rods)
        for piece, rod in zip(pieces, ident):
            rem[rod] -= piece
        if any(r < 0 for r in rem):
            continue
        reward = sum(r * r for r in rem)
        if best is None or reward > best[0]:
            best = (reward, ident)
    return best


@pytest.fixture
def exact_policy() -> Policy:
    """Policy with zero tolerance, for integer fixtures."""
    return Policy(eps=0.0)


@pytest.fixture
def two_rod_state() -> CuttingState:
    """Two 10-long rods and two 4-long pieces."""
    return CuttingState.from_lengths([10, 10], [4, 4])


@pytest.fixture
def medium_state() -> CuttingState:
    """3 rods ** 5 pieces = 243 identifiers."""
    return CuttingState.from_lengths([7, 5, 9], [2, 3, 4, 1, 5])
