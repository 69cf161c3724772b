# -*- coding: utf-8 -*-
"""
Assignment decoder: identifier -> per-rod cut patterns.

Pure function, no side effects. Infeasible identifiers yield None; they are
an expected, silent outcome of the search rather than an error.
"""

from __future__ import annotations
from numbers import Real
from typing import List, Optional, Sequence

from rodcut.business_objects.errors import StateValidationError
from .solution import CutPattern


def decode_assignment(
    identifier: Sequence[int],
    rod_lengths: Sequence[Real],
    piece_lengths: Sequence[Real],
    eps: float = 0.0,
) -> Optional[List[CutPattern]]:
    """
    Cut each piece from the rod its digit names, in piece order.

    Parameters
    ----------
    identifier : Sequence[int]
        One rod index per piece.
    rod_lengths, piece_lengths : Sequence[Real]
        Problem lengths, already validated.
    eps : float
        A remainder is overcut only below -eps. Tolerated negatives become 0.0.

    Returns
    -------
    list[CutPattern] | None
        One pattern per rod, or None as soon as a rod is overcut or a digit
        names no rod.
    """
    if len(identifier) != len(piece_lengths):
        raise StateValidationError(
            f"Identifier has {len(identifier)} digits but there are {len(piece_lengths)} pieces."
        )

    num_rods = len(rod_lengths)
    cuts: List[List[Real]] = [[] for _ in range(num_rods)]
    remainders: List[Real] = list(rod_lengths)

    for piece_length, rod_index in zip(piece_lengths, identifier):
        if not 0 <= rod_index < num_rods:
            return None
        cuts[rod_index].append(piece_length)
        remainders[rod_index] -= piece_length
        if remainders[rod_index] < -eps:
            return None

    return [
        CutPattern(
            original_length=rod_lengths[i],
            cuts=tuple(cuts[i]),
            remainder=0.0 if remainders[i] < 0 else remainders[i],
        )
        for i in range(num_rods)
    ]
