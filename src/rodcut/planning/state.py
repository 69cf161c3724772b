# -*- coding: utf-8 -*-
"""
Input snapshot for a rod-cutting run.

This module defines:
  - CuttingState: immutable input snapshot (rod specs + pieces)

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.rods.RodSpec
  * business_objects.pieces.Piece
- Order matters: rods and pieces are kept exactly as given, because the
  enumeration order (and therefore tie-breaking) follows input order.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Sequence, Tuple

from rodcut.business_objects.errors import StateValidationError
from rodcut.business_objects.pieces import Piece
from rodcut.business_objects.rods import RodSpec


@dataclass(frozen=True)
class CuttingState:
    """
    Immutable problem input for a cutting run.

    Attributes
    ----------
    rods : tuple[RodSpec, ...]
        Available stock, in caller order.
    pieces : tuple[Piece, ...]
        Required pieces, in caller order. Every piece must be cut.
    """
    rods: Tuple[RodSpec, ...]
    pieces: Tuple[Piece, ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "rods", tuple(self.rods))
        object.__setattr__(self, "pieces", tuple(self.pieces))

        seen_rods: set[str] = set()
        for rod in self.rods:
            if not isinstance(rod, RodSpec):
                raise StateValidationError(f"Expected RodSpec, got {type(rod).__name__}.")
            if rod.id in seen_rods:
                raise StateValidationError(f"Duplicate RodSpec.id: {rod.id}")
            seen_rods.add(rod.id)

        seen_pieces: set[str] = set()
        for piece in self.pieces:
            if not isinstance(piece, Piece):
                raise StateValidationError(f"Expected Piece, got {type(piece).__name__}.")
            if piece.id in seen_pieces:
                raise StateValidationError(f"Duplicate Piece.id: {piece.id}")
            seen_pieces.add(piece.id)

    @classmethod
    def from_lengths(
        cls,
        rod_lengths: Sequence[Real],
        piece_lengths: Sequence[Real],
    ) -> "CuttingState":
        """Build a state from bare lengths, naming rods R1..Rm and pieces P1..Pn."""
        if isinstance(rod_lengths, (str, bytes)) or isinstance(piece_lengths, (str, bytes)):
            raise StateValidationError("Lengths must be sequences of numbers, not strings.")
        try:
            rods = [RodSpec(id=f"R{i}", length=x) for i, x in enumerate(rod_lengths, start=1)]
            pieces = [Piece(id=f"P{j}", length=x) for j, x in enumerate(piece_lengths, start=1)]
        except TypeError as e:
            raise StateValidationError(f"Lengths must be iterable sequences: {e}") from e
        return cls(rods=tuple(rods), pieces=tuple(pieces))

    @property
    def rod_lengths(self) -> List[Real]:
        return [r.length for r in self.rods]

    @property
    def piece_lengths(self) -> List[Real]:
        return [p.length for p in self.pieces]

    @property
    def num_rods(self) -> int:
        return len(self.rods)

    @property
    def num_pieces(self) -> int:
        return len(self.pieces)

    def by_rod_id(self) -> Dict[str, RodSpec]:
        """Convenience lookup table by rod id."""
        return {r.id: r for r in self.rods}
