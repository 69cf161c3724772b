# -*- coding: utf-8 -*-
"""
Assignment identifiers and the odometer that enumerates them.

An identifier is a sequence of rod indices, one digit per piece: digit j names
the rod piece j is cut from. With `base` rods and `length` pieces there are
exactly base ** length identifiers. They are visited in odometer order starting
from all zeros: the last digit turns fastest and carries leftward.

Public API:
  - increment_id(digits, base) -> bool
  - AssignmentCounter / CounterCheckpoint
  - search_space_size(num_rods, num_pieces) -> int
  - estimate_seconds(num_rods, num_pieces, throughput) -> float
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from rodcut.business_objects.errors import StateValidationError

# Rough evaluation rate of a compiled brute-force loop; pure Python is slower.
DEFAULT_THROUGHPUT: float = 5_000_000.0


def increment_id(digits: List[int], base: int) -> bool:
    """
    Advance `digits` in place to the next identifier.

    Returns True on overflow (every digit rolled over), which ends enumeration.
    A base <= 0 has no valid digits and overflows immediately.
    """
    if base <= 0:
        return True
    position = len(digits) - 1
    while position >= 0:
        if digits[position] < base - 1:
            digits[position] += 1
            return False
        digits[position] = 0
        position -= 1
    return True


def search_space_size(num_rods: int, num_pieces: int) -> int:
    """Number of piece→rod mappings. Zero pieces still has one (empty) mapping."""
    if num_rods < 0 or num_pieces < 0:
        raise StateValidationError("Rod and piece counts must be >= 0.")
    return num_rods ** num_pieces


def estimate_seconds(
    num_rods: int,
    num_pieces: int,
    throughput: float = DEFAULT_THROUGHPUT,
) -> float:
    if throughput <= 0:
        raise StateValidationError("throughput must be > 0.")
    return search_space_size(num_rods, num_pieces) / throughput


@dataclass(frozen=True)
class CounterCheckpoint:
    """
    Resumable position of an AssignmentCounter.

    Attributes
    ----------
    base : int
        Number of rods.
    digits : tuple[int, ...]
        Next identifier to be visited.
    exhausted : bool
        True once the whole space has been visited.
    """
    base: int
    digits: Tuple[int, ...]
    exhausted: bool = False


class AssignmentCounter:
    """
    Lazy, restartable enumeration of assignment identifiers.

    The counter always points at the next identifier to visit (`current`).
    `advance()` moves to the following one and reports exhaustion, so a loop
    can stop at any point, take a `checkpoint()` and resume later with
    `from_checkpoint()`.
    """

    def __init__(self, base: int, length: int) -> None:
        if base < 0 or length < 0:
            raise StateValidationError("AssignmentCounter needs base >= 0 and length >= 0.")
        self.base = base
        self.length = length
        self._digits: List[int] = [0] * length
        # No rods but some pieces: not even the all-zeros identifier is valid.
        self._exhausted = base == 0 and length > 0

    @classmethod
    def from_checkpoint(cls, checkpoint: CounterCheckpoint) -> "AssignmentCounter":
        counter = cls(base=checkpoint.base, length=len(checkpoint.digits))
        for d in checkpoint.digits:
            if not 0 <= d < max(checkpoint.base, 1):
                raise StateValidationError(
                    f"Checkpoint digit {d} out of range for base {checkpoint.base}."
                )
        counter._digits = list(checkpoint.digits)
        counter._exhausted = counter._exhausted or checkpoint.exhausted
        return counter

    @property
    def current(self) -> Tuple[int, ...]:
        return tuple(self._digits)

    @property
    def digits(self) -> List[int]:
        """Live digit list (read it, don't mutate it)."""
        return self._digits

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def advance(self) -> bool:
        """Step to the next identifier. Returns True once the space is exhausted."""
        if not self._exhausted:
            self._exhausted = increment_id(self._digits, self.base)
        return self._exhausted

    def position(self) -> int:
        """Zero-based rank of `current` in enumeration order."""
        if self._exhausted:
            return len(self)
        rank = 0
        for d in self._digits:
            rank = rank * self.base + d
        return rank

    def checkpoint(self) -> CounterCheckpoint:
        return CounterCheckpoint(base=self.base, digits=self.current, exhausted=self._exhausted)

    def reset(self) -> None:
        self._digits = [0] * self.length
        self._exhausted = self.base == 0 and self.length > 0

    def __len__(self) -> int:
        return search_space_size(self.base, self.length)

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        while not self._exhausted:
            yield self.current
            self.advance()

    def __repr__(self) -> str:
        return (
            f"AssignmentCounter(base={self.base}, length={self.length}, "
            f"current={self.current}, exhausted={self._exhausted})"
        )
