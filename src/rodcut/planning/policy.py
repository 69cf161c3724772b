# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the exhaustive cutting search.

Feasibility:
  - eps: absolute tolerance on the remainder >= 0 check. A rod is overcut only
    when its remainder drops below -eps; tolerated tiny negatives are reported
    as 0.0. Use eps=0.0 for exact inputs (ints, Fractions).

Tractability:
  - max_combinations: optional hard cap on rods ** pieces. The search refuses to
    start (SearchSpaceTooLargeError) above it. None disables the guard.

Logging:
  - progress_every: emit a DEBUG progress line every N evaluated identifiers
    (0 disables).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from rodcut.business_objects.errors import StateValidationError

# Brute force stays practical up to roughly this many combinations.
DEFAULT_MAX_COMBINATIONS: int = 1_000_000_000


@dataclass(frozen=True)
class Policy:
    """
    Search knobs (pure data holder).

    Attributes
    ----------
    eps : float
        Feasibility tolerance for remainder checks.
    max_combinations : int | None
        Refuse to enumerate search spaces larger than this.
    progress_every : int
        DEBUG progress log period, in evaluated identifiers.
    """
    eps: float = 1e-9
    max_combinations: Optional[int] = None
    progress_every: int = 1_000_000

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.eps >= 0:
            raise StateValidationError(f"Policy.eps must be >= 0, got {self.eps!r}.")
        if self.max_combinations is not None and self.max_combinations < 0:
            raise StateValidationError("Policy.max_combinations must be >= 0 or None.")
        if self.progress_every < 0:
            raise StateValidationError("Policy.progress_every must be >= 0.")
