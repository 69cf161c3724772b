"""Tests for the assignment decoder and the reward function."""

from __future__ import annotations

import pytest

from rodcut.business_objects import StateValidationError
from rodcut.planning import CutPattern
from rodcut.planning.decoder import decode_assignment
from rodcut.planning.reward import compute_reward


class TestDecodeAssignment:
    """Tests for decode_assignment."""

    def test_builds_one_pattern_per_rod_in_piece_order(self) -> None:
        patterns = decode_assignment((1, 0, 1), [10, 8], [3, 2, 4])
        assert patterns == [
            CutPattern(original_length=10, cuts=(2,), remainder=8),
            CutPattern(original_length=8, cuts=(3, 4), remainder=1),
        ]

    def test_rod_without_pieces_keeps_full_length(self) -> None:
        patterns = decode_assignment((0,), [5, 7], [5])
        assert patterns is not None
        assert patterns[0].remainder == 0
        assert patterns[1] == CutPattern(original_length=7, cuts=(), remainder=7)

    def test_overcut_returns_none(self) -> None:
        assert decode_assignment((0, 0), [5, 100], [3, 3]) is None

    def test_fails_fast_on_first_overcut(self) -> None:
        # First piece alone already overcuts rod 0.
        assert decode_assignment((0, 1), [5, 100], [6, 1]) is None

    def test_digit_out_of_range_is_infeasible(self) -> None:
        assert decode_assignment((2,), [5, 5], [1]) is None
        assert decode_assignment((0,), [], [1]) is None

    def test_empty_identifier(self) -> None:
        assert decode_assignment((), [3, 4], []) == [
            CutPattern(3, (), 3),
            CutPattern(4, (), 4),
        ]
        assert decode_assignment((), [], []) == []

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(StateValidationError, match="digits"):
            decode_assignment((0,), [5], [1, 2])

    def test_eps_tolerates_rounding_noise(self) -> None:
        # 0.3 - 0.1 - 0.2 is slightly below zero in binary floating point.
        assert decode_assignment((0, 0), [0.3], [0.1, 0.2], eps=0.0) is None
        patterns = decode_assignment((0, 0), [0.3], [0.1, 0.2], eps=1e-9)
        assert patterns is not None
        assert patterns[0].remainder == 0.0

    def test_does_not_mutate_inputs(self) -> None:
        rods = [10, 10]
        pieces = [4, 4]
        ident = [0, 1]
        decode_assignment(ident, rods, pieces)
        assert rods == [10, 10]
        assert pieces == [4, 4]
        assert ident == [0, 1]


class TestComputeReward:
    """Tests for compute_reward."""

    def test_sum_of_squared_remainders(self) -> None:
        patterns = [CutPattern(10, (8,), 2), CutPattern(10, (), 10)]
        assert compute_reward(patterns) == 104

    def test_zero_remainder_contributes_nothing(self) -> None:
        assert compute_reward([CutPattern(5, (2, 3), 0)]) == 0

    def test_no_rods(self) -> None:
        assert compute_reward([]) == 0

    def test_concentrated_waste_scores_higher(self) -> None:
        concentrated = [CutPattern(10, (4, 4), 2), CutPattern(10, (), 10)]
        spread = [CutPattern(10, (4,), 6), CutPattern(10, (4,), 6)]
        assert compute_reward(concentrated) > compute_reward(spread)


class TestCutPattern:
    """Tests for CutPattern helpers."""

    def test_used_and_as_dict(self) -> None:
        p = CutPattern(original_length=10, cuts=(3, 4), remainder=3)
        assert p.used == 7
        assert p.as_dict() == {"original_length": 10, "cuts": [3, 4], "remainder": 3}
