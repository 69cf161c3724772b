"""Tests for KPI helpers and the CSV artifact Tracker."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Dict, List

import pytest

from rodcut.business_objects import StateValidationError
from rodcut.planning import CuttingState, Solution
from rodcut.planning.solvers.exhaustive import run_exhaustive
from rodcut.planning.tracker import Tracker
from rodcut.quality_metrics.core import compute_global_metrics, per_rod_metrics


def _read_rows(path: str) -> List[Dict[str, str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


@pytest.fixture
def solved(two_rod_state: CuttingState) -> Solution:
    solution = run_exhaustive(two_rod_state).best
    assert solution is not None
    return solution


# =============================================================================
# quality_metrics.core
# =============================================================================


class TestGlobalMetrics:
    """Tests for compute_global_metrics."""

    def test_two_rod_example(self, two_rod_state: CuttingState, solved: Solution) -> None:
        m = compute_global_metrics(two_rod_state, solved)
        assert m["Reward"] == 104.0
        assert m["Capacity Sum"] == 20.0
        assert m["Piece Length Sum"] == 8.0
        assert m["Used Sum"] == 8.0
        assert m["Remaining Sum"] == 12.0
        assert m["OU"] == pytest.approx(40.0)
        assert m["Largest Remainder"] == 10.0
        assert m["Rods Cut"] == 1.0
        assert m["Untouched Rods"] == 1.0
        assert m["Total Rods"] == 2.0
        assert m["Total Pieces"] == 2.0

    def test_empty_problem(self) -> None:
        state = CuttingState.from_lengths([], [])
        m = compute_global_metrics(state, Solution(patterns=(), reward=0, assignment=()))
        assert m["OU"] == 0.0
        assert m["Largest Remainder"] == 0.0

    def test_shape_mismatch_raises(self, solved: Solution) -> None:
        with pytest.raises(StateValidationError):
            compute_global_metrics(CuttingState.from_lengths([10], [4, 4]), solved)


class TestPerRodMetrics:
    """Tests for per_rod_metrics."""

    def test_rows(self, two_rod_state: CuttingState, solved: Solution) -> None:
        rows = per_rod_metrics(two_rod_state, solved)
        assert [r["rod_id"] for r in rows] == ["R1", "R2"]
        assert rows[0]["pieces_cut"] == 2
        assert rows[0]["used"] == 8.0
        assert rows[0]["utilization_pct"] == pytest.approx(80.0)
        assert rows[0]["remainder_sq"] == 4.0
        assert rows[0]["reward_share_pct"] == pytest.approx(400.0 / 104.0)
        assert rows[1]["pieces_cut"] == 0
        assert rows[1]["utilization_pct"] == 0.0
        assert rows[1]["reward_share_pct"] == pytest.approx(10000.0 / 104.0)

    def test_zero_length_rod_has_zero_utilization(self) -> None:
        state = CuttingState.from_lengths([0], [])
        solution = run_exhaustive(state).best
        assert solution is not None
        row = per_rod_metrics(state, solution)[0]
        assert row["utilization_pct"] == 0.0
        assert row["reward_share_pct"] == 0.0


# =============================================================================
# Tracker
# =============================================================================


class TestTracker:
    """Tests for CSV artifacts."""

    def test_creates_out_dir(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / "reports"
        Tracker(out_dir=str(out))
        assert out.is_dir()

    def test_improvement_log_records_each_new_best(self, tmp_path: Path) -> None:
        # (0,) scores 5**2 + 5**2 = 50, then (1,) scores 10**2 = 100.
        state = CuttingState.from_lengths([10, 5], [5])
        tracker = Tracker(out_dir=str(tmp_path))
        run_exhaustive(state, tracker=tracker)

        rows = _read_rows(tracker.improvement_log_path)
        assert [r["step_index"] for r in rows] == ["0", "1"]
        assert [r["reward"] for r in rows] == ["50.000", "100.000"]
        assert json.loads(rows[1]["assignment_json"]) == [1]
        assert json.loads(rows[1]["remainders_json"]) == [10.0, 0.0]

    def test_ties_are_not_logged(self, two_rod_state: CuttingState, tmp_path: Path) -> None:
        tracker = Tracker(out_dir=str(tmp_path))
        run_exhaustive(two_rod_state, tracker=tracker)
        rows = _read_rows(tracker.improvement_log_path)
        assert len(rows) == 1
        assert rows[0]["step_index"] == "0"

    def test_cut_patterns_csv(
        self, two_rod_state: CuttingState, solved: Solution, tmp_path: Path
    ) -> None:
        path = Tracker(out_dir=str(tmp_path)).write_cut_patterns_csv(two_rod_state, solved)
        rows = _read_rows(path)
        assert rows[0]["rod_id"] == "R1"
        assert json.loads(rows[0]["cuts_json"]) == [4.0, 4.0]
        assert rows[0]["remainder"] == "2.000"
        assert rows[0]["utilization_pct"] == "80.000"
        assert rows[1]["pieces_cut"] == "0"
        assert rows[1]["remainder_sq"] == "100.000"

    def test_assignments_csv(
        self, two_rod_state: CuttingState, solved: Solution, tmp_path: Path
    ) -> None:
        path = Tracker(out_dir=str(tmp_path)).write_assignments_csv(two_rod_state, solved)
        rows = _read_rows(path)
        assert [(r["piece_id"], r["rod_id"]) for r in rows] == [("P1", "R1"), ("P2", "R1")]
        assert rows[0]["length"] == "4.000"

    def test_problem_summary_csv(
        self, two_rod_state: CuttingState, solved: Solution, tmp_path: Path
    ) -> None:
        path = Tracker(out_dir=str(tmp_path)).write_problem_summary_csv(
            two_rod_state, solved, evaluated=4, feasible=4, elapsed_seconds=0.5
        )
        (row,) = _read_rows(path)
        assert row["Feasible"] == "1"
        assert row["Reward"] == "104.000"
        assert row["OU"] == "40.000"
        assert row["Evaluated"] == "4"
        assert row["Elapsed Seconds"] == "0.500"
        assert row["Rods Cut"] == "1"

    def test_problem_summary_without_solution(self, tmp_path: Path) -> None:
        state = CuttingState.from_lengths([3], [5])
        path = Tracker(out_dir=str(tmp_path)).write_problem_summary_csv(state, None, evaluated=1)
        (row,) = _read_rows(path)
        assert row["Feasible"] == "0"
        assert row["Reward"] == ""
        assert row["Capacity Sum"] == "3.000"
