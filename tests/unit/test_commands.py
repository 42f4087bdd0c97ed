"""Tests for OptimizeCutsCommand, the end-to-end optimization use case."""

from __future__ import annotations

import logging
import threading
from collections import Counter

import pytest

from cutplan.application import (
    OptimizeCutsCommand,
    OptimizeRequest,
    OptimizerSettings,
)
from cutplan.domain import (
    CancellationToken,
    ClientInfo,
    ComputationCancelledError,
    CutRow,
    GroupingStrategy,
    InsufficientStockError,
    OversizedPieceError,
    StockSpec,
    ValidationError,
)


def _lengths(group) -> list[float]:
    return [p.length for p in group.pieces]


class _GatedCommand(OptimizeCutsCommand):
    """Holds every run until ``gate`` opens; ``started`` is set on entry."""

    def __init__(self) -> None:
        super().__init__(max_workers=1)
        self.started = threading.Event()
        self.gate = threading.Event()

    def execute(self, request, token=None):
        self.started.set()
        self.gate.wait(timeout=10)
        return super().execute(request, token)


class TestScenarios:
    """Reference scenarios for the optimizer."""

    def test_exact_fit_then_remainder(
        self, command: OptimizeCutsCommand, scenario_a_request: OptimizeRequest
    ) -> None:
        plan = command.execute(scenario_a_request)

        assert [_lengths(g) for g in plan.groups] == [[60.0, 40.0], [60.0]]
        assert [g.waste for g in plan.groups] == [0.0, 40.0]
        assert [g.multiplicity for g in plan.groups] == [1, 1]
        assert plan.bars_needed == 2
        assert plan.total_waste == pytest.approx(40.0)

    def test_insufficient_stock(
        self, command: OptimizeCutsCommand, scenario_a_cuts: tuple[CutRow, ...]
    ) -> None:
        request = OptimizeRequest(stock=StockSpec(100.0, 1), cuts=scenario_a_cuts)
        with pytest.raises(InsufficientStockError) as exc_info:
            command.execute(request)

        assert exc_info.value.needed == 2
        assert exc_info.value.available == 1

    def test_oversized_piece_terminates(self, command: OptimizeCutsCommand) -> None:
        request = OptimizeRequest(stock=StockSpec(50.0, 5), cuts=(CutRow(1, 60.0),))
        with pytest.raises(OversizedPieceError):
            command.execute(request)

    def test_identical_bars_aggregated(self, command: OptimizeCutsCommand) -> None:
        request = OptimizeRequest(stock=StockSpec(100.0, 5), cuts=(CutRow(9, 30.0),))
        plan = command.execute(request)

        assert len(plan.groups) == 1
        assert plan.groups[0].multiplicity == 3
        assert _lengths(plan.groups[0]) == [30.0, 30.0, 30.0]
        assert plan.bars_needed == 3

    def test_many_pieces_on_one_bar(self, command: OptimizeCutsCommand) -> None:
        request = OptimizeRequest(
            stock=StockSpec(2000.0, 5), cuts=(CutRow(1200, 1.0, "Spacer"),)
        )
        plan = command.execute(request)

        assert len(plan.groups) == 1
        assert plan.groups[0].pattern.piece_count == 1200
        assert plan.groups[0].waste == pytest.approx(800.0)
        assert plan.bars_needed == 1


class TestProperties:
    """Invariants that hold for any valid input."""

    REQUESTS = [
        OptimizeRequest(
            stock=StockSpec(6000.0, 20, "Alu"),
            cuts=(CutRow(4, 1200.0, "Frame"), CutRow(6, 850.5, "Rail"), CutRow(3, 2999.9, "Post")),
        ),
        OptimizeRequest(
            stock=StockSpec(12.0, 50),
            cuts=(CutRow(7, 5.0, "x"), CutRow(5, 3.5, "y"), CutRow(4, 2.25, "z")),
        ),
        OptimizeRequest(stock=StockSpec(2.4, 10), cuts=(CutRow(10, 0.8, "short"),)),
    ]

    @pytest.mark.parametrize("request_", REQUESTS)
    def test_conservation(self, command: OptimizeCutsCommand, request_: OptimizeRequest) -> None:
        plan = command.execute(request_)

        placed: Counter = Counter()
        for group in plan.groups:
            for piece in group.pieces:
                placed[piece.identity] += group.multiplicity
        expected = Counter()
        for row in request_.cuts:
            expected[(row.label, row.length)] += row.quantity
        assert placed == expected
        assert plan.piece_count == sum(expected.values())

    @pytest.mark.parametrize("request_", REQUESTS)
    def test_balance_and_totals(self, command: OptimizeCutsCommand, request_: OptimizeRequest) -> None:
        plan = command.execute(request_)

        for group in plan.groups:
            used = sum(p.length for p in group.pieces)
            assert used + group.waste == pytest.approx(group.bar_length, abs=1e-9)
            assert group.waste >= 0
        assert plan.bars_needed == sum(g.multiplicity for g in plan.groups)
        assert plan.total_waste == pytest.approx(
            sum(g.waste * g.multiplicity for g in plan.groups)
        )

    @pytest.mark.parametrize("request_", REQUESTS)
    def test_deterministic(self, command: OptimizeCutsCommand, request_: OptimizeRequest) -> None:
        assert command.execute(request_) == command.execute(request_)


class TestSettings:
    """Settings and per-request overrides."""

    def test_per_request_grouping_override(self, command: OptimizeCutsCommand) -> None:
        request = OptimizeRequest(
            stock=StockSpec(100.0, 10),
            cuts=(CutRow(1, 50.0, "A"), CutRow(2, 50.0, "B"), CutRow(1, 50.0, "A")),
            grouping=GroupingStrategy.UNORDERED,
        )
        plan = command.execute(request)
        assert len(plan.groups) == 1
        assert plan.groups[0].multiplicity == 2

    def test_default_grouping_is_ordered(self, command: OptimizeCutsCommand) -> None:
        request = OptimizeRequest(
            stock=StockSpec(100.0, 10),
            cuts=(CutRow(1, 50.0, "A"), CutRow(2, 50.0, "B"), CutRow(1, 50.0, "A")),
        )
        assert len(command.execute(request).groups) == 2

    def test_max_cut_rows(self) -> None:
        command = OptimizeCutsCommand(OptimizerSettings(max_cut_rows=2))
        request = OptimizeRequest(
            stock=StockSpec(100.0, 10),
            cuts=(CutRow(1, 10.0), CutRow(1, 20.0), CutRow(1, 30.0)),
        )
        with pytest.raises(ValidationError):
            command.execute(request)

    def test_client_carried_to_plan(
        self, command: OptimizeCutsCommand, scenario_a_cuts: tuple[CutRow, ...]
    ) -> None:
        client = ClientInfo(code="C-7", name="Smith")
        request = OptimizeRequest(stock=StockSpec(100.0, 5), cuts=scenario_a_cuts, client=client)
        assert command.execute(request).client == client

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tolerance": -1.0},
            {"timeout_seconds": 0.0},
            {"max_cut_rows": 0},
            {"max_pieces": 0},
        ],
    )
    def test_invalid_settings(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            OptimizerSettings(**kwargs)

    def test_max_pieces(self) -> None:
        command = OptimizeCutsCommand(OptimizerSettings(max_pieces=10))
        request = OptimizeRequest(stock=StockSpec(100.0, 10), cuts=(CutRow(11, 5.0),))
        with pytest.raises(ValidationError, match="At most 10 pieces"):
            command.execute(request)

    def test_with_overrides_ignores_none(self) -> None:
        settings = OptimizerSettings(timeout_seconds=5.0)
        assert settings.with_overrides() == settings
        assert settings.with_overrides(timeout_seconds=1.0).timeout_seconds == 1.0


class TestCancellationAndWorkers:
    """Timeout hook and background execution."""

    def test_cancelled_token(
        self, command: OptimizeCutsCommand, scenario_a_request: OptimizeRequest
    ) -> None:
        token = CancellationToken()
        token.cancel()
        with pytest.raises(ComputationCancelledError):
            command.execute(scenario_a_request, token)

    def test_submit_runs_in_background(self, scenario_a_request: OptimizeRequest) -> None:
        with OptimizeCutsCommand() as command:
            running = command.submit(scenario_a_request)
            plan = running.result(timeout=10)

        assert running.done()
        assert plan.bars_needed == 2

    def test_background_result_matches_synchronous(
        self, scenario_a_request: OptimizeRequest
    ) -> None:
        with OptimizeCutsCommand(max_workers=2) as command:
            handles = [command.submit(scenario_a_request) for _ in range(3)]
            results = [h.result(timeout=10) for h in handles]
            expected = command.execute(scenario_a_request)

        assert all(r == expected for r in results)

    def test_background_errors_propagate(self, scenario_a_cuts: tuple[CutRow, ...]) -> None:
        request = OptimizeRequest(stock=StockSpec(100.0, 1), cuts=scenario_a_cuts)
        with OptimizeCutsCommand() as command:
            running = command.submit(request)
            with pytest.raises(InsufficientStockError):
                running.result(timeout=10)

    def test_cancel_queued_run(self, scenario_a_request: OptimizeRequest) -> None:
        with _GatedCommand() as command:
            first = command.submit(scenario_a_request)
            queued = command.submit(scenario_a_request)
            queued.cancel()
            command.gate.set()

            with pytest.raises(ComputationCancelledError):
                queued.result(timeout=10)
            assert first.result(timeout=10).bars_needed == 2

    def test_cancel_running_run(self, scenario_a_request: OptimizeRequest) -> None:
        with _GatedCommand() as command:
            running = command.submit(scenario_a_request)
            assert command.started.wait(timeout=10)
            running.cancel()
            command.gate.set()

            with pytest.raises(ComputationCancelledError):
                running.result(timeout=10)
            assert running.done()

    def test_close_is_idempotent(self) -> None:
        command = OptimizeCutsCommand()
        command.close()
        command.close()


class TestLogging:
    def test_run_summary_logged(
        self,
        command: OptimizeCutsCommand,
        scenario_a_request: OptimizeRequest,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="cutplan"):
            command.execute(scenario_a_request)
        assert "Planned 3 pieces on 2 of 10 bars" in caplog.text

    def test_cancellation_logged(
        self,
        command: OptimizeCutsCommand,
        scenario_a_request: OptimizeRequest,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        token = CancellationToken()
        token.cancel()
        with caplog.at_level(logging.WARNING, logger="cutplan"):
            with pytest.raises(ComputationCancelledError):
                command.execute(scenario_a_request, token)
        assert "Optimization of 3 pieces stopped" in caplog.text
