"""Tests for cutting-plan value objects and entities."""

from __future__ import annotations

import pytest

from cutplan.domain import (
    CuttingPlan,
    GroupingStrategy,
    Pattern,
    PatternGroup,
    PatternKey,
    Piece,
    StockSpec,
)


class TestPiece:
    """Tests for the Piece value object."""

    def test_identity_is_label_and_length(self) -> None:
        assert Piece(length=60.0, label="Frame").identity == ("Frame", 60.0)

    @pytest.mark.parametrize("length", [0.0, -5.0])
    def test_non_positive_length_rejected(self, length: float) -> None:
        with pytest.raises(ValueError, match="positive"):
            Piece(length=length)

    def test_equal_pieces_compare_equal(self) -> None:
        assert Piece(60.0, "a") == Piece(60.0, "a")
        assert Piece(60.0, "a") != Piece(60.0, "b")


class TestPattern:
    """Tests for the Pattern entity."""

    def test_from_pieces_computes_waste(self) -> None:
        pattern = Pattern.from_pieces([Piece(60.0), Piece(30.0)], 100.0)
        assert pattern.waste == pytest.approx(10.0)
        assert pattern.used_length == pytest.approx(90.0)
        assert pattern.piece_count == 2

    def test_from_pieces_clamps_tiny_overshoot(self) -> None:
        pattern = Pattern.from_pieces([Piece(0.1), Piece(0.1), Piece(0.1)], 0.3)
        assert pattern.waste == 0.0

    def test_negative_waste_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Pattern(pieces=(Piece(60.0),), bar_length=50.0, waste=-10.0)


class TestPatternKey:
    """Tests for canonical pattern keys."""

    def test_ordered_key_keeps_placement_order(self) -> None:
        first = Pattern.from_pieces([Piece(50.0, "A"), Piece(50.0, "B")], 100.0)
        second = Pattern.from_pieces([Piece(50.0, "B"), Piece(50.0, "A")], 100.0)
        assert PatternKey.for_pattern(first) != PatternKey.for_pattern(second)

    def test_unordered_key_ignores_placement_order(self) -> None:
        first = Pattern.from_pieces([Piece(50.0, "A"), Piece(50.0, "B")], 100.0)
        second = Pattern.from_pieces([Piece(50.0, "B"), Piece(50.0, "A")], 100.0)
        strategy = GroupingStrategy.UNORDERED
        assert PatternKey.for_pattern(first, strategy) == PatternKey.for_pattern(
            second, strategy
        )

    def test_key_is_hashable_value(self) -> None:
        pattern = Pattern.from_pieces([Piece(30.0, "x")], 100.0)
        keys = {PatternKey.for_pattern(pattern), PatternKey.for_pattern(pattern)}
        assert len(keys) == 1
        assert PatternKey.for_pattern(pattern).items == (("x", 30.0),)

    def test_labels_distinguish_keys(self) -> None:
        """Keys compare tuples, so '1|2' style string collisions cannot occur."""
        first = Pattern.from_pieces([Piece(2.0, "1|")], 10.0)
        second = Pattern.from_pieces([Piece(2.0, "1")], 10.0)
        assert PatternKey.for_pattern(first) != PatternKey.for_pattern(second)


class TestPatternGroup:
    """Tests for the PatternGroup entity."""

    def test_total_waste_scales_with_multiplicity(self) -> None:
        pattern = Pattern.from_pieces([Piece(30.0)] * 3, 100.0)
        group = PatternGroup(
            key=PatternKey.for_pattern(pattern), pattern=pattern, multiplicity=3
        )
        assert group.total_waste == pytest.approx(30.0)
        assert group.pieces == pattern.pieces
        assert group.bar_length == 100.0

    def test_zero_multiplicity_rejected(self) -> None:
        pattern = Pattern.from_pieces([Piece(30.0)], 100.0)
        with pytest.raises(ValueError):
            PatternGroup(
                key=PatternKey.for_pattern(pattern), pattern=pattern, multiplicity=0
            )


class TestCuttingPlan:
    """Tests for CuttingPlan derived values."""

    @pytest.fixture
    def plan(self) -> CuttingPlan:
        full = Pattern.from_pieces([Piece(60.0), Piece(40.0)], 100.0)
        partial = Pattern.from_pieces([Piece(60.0)], 100.0)
        groups = (
            PatternGroup(key=PatternKey.for_pattern(full), pattern=full),
            PatternGroup(key=PatternKey.for_pattern(partial), pattern=partial),
        )
        return CuttingPlan(
            stock=StockSpec(bar_length=100.0, bar_count=10),
            groups=groups,
            bars_needed=2,
            total_waste=40.0,
        )

    def test_bars_remaining(self, plan: CuttingPlan) -> None:
        assert plan.bars_available == 10
        assert plan.bars_remaining == 8

    def test_piece_count(self, plan: CuttingPlan) -> None:
        assert plan.piece_count == 3

    def test_utilization(self, plan: CuttingPlan) -> None:
        assert plan.utilization == pytest.approx(0.8)
