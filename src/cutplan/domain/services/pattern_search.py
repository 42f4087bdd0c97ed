"""Best single-bar pattern search.

Finds the combination of pending pieces that fills one stock bar with
the least waste. The search is an exhaustive backtracking walk over
combinations (never permutations) of the pending pool, so its worst case
is exponential in the pool size. It is intended for pools of tens of
pieces; larger inputs should be bounded with a ``CancellationToken``.

Traversal order is fixed: indices are tried in ascending order and a
candidate replaces the best-so-far only when it fills the bar strictly
better (by more than the tolerance). The returned combination is
therefore the first best one discovered, and identical input always
yields the identical combination.

The pruning rules below never change the result:

- the search stops as soon as a combination fills the bar exactly;
- a subtree is skipped when even all of its remaining pieces could not
  beat the best-so-far;
- at one depth, a piece whose length equals one already tried there is
  skipped, since every combination it leads to was already found
  through the earlier, equal-length piece.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Sequence

from cutplan.domain.services.cancellation import NEVER_CANCELLED, CancellationToken

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Combination:
    """A set of pool indices and the total length they occupy.

    Attributes:
        indices: Selected pool indices in ascending (selection) order.
        total: Sum of the selected lengths.
    """

    indices: tuple[int, ...] = ()
    total: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.indices


class _SearchContext:
    """Read-only inputs of one search plus the cancellation tick counter."""

    def __init__(
        self,
        lengths: Sequence[float],
        bar_length: float,
        tolerance: float,
        token: CancellationToken,
        check_interval: int,
    ) -> None:
        self.lengths = tuple(lengths)
        self.bar_length = bar_length
        self.tolerance = tolerance
        self.token = token
        self.check_interval = check_interval
        self.nodes = itertools.count(1)
        # suffix[i] = sum(lengths[i:])
        suffix = [0.0] * (len(self.lengths) + 1)
        for i in range(len(self.lengths) - 1, -1, -1):
            suffix[i] = suffix[i + 1] + self.lengths[i]
        self.suffix = tuple(suffix)

    def tick(self) -> None:
        if next(self.nodes) % self.check_interval == 0:
            self.token.check()

    def fits(self, total: float) -> bool:
        return total <= self.bar_length + self.tolerance

    def is_perfect(self, best: Combination) -> bool:
        return not best.is_empty and self.bar_length - best.total <= self.tolerance


def _improves(ctx: _SearchContext, chosen: tuple[int, ...], total: float, best: Combination) -> bool:
    if not chosen:
        return False
    if best.is_empty:
        return True
    return total - best.total > ctx.tolerance


@dataclass
class _Frame:
    """A node whose children are still being explored.

    Attributes:
        chosen: Indices selected on the path to this node.
        total: Sum of the selected lengths.
        next_index: First pool index not yet considered as a child.
        tried: Lengths already tried as children of this node.
    """

    chosen: tuple[int, ...]
    total: float
    next_index: int
    tried: set[float] = field(default_factory=set)


def _next_child(ctx: _SearchContext, frame: _Frame) -> tuple[tuple[int, ...], float, int] | None:
    """Advance ``frame`` to its next child worth visiting.

    Returns ``(chosen, total, start)`` of that child, or None when the
    frame is exhausted.
    """
    for i in range(frame.next_index, len(ctx.lengths)):
        length = ctx.lengths[i]
        if length in frame.tried:
            continue
        frame.tried.add(length)
        # A piece that does not fit is skipped; a later, shorter one may
        if not ctx.fits(frame.total + length):
            continue
        frame.next_index = i + 1
        return frame.chosen + (i,), frame.total + length, i + 1
    frame.next_index = len(ctx.lengths)
    return None


def _search(ctx: _SearchContext) -> Combination:
    """Explore every combination depth-first and return the best one.

    Nodes are visited in the order a recursive walk over ascending
    indices would visit them, using an explicit stack so that the depth
    is not bounded by the interpreter's recursion limit.
    """
    best = Combination()
    stack: list[_Frame] = []
    node: tuple[tuple[int, ...], float, int] | None = ((), 0.0, 0)

    while node is not None:
        chosen, total, start = node
        ctx.tick()

        if _improves(ctx, chosen, total, best):
            best = Combination(indices=chosen, total=total)
        bounded = not best.is_empty and total + ctx.suffix[start] - best.total <= ctx.tolerance
        if not ctx.is_perfect(best) and not bounded:
            stack.append(_Frame(chosen=chosen, total=total, next_index=start))

        node = None
        while stack and node is None:
            if ctx.is_perfect(best):
                stack.clear()
                break
            node = _next_child(ctx, stack[-1])
            if node is None:
                stack.pop()

    return best


class PatternSearchEngine:
    """Finds the best-filling combination of pieces for a single bar.

    Attributes:
        tolerance: Slack allowed when testing whether pieces fit and when
            comparing totals, absorbing floating-point representation error.
        check_interval: Number of search nodes between cancellation checks.
    """

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        check_interval: int = 1024,
    ) -> None:
        if tolerance < 0:
            raise ValueError("Tolerance must be non-negative")
        if check_interval < 1:
            raise ValueError("Check interval must be at least 1")
        self.tolerance = tolerance
        self.check_interval = check_interval

    def find_best(
        self,
        lengths: Sequence[float],
        bar_length: float,
        token: CancellationToken | None = None,
    ) -> Combination:
        """Search for the combination of ``lengths`` that best fills a bar.

        Args:
            lengths: Lengths of the pending pool, in pool order.
            bar_length: Length of the stock bar.
            token: Optional cancellation token polled during the search.

        Returns:
            The best combination; empty if no single piece fits.

        Raises:
            ComputationCancelledError: If the token is cancelled mid-search.
        """
        token = token or NEVER_CANCELLED
        token.check()
        if not lengths:
            return Combination()

        ctx = _SearchContext(
            lengths, bar_length, self.tolerance, token, self.check_interval
        )
        best = _search(ctx)
        logger.debug(
            "Searched %d pieces for bar %g: %d selected, waste %g",
            len(lengths),
            bar_length,
            len(best.indices),
            bar_length - best.total,
        )
        return best


def find_best_combination(
    lengths: Sequence[float],
    bar_length: float,
    tolerance: float = DEFAULT_TOLERANCE,
    token: CancellationToken | None = None,
) -> tuple[int, ...]:
    """Return the indices of the best-filling combination for one bar."""
    engine = PatternSearchEngine(tolerance=tolerance)
    return engine.find_best(lengths, bar_length, token).indices
