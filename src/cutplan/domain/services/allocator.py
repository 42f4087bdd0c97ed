"""Assignment of pending pieces to stock bars."""

from __future__ import annotations

import logging
from typing import Sequence

from cutplan.domain.entities import Pattern
from cutplan.domain.exceptions import OversizedPieceError
from cutplan.domain.services.cancellation import CancellationToken
from cutplan.domain.services.pattern_search import PatternSearchEngine
from cutplan.domain.value_objects import Piece

logger = logging.getLogger(__name__)


class BarAllocator:
    """Drains the pending pool one bar at a time.

    Each iteration asks the search engine for the best-filling combination
    of the pieces still pending, turns it into a pattern and removes those
    pieces from the pool. Every iteration removes at least one piece, so
    the loop always terminates.
    """

    def __init__(self, engine: PatternSearchEngine | None = None) -> None:
        self.engine = engine or PatternSearchEngine()

    def allocate(
        self,
        pool: Sequence[Piece],
        bar_length: float,
        token: CancellationToken | None = None,
    ) -> list[Pattern]:
        """Cut every piece of ``pool`` from bars of ``bar_length``.

        Args:
            pool: Pending pieces, longest first. Not modified.
            bar_length: Length of each stock bar.
            token: Optional cancellation token.

        Returns:
            One pattern per bar used, in the order the bars were filled.

        Raises:
            OversizedPieceError: If pieces remain that are longer than a bar.
            ComputationCancelledError: If the token is cancelled.
        """
        pending = list(pool)
        patterns: list[Pattern] = []

        while pending:
            combination = self.engine.find_best(
                [p.length for p in pending], bar_length, token
            )
            if combination.is_empty:
                oversized = [p for p in pending if p.length > bar_length]
                raise OversizedPieceError(oversized or pending, bar_length)

            selected = set(combination.indices)
            pattern = Pattern.from_pieces(
                [pending[i] for i in combination.indices], bar_length
            )
            pending = [p for i, p in enumerate(pending) if i not in selected]
            patterns.append(pattern)

            logger.debug(
                "Bar %d: %d pieces, waste %g, %d pieces pending",
                len(patterns),
                pattern.piece_count,
                pattern.waste,
                len(pending),
            )

        return patterns


def allocate(
    pool: Sequence[Piece],
    bar_length: float,
    engine: PatternSearchEngine | None = None,
    token: CancellationToken | None = None,
) -> list[Pattern]:
    """Functional form of ``BarAllocator.allocate``."""
    return BarAllocator(engine).allocate(pool, bar_length, token)
