"""Application commands (use cases) for cut optimization."""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from dataclasses import dataclass

from cutplan.domain import (
    BarAllocator,
    CancellationToken,
    ComputationCancelledError,
    CuttingPlan,
    PatternSearchEngine,
    aggregate,
    normalize,
    validate_stock_quantity,
)

from .dtos import OptimizeRequest
from .settings import OptimizerSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunningOptimization:
    """Handle on an optimization submitted to a background worker."""

    future: Future[CuttingPlan]
    token: CancellationToken

    def cancel(self) -> None:
        """Stop the run; ``result()`` then raises ComputationCancelledError."""
        self.token.cancel()
        self.future.cancel()

    def done(self) -> bool:
        return self.future.done()

    def result(self, timeout: float | None = None) -> CuttingPlan:
        """Wait for the plan.

        Raises:
            ComputationCancelledError: If the run was cancelled, whether it
                was still queued or already running.
        """
        try:
            return self.future.result(timeout=timeout)
        except CancelledError as e:
            raise ComputationCancelledError() from e


class OptimizeCutsCommand:
    """Command to compute a cutting plan.

    Composes the pipeline normalize -> allocate -> aggregate -> validate.
    Each run works on its own copy of the input and shares no state with
    other runs, so one command instance can serve concurrent callers.
    """

    def __init__(
        self,
        settings: OptimizerSettings | None = None,
        max_workers: int = 1,
    ) -> None:
        self.settings = settings or OptimizerSettings()
        self.max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None

    def execute(
        self,
        request: OptimizeRequest,
        token: CancellationToken | None = None,
    ) -> CuttingPlan:
        """Run the optimization synchronously.

        Args:
            request: Stock, cuts and per-request options.
            token: Cancellation token; when omitted one is created from
                the effective timeout.

        Returns:
            The cutting plan.

        Raises:
            ValidationError: If the input is invalid.
            OversizedPieceError: If a piece is longer than the stock bar.
            InsufficientStockError: If the stock has too few bars.
            ComputationCancelledError: If cancelled or timed out.
        """
        settings = self.settings.with_overrides(
            grouping=request.grouping, timeout_seconds=request.timeout_seconds
        )
        if token is None:
            token = CancellationToken(timeout=settings.timeout_seconds)

        pool = normalize(
            request.stock,
            request.cuts,
            max_rows=settings.max_cut_rows,
            max_pieces=settings.max_pieces,
        )
        allocator = BarAllocator(PatternSearchEngine(tolerance=settings.tolerance))
        try:
            patterns = allocator.allocate(pool, request.stock.bar_length, token)
        except ComputationCancelledError as e:
            logger.warning("Optimization of %d pieces stopped: %s", len(pool), e)
            raise
        groups = aggregate(patterns, settings.grouping)
        plan = validate_stock_quantity(groups, request.stock, client=request.client)

        logger.info(
            "Planned %d pieces on %d of %d bars (%d distinct patterns, waste %g)",
            len(pool),
            plan.bars_needed,
            plan.bars_available,
            len(plan.groups),
            plan.total_waste,
        )
        return plan

    def submit(self, request: OptimizeRequest) -> RunningOptimization:
        """Run the optimization on a background worker thread.

        The returned handle can be cancelled; the effective timeout still
        applies.
        """
        timeout = request.timeout_seconds or self.settings.timeout_seconds
        token = CancellationToken(timeout=timeout)
        future = self._get_executor().submit(self.execute, request, token)
        return RunningOptimization(future=future, token=token)

    def close(self) -> None:
        """Shut down the background worker, if one was started."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> OptimizeCutsCommand:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="cutplan"
            )
        return self._executor
