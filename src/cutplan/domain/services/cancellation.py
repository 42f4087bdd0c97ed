"""Cooperative cancellation for long-running searches."""

from __future__ import annotations

import threading
import time

from cutplan.domain.exceptions import ComputationCancelledError


class CancellationToken:
    """Signals a running computation to stop.

    The search polls ``check()``; it raises ``ComputationCancelledError``
    once ``cancel()`` has been called or the optional deadline passed.
    Safe to cancel from another thread.

    Attributes:
        timeout: Seconds allowed from construction, or None for no limit.
    """

    def __init__(self, timeout: float | None = None) -> None:
        if timeout is not None and timeout <= 0:
            raise ValueError("Timeout must be positive")
        self.timeout = timeout
        self._event = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once cancellation was requested or the deadline passed."""
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._event.set()
            return True
        return False

    def check(self) -> None:
        """Raise if the computation should stop.

        Raises:
            ComputationCancelledError: If cancelled or timed out.
        """
        if not self.cancelled:
            return
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise ComputationCancelledError(
                f"Computation timed out after {self.timeout:g}s"
            )
        raise ComputationCancelledError()


class _NeverCancelled(CancellationToken):
    """Token used when the caller supplies none."""

    def check(self) -> None:
        return None


NEVER_CANCELLED = _NeverCancelled()
