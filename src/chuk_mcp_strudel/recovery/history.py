"""
Failure history - per-operation failure timestamps over a sliding window.

Entries older than the window are pruned lazily, both when a failure is
recorded and when the history is read, so readers never see stale
failures.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from datetime import UTC, datetime

from chuk_mcp_strudel.constants import FAILURE_WINDOW_SECONDS
from chuk_mcp_strudel.models.recovery import ErrorStats


class FailureHistory:
    """
    Thread-safe record of recent failures, keyed by operation name.

    The clock is injectable so tests can move time forward without sleeping.
    """

    def __init__(
        self,
        window: float = FAILURE_WINDOW_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the history.

        Args:
            window: Trailing window in seconds; older failures are forgotten
            clock: Returns the current time in seconds since the epoch
        """
        if window <= 0:
            raise ValueError(f"window must be positive, got {window}")
        self.window = window
        self._clock = clock
        self._failures: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def _prune(self, name: str, now: float) -> list[float]:
        """Drop expired entries for one name. Caller holds the lock."""
        recent = [ts for ts in self._failures.get(name, []) if now - ts < self.window]
        if name in self._failures:
            self._failures[name] = recent
        return recent

    def record(self, name: str) -> None:
        """Record a failure of `name` at the current time."""
        with self._lock:
            now = self._clock()
            self._failures.setdefault(name, []).append(now)
            self._prune(name, now)

    def recent(self, name: str) -> list[float]:
        """Get failure timestamps for `name` inside the window, oldest first."""
        with self._lock:
            return list(self._prune(name, self._clock()))

    def count(self, name: str) -> int:
        """Number of failures for `name` inside the window."""
        return len(self.recent(name))

    def clear(self, name: str) -> None:
        """Forget all failures of `name`."""
        with self._lock:
            self._failures.pop(name, None)

    def clear_all(self) -> None:
        """Forget every failure."""
        with self._lock:
            self._failures.clear()

    def stats(self) -> dict[str, ErrorStats]:
        """
        Snapshot of failure statistics for every tracked operation.

        Returns:
            Mapping of operation name to count and most recent failure time
        """
        with self._lock:
            now = self._clock()
            snapshot: dict[str, ErrorStats] = {}
            for name in list(self._failures):
                recent = self._prune(name, now)
                snapshot[name] = ErrorStats(
                    count=len(recent),
                    last_error=datetime.fromtimestamp(max(recent), tz=UTC) if recent else None,
                )
            return snapshot

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._failures
