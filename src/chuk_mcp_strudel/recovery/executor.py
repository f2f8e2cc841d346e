"""
Error Recovery - retry, timeout and circuit breaking for async operations.

Wraps any zero-argument coroutine function. Attempts run one after another,
failures are recorded in a FailureHistory keyed by operation name, and a
circuit breaker refuses to run an operation that keeps failing.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from functools import lru_cache
from typing import Any, TypeVar

from chuk_mcp_strudel.constants import (
    BROWSER_INIT_TIMEOUT,
    DEFAULT_BREAKER_THRESHOLD,
    DEFAULT_FAILURE_THRESHOLD,
    RecoveryMessages,
)
from chuk_mcp_strudel.models.recovery import ErrorStats, RecoveryStrategy

from .errors import CircuitOpenError, OperationFailedError, OperationTimeoutError
from .history import FailureHistory
from .simplify import simplify_pattern

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[Any]]

# Named policies for the operations a live-coding session depends on
BROWSER_INIT_STRATEGY = RecoveryStrategy(max_retries=2, retry_delay=2.0, exponential_backoff=True)
PATTERN_WRITE_STRATEGY = RecoveryStrategy(max_retries=2, retry_delay=0.5, exponential_backoff=False)
NETWORK_STRATEGY = RecoveryStrategy(max_retries=5, retry_delay=2.0, exponential_backoff=True)

BROWSER_INIT_OPERATION = "Browser Initialization"
PATTERN_WRITE_OPERATION = "Pattern Write"


class ErrorRecovery:
    """
    Runs async operations under a recovery policy.

    The failure history, and the sleep used between attempts, are injected
    so several executors can share one history and tests never wait.
    """

    def __init__(self, history: FailureHistory | None = None, sleep: Sleep = asyncio.sleep):
        """
        Initialize the executor.

        Args:
            history: Failure history to record into (a fresh one if None)
            sleep: Coroutine function used to wait between attempts
        """
        self.history = history if history is not None else FailureHistory()
        self._sleep = sleep

    async def execute_with_retry(
        self,
        operation: Callable[[], Awaitable[T]],
        operation_name: str,
        strategy: RecoveryStrategy | None = None,
    ) -> T:
        """
        Run an operation, retrying on failure.

        Success at any attempt clears the history for the name and returns
        at once. Each failure is recorded before the backoff wait. When the
        last attempt fails the fallback, if any, runs once.

        Args:
            operation: Zero-argument coroutine function
            operation_name: Name used for history, logging and errors
            strategy: Retry policy (defaults to RecoveryStrategy())

        Returns:
            The operation's result, or the fallback's result

        Raises:
            OperationFailedError: If all attempts failed and there is no
                fallback, or the fallback failed too
            CircuitOpenError: Propagated immediately from a guarded operation
        """
        strategy = strategy or RecoveryStrategy()
        attempts = strategy.total_attempts
        last_error: Exception | None = None

        for attempt in range(attempts):
            logger.debug("%s: attempt %d/%d", operation_name, attempt + 1, attempts)
            try:
                result = await operation()
            except CircuitOpenError:
                raise
            except Exception as exc:
                last_error = exc
                self.history.record(operation_name)
                logger.warning(
                    "%s failed (attempt %d/%d): %s", operation_name, attempt + 1, attempts, exc
                )
            else:
                self.history.clear(operation_name)
                return result

            # Skip the wait after the final attempt
            if attempt < strategy.max_retries:
                delay = strategy.delay_for(attempt)
                logger.debug("Retrying %s in %.2fs...", operation_name, delay)
                await self._sleep(delay)

        assert last_error is not None

        if strategy.fallback_action is None:
            logger.error("%s failed after %d attempt(s): %s", operation_name, attempts, last_error)
            raise OperationFailedError(operation_name, attempts, last_error) from last_error

        logger.info("%s exhausted %d attempt(s), running fallback", operation_name, attempts)
        try:
            return await strategy.fallback_action()
        except Exception as fallback_error:
            logger.error("Fallback for %s failed: %s", operation_name, fallback_error)
            raise OperationFailedError(
                operation_name, attempts, last_error, fallback_error
            ) from fallback_error

    async def execute_with_timeout(
        self,
        operation: Callable[[], Awaitable[T]],
        timeout: float,
        operation_name: str,
    ) -> T:
        """
        Run an operation with a deadline.

        The in-flight operation is cancelled when the deadline passes.

        Args:
            operation: Zero-argument coroutine function
            timeout: Deadline in seconds
            operation_name: Name used in the timeout error

        Returns:
            The operation's result

        Raises:
            OperationTimeoutError: If the deadline passed first
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        deadline = asyncio.timeout(timeout)
        try:
            async with deadline:
                return await operation()
        except TimeoutError as exc:
            # A TimeoutError raised by the operation itself passes through
            if not deadline.expired():
                raise
            raise OperationTimeoutError(operation_name, timeout) from exc

    async def execute_with_retry_and_timeout(
        self,
        operation: Callable[[], Awaitable[T]],
        operation_name: str,
        timeout: float,
        strategy: RecoveryStrategy | None = None,
    ) -> T:
        """
        Run an operation with retries, each attempt bounded by `timeout`.

        A timed-out attempt counts as a failure and is retried.
        """
        return await self.execute_with_retry(
            lambda: self.execute_with_timeout(operation, timeout, operation_name),
            operation_name,
            strategy,
        )

    def is_frequently_failing(
        self, operation_name: str, threshold: int = DEFAULT_FAILURE_THRESHOLD
    ) -> bool:
        """Check whether `operation_name` failed at least `threshold` times in the window."""
        return self.history.count(operation_name) >= threshold

    def get_error_stats(self) -> dict[str, ErrorStats]:
        """Snapshot of failure counts and last failure times over the window."""
        return self.history.stats()

    def clear_error_history(self, operation_name: str) -> None:
        """Forget recorded failures of one operation."""
        self.history.clear(operation_name)

    def clear_all_error_history(self) -> None:
        """Forget all recorded failures."""
        self.history.clear_all()

    def create_circuit_breaker(
        self,
        operation: Callable[[], Awaitable[T]],
        operation_name: str,
        threshold: int = DEFAULT_BREAKER_THRESHOLD,
    ) -> Callable[[], Awaitable[T]]:
        """
        Guard an operation with a circuit breaker.

        The guard only reads the history; wrap it in execute_with_retry (with
        the same name) to have failures recorded.

        Args:
            operation: Zero-argument coroutine function to protect
            operation_name: Name whose failure history opens the circuit
            threshold: Failures in the window that open the circuit

        Returns:
            Coroutine function that raises CircuitOpenError while the
            circuit is open and runs the operation otherwise
        """

        async def guarded() -> T:
            if self.is_frequently_failing(operation_name, threshold):
                logger.info("Circuit breaker open for %s, not running it", operation_name)
                raise CircuitOpenError(operation_name, threshold, self.history.window)
            return await operation()

        return guarded

    async def handle_browser_init(self, init: Callable[[], Awaitable[str]]) -> str:
        """
        Initialize the browser, retrying with per-attempt timeouts.

        Falls back to a message suggesting headless mode instead of raising.
        """

        async def fallback() -> str:
            logger.warning("Browser initialization failed, suggesting headless mode")
            return RecoveryMessages.BROWSER_INIT_FALLBACK

        strategy = BROWSER_INIT_STRATEGY.model_copy(update={"fallback_action": fallback})
        return await self.execute_with_retry_and_timeout(
            init, BROWSER_INIT_OPERATION, BROWSER_INIT_TIMEOUT, strategy
        )

    async def handle_pattern_write(self, write: Callable[[str], Awaitable[T]], text: str) -> T:
        """
        Write a pattern, retrying on failure.

        As a fallback the simplified pattern is written once.

        Args:
            write: Coroutine function that writes pattern text
            text: The pattern text

        Returns:
            The write function's result
        """

        async def fallback() -> T:
            logger.info("Attempting to write simplified pattern")
            return await write(simplify_pattern(text))

        strategy = PATTERN_WRITE_STRATEGY.model_copy(update={"fallback_action": fallback})
        return await self.execute_with_retry(lambda: write(text), PATTERN_WRITE_OPERATION, strategy)

    async def handle_network_operation(
        self, operation: Callable[[], Awaitable[T]], operation_name: str
    ) -> T:
        """Run a network operation; the final error carries a connectivity hint."""

        async def fallback() -> T:
            raise ConnectionError(RecoveryMessages.NETWORK_UNREACHABLE.format(name=operation_name))

        strategy = NETWORK_STRATEGY.model_copy(update={"fallback_action": fallback})
        return await self.execute_with_retry(operation, operation_name, strategy)


@lru_cache(maxsize=1)
def default_recovery() -> ErrorRecovery:
    """Get the process-wide executor (one shared failure history)."""
    return ErrorRecovery()
