"""
Exceptions raised by the recovery layer.

Validation never raises; these are the only failures surfaced to callers,
and each one names the operation it belongs to.
"""

from __future__ import annotations

from chuk_mcp_strudel.constants import FAILURE_WINDOW_SECONDS, RecoveryMessages


class RecoveryError(Exception):
    """Base exception for recovery layer errors."""

    def __init__(self, message: str, operation_name: str):
        super().__init__(message)
        self.operation_name = operation_name


class OperationFailedError(RecoveryError):
    """Raised when every attempt failed and there was no fallback, or the fallback failed."""

    def __init__(
        self,
        operation_name: str,
        attempts: int,
        last_error: BaseException,
        fallback_error: BaseException | None = None,
    ):
        if fallback_error is None:
            message = RecoveryMessages.OPERATION_FAILED.format(
                name=operation_name, attempts=attempts, error=last_error
            )
        else:
            message = RecoveryMessages.FALLBACK_FAILED.format(
                name=operation_name, attempts=attempts, error=last_error, fallback=fallback_error
            )
        super().__init__(message, operation_name)
        self.attempts = attempts
        self.last_error = last_error
        self.fallback_error = fallback_error


class OperationTimeoutError(RecoveryError, TimeoutError):
    """Raised when a single attempt exceeds its deadline."""

    def __init__(self, operation_name: str, timeout: float):
        super().__init__(
            RecoveryMessages.OPERATION_TIMEOUT.format(name=operation_name, timeout=timeout),
            operation_name,
        )
        self.timeout = timeout


class CircuitOpenError(RecoveryError):
    """Raised without attempting the operation while it is failing frequently."""

    def __init__(self, operation_name: str, threshold: int, window: float = FAILURE_WINDOW_SECONDS):
        super().__init__(
            RecoveryMessages.CIRCUIT_OPEN.format(
                name=operation_name, threshold=threshold, window=window
            ),
            operation_name,
        )
        self.threshold = threshold
        self.window = window
