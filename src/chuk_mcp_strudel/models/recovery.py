"""
Recovery models - retry policy and failure statistics.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_strudel.constants import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY


class RecoveryStrategy(BaseModel):
    """
    How to retry a failing operation.

    A configuration value: build one per call site, never mutate it.
    """

    max_retries: int = Field(DEFAULT_MAX_RETRIES, ge=0, description="Retries after the first try")
    retry_delay: float = Field(DEFAULT_RETRY_DELAY, ge=0, description="Base delay in seconds")
    exponential_backoff: bool = Field(True, description="Double the delay after each attempt")
    fallback_action: Callable[[], Awaitable[Any]] | None = Field(
        None, description="Invoked once after the last attempt fails"
    )

    model_config = {"frozen": True}

    @property
    def total_attempts(self) -> int:
        """Maximum number of attempts, including the first."""
        return self.max_retries + 1

    def delay_for(self, attempt: int) -> float:
        """
        Delay to wait after a failed attempt.

        Args:
            attempt: 0-based index of the attempt that just failed

        Returns:
            Delay in seconds
        """
        if self.exponential_backoff:
            return self.retry_delay * (2**attempt)
        return self.retry_delay


class ErrorStats(BaseModel):
    """Failure statistics for one operation over the trailing window."""

    count: int = Field(0, ge=0, description="Failures inside the window")
    last_error: datetime | None = Field(None, description="Most recent failure, if any")
