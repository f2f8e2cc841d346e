"""
Recovery - resilience for the async operations around pattern playback.

This module provides:
- ErrorRecovery: Retry with backoff, timeouts, circuit breaking, fallbacks
- FailureHistory: Per-operation failure timestamps over a sliding window
- Exceptions: RecoveryError and its subclasses
- simplify_pattern: Strip optional modifiers from a pattern
"""

from chuk_mcp_strudel.recovery.errors import (
    CircuitOpenError,
    OperationFailedError,
    OperationTimeoutError,
    RecoveryError,
)
from chuk_mcp_strudel.recovery.executor import (
    BROWSER_INIT_STRATEGY,
    NETWORK_STRATEGY,
    PATTERN_WRITE_STRATEGY,
    ErrorRecovery,
    default_recovery,
)
from chuk_mcp_strudel.recovery.history import FailureHistory
from chuk_mcp_strudel.recovery.simplify import simplify_pattern

__all__ = [
    "BROWSER_INIT_STRATEGY",
    "CircuitOpenError",
    "ErrorRecovery",
    "FailureHistory",
    "NETWORK_STRATEGY",
    "OperationFailedError",
    "OperationTimeoutError",
    "PATTERN_WRITE_STRATEGY",
    "RecoveryError",
    "default_recovery",
    "simplify_pattern",
]
