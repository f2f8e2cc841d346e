"""
Pydantic models for pattern checking.

This module provides:
- ValidationVerdict: Aggregated validation outcome
- BalanceCheck, SafetyReport, HeuristicsReport: Per-scanner reports
- AutoFixResult: Rewritten text plus applied fixes
- PatternMetadata: Structural summary of a pattern
- RecoveryStrategy, ErrorStats: Retry policy and failure statistics
"""

from chuk_mcp_strudel.models.metadata import PatternMetadata
from chuk_mcp_strudel.models.recovery import ErrorStats, RecoveryStrategy
from chuk_mcp_strudel.models.validation import (
    AutoFixResult,
    BalanceCheck,
    ErrorLocation,
    HeuristicsReport,
    SafetyReport,
    ValidationVerdict,
)

__all__ = [
    "AutoFixResult",
    "BalanceCheck",
    "ErrorLocation",
    "ErrorStats",
    "HeuristicsReport",
    "PatternMetadata",
    "RecoveryStrategy",
    "SafetyReport",
    "ValidationVerdict",
]
