"""
Pattern validation - static checks that run without executing a pattern.

This module provides:
- PatternValidator: Aggregates every check into one verdict
- check_balance, check_quotes: Delimiter scanning
- check_safety: Dangerous gain, loops and dynamic evaluation
- check_syntax_heuristics: Vocabulary-based heuristics
- auto_fix, suggest: Textual fixes and improvement ideas
- parse_error_location, suggestions_for_error: Downstream error diagnostics
"""

from chuk_mcp_strudel.validation.autofix import auto_fix, suggest
from chuk_mcp_strudel.validation.diagnostics import parse_error_location, suggestions_for_error
from chuk_mcp_strudel.validation.heuristics import check_syntax_heuristics
from chuk_mcp_strudel.validation.safety import check_safety
from chuk_mcp_strudel.validation.scanner import check_balance, check_quotes
from chuk_mcp_strudel.validation.validator import PatternValidator, validate_pattern

__all__ = [
    "PatternValidator",
    "auto_fix",
    "check_balance",
    "check_quotes",
    "check_safety",
    "check_syntax_heuristics",
    "parse_error_location",
    "suggest",
    "suggestions_for_error",
    "validate_pattern",
]
