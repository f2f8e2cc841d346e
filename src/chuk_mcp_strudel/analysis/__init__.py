"""
Structural analysis of pattern text.

This module provides:
- PatternAnalyzer: Tempo, layering, function usage, density and complexity
- Mini-notation helpers: top-level step counting and leaf extraction
"""

from chuk_mcp_strudel.analysis.analyzer import PatternAnalyzer, analyze_pattern
from chuk_mcp_strudel.analysis.mini import count_steps, leaf_values, top_level_steps

__all__ = [
    "PatternAnalyzer",
    "analyze_pattern",
    "count_steps",
    "leaf_values",
    "top_level_steps",
]
