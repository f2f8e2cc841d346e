"""
Safety scanning - dangerous gain levels and non-pattern code.

Detection is regex based and therefore best-effort: it catches the obvious
forms of runaway loops and dynamic evaluation, it is not a sandbox.
"""

from __future__ import annotations

import re

from chuk_mcp_strudel.constants import (
    GAIN_HARD_CEILING,
    GAIN_SOFT_CEILING,
    ErrorMessages,
    WarningMessages,
)
from chuk_mcp_strudel.models.validation import SafetyReport
from chuk_mcp_strudel.validation.scanner import mask_strings

# gain(<number>) or .gain(<number>); only literal numbers can be judged
GAIN_CALL = re.compile(
    r"(?<![\w$])gain\s*\(\s*((?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*\)"
)

# (regex, error message) pairs; order is report order
FORBIDDEN_CONSTRUCTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bwhile\s*\(\s*(?:true|1)\s*\)"), ErrorMessages.INFINITE_LOOP),
    (re.compile(r"\bfor\s*\([^;)]*;\s*;"), ErrorMessages.INFINITE_LOOP),
    (re.compile(r"\beval\s*\("), ErrorMessages.DYNAMIC_EVAL),
    (re.compile(r"\bFunction\s*\("), ErrorMessages.DYNAMIC_EVAL),
)


def format_number(value: float) -> str:
    """Format a number the way it would be typed: 8 not 8.0, 2.5 not 2.50."""
    return f"{value:g}"


def gain_values(text: str) -> list[float]:
    """Get every literal gain argument outside string literals, in order."""
    return [float(m.group(1)) for m in GAIN_CALL.finditer(mask_strings(text))]


def check_safety(
    text: str,
    soft_ceiling: float = GAIN_SOFT_CEILING,
    hard_ceiling: float = GAIN_HARD_CEILING,
) -> SafetyReport:
    """
    Scan for constructs that must never reach the audio engine.

    - gain above the soft ceiling: warning
    - gain above the hard ceiling: error
    - unconditional loops, eval()/Function(): error

    Args:
        text: Pattern text
        soft_ceiling: Gain that triggers a loudness warning
        hard_ceiling: Gain that is refused

    Returns:
        SafetyReport; `safe` is False iff any error was produced
    """
    report = SafetyReport()

    for value in gain_values(text):
        shown = format_number(value)
        if value > soft_ceiling:
            report.warnings.append(WarningMessages.HIGH_GAIN.format(value=shown))
        if value > hard_ceiling:
            report.errors.append(
                ErrorMessages.DANGEROUS_GAIN.format(value=shown, ceiling=f"{soft_ceiling:.1f}")
            )

    # One message per kind, even if several constructs match
    for pattern, message in FORBIDDEN_CONSTRUCTS:
        if message not in report.errors and pattern.search(text):
            report.errors.append(message)

    return report
