"""
Diagnostics for failures reported by a downstream parser.

The local scanners never produce line/column positions; when the rendering
side rejects a pattern, these helpers turn its error text into a location
and a few remediation hints.
"""

from __future__ import annotations

import re

from chuk_mcp_strudel.models.validation import ErrorLocation

_LINE_COLUMN = re.compile(r"line\s*(\d+).*?col(?:umn)?\s*(\d+)", re.IGNORECASE)
_PAREN_POSITION = re.compile(r"\((\d+):(\d+)\)")
_NOT_DEFINED = re.compile(r"(\w+) is not defined")


def parse_error_location(message: str) -> ErrorLocation | None:
    """
    Extract a line/column pair from a parser error message.

    Understands "line 3, column 7" and acorn-style "(3:7)" suffixes.
    Acorn reports 0-based columns; they are shifted to 1-based.

    Args:
        message: Error text from the downstream parser

    Returns:
        ErrorLocation, or None if the message carries no position
    """
    match = _LINE_COLUMN.search(message)
    if match:
        line, column = int(match.group(1)), int(match.group(2))
        return ErrorLocation(line=max(1, line), column=max(1, column))

    match = _PAREN_POSITION.search(message)
    if match:
        line, column = int(match.group(1)), int(match.group(2))
        return ErrorLocation(line=max(1, line), column=column + 1)

    return None


def suggestions_for_error(message: str) -> list[str]:
    """
    Get remediation hints for a downstream error message.

    Args:
        message: Error text from the downstream parser or evaluator

    Returns:
        Suggestions, possibly empty
    """
    suggestions: list[str] = []
    lowered = message.lower()

    if "unexpected token" in lowered:
        suggestions.append("Check for missing quotes, parentheses, or brackets")
        suggestions.append("Ensure all function calls have matching ()")

    if "is not defined" in lowered:
        match = _NOT_DEFINED.search(message)
        if match:
            suggestions.append(f'"{match.group(1)}" is not a known pattern function')
            suggestions.append("Check spelling or use a valid function like s(), note(), stack()")

    if "not a function" in lowered:
        suggestions.append("Check that you are calling methods on a pattern object")

    if "unexpected end" in lowered:
        suggestions.append("Pattern appears incomplete - check for missing closing brackets")

    return suggestions
