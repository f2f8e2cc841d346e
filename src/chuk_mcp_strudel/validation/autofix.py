"""
Auto-fix and improvement suggestions.

Fixes are plain textual rewrites. Each issue class is handled on its own;
nothing here can fail, the worst case is the input returned unchanged.
"""

from __future__ import annotations

import re

from chuk_mcp_strudel.constants import (
    GAIN_SOFT_CEILING,
    SHORT_PATTERN_LENGTH,
    FixMessages,
    SuggestionMessages,
)
from chuk_mcp_strudel.models.validation import AutoFixResult
from chuk_mcp_strudel.validation.safety import GAIN_CALL, format_number
from chuk_mcp_strudel.validation.scanner import mask_strings

# s(bd hh) / sound(bd*4): a bare mini-notation argument with no quotes
UNQUOTED_SOUND_CALL = re.compile(
    r"(?<![\w$])(s|sound)\(\s*([\w~\[<][\w*:~!?@<>\[\]/. ]*?)\s*\)"
)

_SOURCE_CALL = re.compile(r"(?<![\w$])s\s*\(")


def _rewrite(text: str, spans: list[tuple[int, int, str]]) -> str:
    """Apply non-overlapping (start, end, replacement) edits."""
    if not spans:
        return text
    parts: list[str] = []
    cursor = 0
    for start, end, replacement in spans:
        parts.append(text[cursor:start])
        parts.append(replacement)
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def _clamp_gains(text: str, ceiling: float, fixes: list[str]) -> str:
    masked = mask_strings(text)
    edits: list[tuple[int, int, str]] = []
    for match in GAIN_CALL.finditer(masked):
        value = float(match.group(1))
        if value > ceiling:
            shown_ceiling = f"{ceiling:.1f}"
            edits.append((match.start(), match.end(), f"gain({shown_ceiling})"))
            fixes.append(
                FixMessages.GAIN_REDUCED.format(value=format_number(value), ceiling=shown_ceiling)
            )
    return _rewrite(text, edits)


def _quote_sounds(text: str, fixes: list[str]) -> str:
    masked = mask_strings(text)
    edits: list[tuple[int, int, str]] = []
    for match in UNQUOTED_SOUND_CALL.finditer(masked):
        name, sound = match.group(1), match.group(2)
        edits.append((match.start(), match.end(), f'{name}("{sound}")'))
        fixes.append(FixMessages.QUOTES_ADDED.format(sound=sound))
    return _rewrite(text, edits)


def auto_fix(text: str, gain_ceiling: float = GAIN_SOFT_CEILING) -> AutoFixResult:
    """
    Rewrite the issues that have an unambiguous textual fix.

    - gain above the soft ceiling is reduced to the ceiling
    - unquoted sound arguments are wrapped in double quotes

    Args:
        text: Pattern text
        gain_ceiling: Largest gain left untouched

    Returns:
        AutoFixResult with the rewritten text and one description per fix
    """
    fixes: list[str] = []
    fixed = _clamp_gains(text, gain_ceiling, fixes)
    fixed = _quote_sounds(fixed, fixes)
    return AutoFixResult(text=fixed, fixes=fixes)


def suggest(text: str) -> list[str]:
    """
    Suggest musical improvements for a pattern.

    These are ideas, not problems: a valid pattern can still get all of them.

    Args:
        text: Pattern text

    Returns:
        List of suggestions
    """
    suggestions: list[str] = []

    if not any(effect in text for effect in ("room", "delay", "reverb")):
        suggestions.append(SuggestionMessages.SPATIAL_EFFECTS)

    if "sometimes" not in text and "every" not in text:
        suggestions.append(SuggestionMessages.VARIATION)

    if len(text) < SHORT_PATTERN_LENGTH and _SOURCE_CALL.search(text) and "stack" not in text:
        suggestions.append(SuggestionMessages.STACKING)

    if "cpm" not in text and "cps" not in text:
        suggestions.append(SuggestionMessages.TEMPO_AT_START)

    return suggestions
