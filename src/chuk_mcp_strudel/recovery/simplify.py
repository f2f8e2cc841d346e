"""
Pattern simplification - strip optional modifiers, keep the core sounds.

Used as a last resort when writing a pattern keeps failing: a smaller
pattern is more likely to be accepted.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

EFFECT_MODIFIERS = ("delay", "reverb", "room", "lpf", "hpf", "bpf")
TRANSFORM_MODIFIERS = ("jux", "iter", "chop", "striate", "scramble")
CONDITIONAL_MODIFIERS = ("sometimes", "often", "rarely", "every")


def _modifier_call(names: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(r"\.\s*(?:" + "|".join(names) + r")\s*\([^()]*\)")


SIMPLIFIABLE_CALLS = [
    _modifier_call(EFFECT_MODIFIERS),
    _modifier_call(TRANSFORM_MODIFIERS),
    _modifier_call(CONDITIONAL_MODIFIERS),
]


def simplify_pattern(text: str) -> str:
    """
    Remove effect chains, complex transformations and conditional modifiers.

    Only modifiers whose arguments contain no nested parentheses are
    removed; anything else is left as written.

    Args:
        text: The pattern text

    Returns:
        The simplified pattern text
    """
    simplified = text
    for pattern in SIMPLIFIABLE_CALLS:
        simplified = pattern.sub("", simplified)

    logger.debug("Simplified pattern %r -> %r", text[:50], simplified[:50])
    return simplified
