"""
Pattern Analyzer - derives structural metadata from pattern text.

The analyzer reads text only; it never evaluates the pattern. Metadata is
descriptive (tempo, layering, functions used, event density, complexity)
and is recomputed on every call.
"""

from __future__ import annotations

import logging
import math
import re

from chuk_mcp_strudel.constants import (
    COMPLEXITY_CHAIN_SATURATION,
    COMPLEXITY_EVENT_SATURATION,
    COMPLEXITY_FUNCTION_SATURATION,
)
from chuk_mcp_strudel.models.metadata import PatternMetadata
from chuk_mcp_strudel.validation.scanner import call_names, mask_strings

from .mini import count_steps, leaf_values

logger = logging.getLogger(__name__)

TEMPO_CALL = re.compile(r"(?<![\w$])(setcpm|setbpm|setcps)\s*\(\s*([^()]*?)\s*\)")
STACK_CALL = re.compile(r"(?<![\w$])stack\s*\(")
SOUND_CALL = re.compile(r"(?<![\w$])(?:s|sound)\s*\(")
NOTE_CALL = re.compile(r"(?<![\w$])note\s*\(")
MODIFIER_CALL = re.compile(r"\.\s*[A-Za-z_$][\w$]*\s*\(")

# A top-level source call (not a .s(...) modifier) whose argument is a string
SEQUENCE_CALL = re.compile(r"(?<![\w$.])(?:s|sound|note|n)\s*\(\s*([\"'`])")

_ARITHMETIC = re.compile(r"\d+(?:\.\d+)?(?:\s*[*/]\s*\d+(?:\.\d+)?)*")
_OPERAND = re.compile(r"([*/]?)\s*(\d+(?:\.\d+)?)")

# Complexity weights; they sum to 1.0 so the total saturates at 1.0
STACK_WEIGHT = 0.2
FUNCTION_WEIGHT = 0.3
CHAIN_WEIGHT = 0.25
DENSITY_WEIGHT = 0.25


def _evaluate_arithmetic(expression: str) -> float | None:
    """Evaluate numbers joined by * and /, left to right ("92/60/2")."""
    if not _ARITHMETIC.fullmatch(expression):
        return None

    result = 0.0
    for operator, operand in _OPERAND.findall(expression):
        value = float(operand)
        if operator == "*":
            result *= value
        elif operator == "/":
            if value == 0:
                return None
            result /= value
        else:
            result = value
    return result


def _saturate(value: float, saturation: float) -> float:
    return min(value / saturation, 1.0)


class PatternAnalyzer:
    """
    Extracts PatternMetadata from pattern text.

    Stateless; one instance can be shared between callers.
    """

    def analyze(self, text: str) -> PatternMetadata:
        """
        Analyze a pattern.

        Args:
            text: The pattern text

        Returns:
            Freshly computed PatternMetadata
        """
        masked = mask_strings(text)

        sequence = self.first_sequence(text)
        events = count_steps(sequence) if sequence is not None else 0
        values = set(leaf_values(sequence)) if sequence is not None else set()
        functions = list(dict.fromkeys(call_names(text)))
        is_stack = STACK_CALL.search(masked) is not None

        metadata = PatternMetadata(
            bpm=self.tempo(text),
            events_per_cycle=events,
            unique_values=values,
            functions_used=functions,
            is_stack=is_stack,
            uses_sound=SOUND_CALL.search(masked) is not None,
            uses_note=NOTE_CALL.search(masked) is not None,
            complexity=self.complexity(
                is_stack=is_stack,
                function_count=len(functions),
                chain_length=len(MODIFIER_CALL.findall(masked)),
                events_per_cycle=events,
            ),
        )
        logger.debug("Analyzed pattern: %s", metadata)
        return metadata

    def tempo(self, text: str) -> float | None:
        """
        Get the tempo of the first tempo call with a numeric argument.

        setcpm(x) and setbpm(x) give x; setcps(x) is converted to cycles per
        minute (x * 60).

        Returns:
            Tempo, or None when no tempo is set
        """
        for match in TEMPO_CALL.finditer(mask_strings(text)):
            value = _evaluate_arithmetic(match.group(2))
            if value is None:
                continue
            return value * 60 if match.group(1) == "setcps" else value
        return None

    def first_sequence(self, text: str) -> str | None:
        """
        Get the string argument of the first top-level s()/sound()/note()/n() call.

        Returns:
            The mini-notation text, or None if there is no such call
        """
        masked = mask_strings(text)
        match = SEQUENCE_CALL.search(masked)
        if match is None:
            return None

        start = match.end()
        end = masked.find(match.group(1), start)
        if end == -1:
            end = len(text)
        return text[start:end]

    def complexity(
        self,
        is_stack: bool,
        function_count: int,
        chain_length: int,
        events_per_cycle: int,
    ) -> float:
        """
        Combine structural factors into a score in [0, 1].

        Each factor saturates on its own before weighting, so no single
        factor can dominate and the sum stays bounded. Every factor is
        non-decreasing in its input.
        """
        score = (
            (STACK_WEIGHT if is_stack else 0.0)
            + FUNCTION_WEIGHT * _saturate(function_count, COMPLEXITY_FUNCTION_SATURATION)
            + CHAIN_WEIGHT * _saturate(chain_length, COMPLEXITY_CHAIN_SATURATION)
            + DENSITY_WEIGHT * _saturate(events_per_cycle, COMPLEXITY_EVENT_SATURATION)
        )
        if math.isnan(score):
            return 0.0
        return max(0.0, min(1.0, score))


def analyze_pattern(text: str) -> PatternMetadata:
    """
    Convenience function to analyze a pattern.

    Args:
        text: The pattern text

    Returns:
        PatternMetadata for the text
    """
    return PatternAnalyzer().analyze(text)
