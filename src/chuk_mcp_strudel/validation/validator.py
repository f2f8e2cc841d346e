"""
Pattern Validator - decides whether pattern text is safe to send downstream.

Validates, in order:
- Pattern is not empty
- Brackets and quotes are balanced
- No dangerous gain, runaway loops or dynamic evaluation
- Heuristic syntax checks (sound source, known functions, tempo)

The validator never raises and never executes the pattern.
"""

from __future__ import annotations

import logging

from chuk_mcp_strudel.constants import (
    GAIN_HARD_CEILING,
    GAIN_SOFT_CEILING,
    ErrorMessages,
    SuggestionMessages,
)
from chuk_mcp_strudel.models.validation import ValidationVerdict
from chuk_mcp_strudel.validation.diagnostics import parse_error_location, suggestions_for_error
from chuk_mcp_strudel.validation.heuristics import check_syntax_heuristics
from chuk_mcp_strudel.validation.safety import check_safety
from chuk_mcp_strudel.validation.scanner import check_balance, check_quotes
from chuk_mcp_strudel.vocabulary import FunctionVocabulary, default_vocabulary

logger = logging.getLogger(__name__)


class PatternValidator:
    """Validates pattern text and aggregates every finding into one verdict."""

    def __init__(
        self,
        vocabulary: FunctionVocabulary | None = None,
        soft_gain_ceiling: float = GAIN_SOFT_CEILING,
        hard_gain_ceiling: float = GAIN_HARD_CEILING,
    ):
        """
        Initialize the validator.

        Args:
            vocabulary: Known function names (defaults to the built-in library)
            soft_gain_ceiling: Gain above which a loudness warning is issued
            hard_gain_ceiling: Gain above which the pattern is rejected
        """
        if soft_gain_ceiling > hard_gain_ceiling:
            raise ValueError(
                f"soft_gain_ceiling ({soft_gain_ceiling}) must not exceed "
                f"hard_gain_ceiling ({hard_gain_ceiling})"
            )
        self.vocabulary = vocabulary if vocabulary is not None else default_vocabulary()
        self.soft_gain_ceiling = soft_gain_ceiling
        self.hard_gain_ceiling = hard_gain_ceiling

    def validate(self, text: str) -> ValidationVerdict:
        """
        Validate a pattern.

        Args:
            text: The pattern text

        Returns:
            ValidationVerdict; `valid` is True iff no errors were found
        """
        verdict = ValidationVerdict()

        if not text or not text.strip():
            verdict.errors.append(ErrorMessages.EMPTY_PATTERN)
            verdict.suggestions.append(SuggestionMessages.EMPTY_PATTERN)
            return verdict

        self._check_delimiters(text, verdict)
        self._check_safety(text, verdict)
        self._check_heuristics(text, verdict)

        logger.debug(
            "Validated pattern (%d chars): %d errors, %d warnings",
            len(text),
            len(verdict.errors),
            len(verdict.warnings),
        )
        return verdict

    def validate_with_location(self, text: str, downstream_error: str) -> ValidationVerdict:
        """
        Validate a pattern that a downstream parser has already rejected.

        The downstream message is recorded as an error, its position (if it
        has one) becomes the verdict's error_location, and remediation hints
        for it are appended to the suggestions.

        Args:
            text: The pattern text
            downstream_error: Error message produced by the downstream parser

        Returns:
            ValidationVerdict including the downstream failure
        """
        verdict = self.validate(text)
        verdict.errors.append(downstream_error)
        verdict.suggestions.extend(suggestions_for_error(downstream_error))
        verdict.error_location = parse_error_location(downstream_error)
        return verdict

    def _check_delimiters(self, text: str, verdict: ValidationVerdict) -> None:
        """Bracket and quote balance; failures are fatal."""
        brackets = check_balance(text)
        if not brackets.valid:
            verdict.errors.append(ErrorMessages.UNBALANCED_BRACKETS.format(detail=brackets.message))
            verdict.suggestions.append(SuggestionMessages.CHECK_BRACKETS)

        quotes = check_quotes(text)
        if not quotes.valid:
            verdict.errors.append(ErrorMessages.UNBALANCED_QUOTES.format(detail=quotes.message))
            verdict.suggestions.append(SuggestionMessages.CHECK_QUOTES)

    def _check_safety(self, text: str, verdict: ValidationVerdict) -> None:
        """Dangerous constructs; errors are fatal, warnings are not."""
        report = check_safety(text, self.soft_gain_ceiling, self.hard_gain_ceiling)
        verdict.errors.extend(report.errors)
        verdict.warnings.extend(report.warnings)

    def _check_heuristics(self, text: str, verdict: ValidationVerdict) -> None:
        """Heuristic feedback, reported even when the pattern is already invalid."""
        report = check_syntax_heuristics(text, self.vocabulary)
        verdict.warnings.extend(report.warnings)
        verdict.suggestions.extend(report.suggestions)


def validate_pattern(text: str) -> ValidationVerdict:
    """
    Convenience function to validate a pattern with default settings.

    Args:
        text: The pattern text

    Returns:
        ValidationVerdict with any issues found
    """
    validator = PatternValidator()
    return validator.validate(text)
