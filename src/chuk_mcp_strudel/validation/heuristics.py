"""
Heuristic syntax checks.

These are pattern-matching guesses over a fixed vocabulary, not a grammar.
Legitimate functions missing from the vocabulary will be reported as
unknown; extend the vocabulary file rather than special-casing names here.
"""

from __future__ import annotations

import re

from chuk_mcp_strudel.constants import SuggestionMessages, WarningMessages
from chuk_mcp_strudel.models.validation import HeuristicsReport
from chuk_mcp_strudel.validation.scanner import call_names, mask_strings
from chuk_mcp_strudel.vocabulary import FunctionVocabulary, default_vocabulary

# The minimal closed set of calls that make a pattern audible
SOURCE_CALL = re.compile(r"(?<![\w$])(?:s|sound|note|n|stack)\s*\(")
UNQUOTED_SOUND = re.compile(r"(?<![\w$])s\(\s*[^\"'`\s)]")
TEMPO_CALL = re.compile(r"(?<![\w$])set(?:cpm|cps|bpm)\s*\(")


def check_syntax_heuristics(
    text: str, vocabulary: FunctionVocabulary | None = None
) -> HeuristicsReport:
    """
    Run the heuristic checks.

    - no sound source: warning plus a minimal working example
    - unquoted s(...) argument: warning
    - call not in the vocabulary: one warning per distinct name
    - no tempo call: suggestion

    Args:
        text: Pattern text
        vocabulary: Known functions (defaults to the built-in library)

    Returns:
        HeuristicsReport with warnings and suggestions
    """
    vocab = vocabulary if vocabulary is not None else default_vocabulary()
    report = HeuristicsReport()
    masked = mask_strings(text)

    if not SOURCE_CALL.search(masked):
        report.warnings.append(WarningMessages.NO_SOUND_SOURCE)
        report.suggestions.append(SuggestionMessages.MINIMAL_SOUND)

    if UNQUOTED_SOUND.search(masked):
        report.warnings.append(WarningMessages.UNQUOTED_SOUND)

    reported: set[str] = set()
    for name in call_names(text):
        if name in reported or vocab.is_known(name):
            continue
        reported.add(name)
        report.warnings.append(WarningMessages.UNKNOWN_FUNCTION.format(name=name))

    if not TEMPO_CALL.search(masked):
        report.suggestions.append(SuggestionMessages.ADD_TEMPO)

    return report
