"""
Constants and message templates for pattern checking and recovery.

No magic strings - use these templates so messages stay consistent
between the scanners, the auto-fixer and the tests.
"""

from enum import Enum

# Gain limits (pattern gain is a linear multiplier, 1.0 = unity)
GAIN_SOFT_CEILING = 2.0  # Above this: "may be too loud"
GAIN_HARD_CEILING = 5.0  # Above this: refused outright

# Failure tracking
FAILURE_WINDOW_SECONDS = 60.0
DEFAULT_FAILURE_THRESHOLD = 3
DEFAULT_BREAKER_THRESHOLD = 5

# Default recovery policy
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0  # seconds

# Browser initialization is slow; each attempt gets its own deadline
BROWSER_INIT_TIMEOUT = 30.0  # seconds

# Complexity normalization points (each factor saturates here)
COMPLEXITY_FUNCTION_SATURATION = 10
COMPLEXITY_CHAIN_SATURATION = 12
COMPLEXITY_EVENT_SATURATION = 16

# A single bare sound call is shorter than this
SHORT_PATTERN_LENGTH = 30

MINIMAL_EXAMPLE = 's("bd*4")'


class QuoteMode(str, Enum):
    """The three mutually exclusive string delimiters."""

    SINGLE = "single quote"
    DOUBLE = "double quote"
    BACKTICK = "backtick"


BRACKET_PAIRS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}
QUOTE_CHARS: dict[str, QuoteMode] = {
    "'": QuoteMode.SINGLE,
    '"': QuoteMode.DOUBLE,
    "`": QuoteMode.BACKTICK,
}

# Mini-notation rest markers
REST_TOKENS = frozenset({"~", "-"})


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_PATTERN = "Pattern is empty"
    UNBALANCED_BRACKETS = "Unbalanced brackets: {detail}"
    UNBALANCED_QUOTES = "Unbalanced quotes: {detail}"
    UNEXPECTED_CLOSER = "Unexpected closing '{char}' at position {position}"
    MISMATCHED_CLOSER = "Mismatched '{opener}' and '{closer}' at position {position}"
    UNCLOSED_BRACKET = "Unclosed '{char}'"
    UNCLOSED_QUOTE = "Unclosed {mode}"
    DANGEROUS_GAIN = "Dangerous gain value: {value} - would be clamped to {ceiling}"
    INFINITE_LOOP = "Potential infinite loop detected"
    DYNAMIC_EVAL = "Use of eval() or Function() is not allowed"


class WarningMessages:
    """Standardized warning messages."""

    HIGH_GAIN = "High gain value detected: {value} - may be too loud"
    NO_SOUND_SOURCE = "Pattern may not produce sound - no s(), note(), or stack() found"
    UNQUOTED_SOUND = 'Sound patterns should be in quotes: s("bd") not s(bd)'
    UNKNOWN_FUNCTION = "Unknown function: {name}"


class SuggestionMessages:
    """Standardized suggestion messages."""

    EMPTY_PATTERN = f"Add a simple pattern like: {MINIMAL_EXAMPLE}"
    CHECK_BRACKETS = "Check that all ( ) [ ] { } are properly matched"
    CHECK_QUOTES = "Ensure all strings are properly quoted"
    MINIMAL_SOUND = f"Try adding {MINIMAL_EXAMPLE} for a basic kick drum pattern"
    ADD_TEMPO = "Consider adding setcpm(120) to set tempo"
    SPATIAL_EFFECTS = "Consider adding spatial effects: .room(0.5) or .delay(0.25)"
    VARIATION = "Add variation with .sometimes() or .every()"
    STACKING = "Try stacking multiple patterns with stack()"
    TEMPO_AT_START = "Set tempo with setcpm(120) at the beginning"


class FixMessages:
    """Descriptions recorded by the auto-fixer."""

    GAIN_REDUCED = "Reduced gain from {value} to {ceiling}"
    QUOTES_ADDED = "Added quotes around sound: {sound}"


class RecoveryMessages:
    """Messages raised and logged by the recovery layer."""

    OPERATION_FAILED = "{name} failed after {attempts} attempt(s): {error}"
    FALLBACK_FAILED = (
        "{name} failed after {attempts} attempt(s): {error}; fallback failed: {fallback}"
    )
    OPERATION_TIMEOUT = "{name} timed out after {timeout}s"
    CIRCUIT_OPEN = (
        "Circuit breaker open for {name} (at least {threshold} failures in the last {window:g}s)"
    )
    NETWORK_UNREACHABLE = "Network operation {name} failed - check internet connection"
    BROWSER_INIT_FALLBACK = "Browser initialization failed. Try running the browser headless"
