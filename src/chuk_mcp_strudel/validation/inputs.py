"""
Parameter validation for values that end up inside generated patterns.

Every check raises ValueError with a descriptive message; nothing is
silently clamped. Booleans are rejected wherever a number is expected.
"""

from __future__ import annotations

import math

VALID_SCALES = frozenset(
    {
        "major",
        "minor",
        "dorian",
        "phrygian",
        "lydian",
        "mixolydian",
        "aeolian",
        "locrian",
        "pentatonic",
        "blues",
        "chromatic",
        "wholetone",
        "harmonic_minor",
        "melodic_minor",
    }
)

VALID_CHORD_STYLES = frozenset(
    {"pop", "jazz", "blues", "folk", "rock", "classical", "modal", "edm"}
)

VALID_ROOT_NOTES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

MIN_BPM = 20
MAX_BPM = 300
MAX_GAIN = 2.0
MAX_EUCLID_STEPS = 256
MAX_NAME_LENGTH = 100
MAX_ROOT_NOTE_LENGTH = 10
DEFAULT_MAX_LENGTH = 1000


def _require_number(value: object, name: str) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"{name} must be a number")
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"{name} must be a valid number")
    return float(value)


def _require_integer(value: object, name: str) -> int:
    number = _require_number(value, name)
    if not number.is_integer():
        raise ValueError(f"{name} must be an integer")
    return int(number)


def _require_name(value: object, name: str, max_length: int = MAX_NAME_LENGTH) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValueError(f"{name} cannot be empty")
    if len(trimmed) > max_length:
        raise ValueError(f"{name} too long (max {max_length} characters, got {len(trimmed)})")
    return trimmed


def validate_bpm(bpm: float) -> None:
    """
    Validate a tempo in beats per minute.

    Raises:
        ValueError: If bpm is not a finite number between 20 and 300
    """
    value = _require_number(bpm, "BPM")
    if value < MIN_BPM or value > MAX_BPM:
        raise ValueError(f"BPM must be between {MIN_BPM} and {MAX_BPM}, got {bpm}")


def validate_gain(gain: float) -> None:
    """
    Validate a gain multiplier (0 = silence, 1 = unity, 2 = max safe).

    Raises:
        ValueError: If gain is not a finite number between 0 and 2.0
    """
    value = _require_number(gain, "Gain")
    if value < 0 or value > MAX_GAIN:
        raise ValueError(f"Gain must be between 0 and {MAX_GAIN}, got {gain}")


def validate_euclidean(hits: int, steps: int) -> None:
    """
    Validate Euclidean rhythm parameters.

    Example: 3 hits in 8 steps distributes as "x..x..x.".

    Raises:
        ValueError: If either value is not an integer, steps is not in
            1..256, hits is negative, or hits exceeds steps
    """
    hit_count = _require_integer(hits, "Hits")
    if hit_count < 0:
        raise ValueError("Hits must be a non-negative integer")

    step_count = _require_integer(steps, "Steps")
    if step_count <= 0:
        raise ValueError("Steps must be a positive integer")
    if step_count > MAX_EUCLID_STEPS:
        raise ValueError(f"Steps cannot exceed {MAX_EUCLID_STEPS}, got {steps}")

    if hit_count > step_count:
        raise ValueError(f"Hits ({hits}) cannot exceed steps ({steps})")


def validate_scale_name(name: str) -> None:
    """Validate a scale name (lowercase, e.g. 'dorian')."""
    trimmed = _require_name(name, "Scale name")
    if trimmed not in VALID_SCALES:
        raise ValueError(f"Invalid scale name: {name}")


def validate_chord_style(style: str) -> None:
    """Validate a chord progression style (lowercase, e.g. 'jazz')."""
    trimmed = _require_name(style, "Chord style")
    if trimmed not in VALID_CHORD_STYLES:
        raise ValueError(f"Invalid chord style: {style}")


def validate_root_note(note: str) -> None:
    """Validate a chromatic root note; case-insensitive ('f#' is accepted)."""
    trimmed = _require_name(note, "Root note", MAX_ROOT_NOTE_LENGTH)
    if trimmed.upper() not in VALID_ROOT_NOTES:
        raise ValueError(f"Invalid root note: {note}. Valid notes: {', '.join(VALID_ROOT_NOTES)}")


def validate_string_length(
    value: str,
    field_name: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    allow_empty: bool = True,
) -> None:
    """
    Validate a free-text field.

    Args:
        value: The string to check
        field_name: Name used in error messages
        max_length: Maximum number of characters
        allow_empty: Whether a blank string is acceptable

    Raises:
        ValueError: If value is not a string, is blank when not allowed,
            or is longer than max_length
    """
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    if not allow_empty and not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    if len(value) > max_length:
        raise ValueError(f"{field_name} too long (max {max_length} characters, got {len(value)})")


def validate_normalized_value(value: float, field_name: str) -> None:
    """Validate a ratio in 0..1 (complexity, swing amount, ...)."""
    number = _require_number(value, field_name)
    if number < 0 or number > 1.0:
        raise ValueError(f"{field_name} must be between 0 and 1.0, got {value}")


def validate_positive_integer(value: int, field_name: str) -> None:
    """Validate a count that must be at least 1."""
    number = _require_integer(value, field_name)
    if number <= 0:
        raise ValueError(f"{field_name} must be a positive integer")
