"""
Tests for parameter validation.

All checks raise ValueError; booleans and non-finite numbers are never
accepted as numbers.
"""

import math

import pytest

from chuk_mcp_strudel.validation.inputs import (
    validate_bpm,
    validate_chord_style,
    validate_euclidean,
    validate_gain,
    validate_normalized_value,
    validate_positive_integer,
    validate_root_note,
    validate_scale_name,
    validate_string_length,
)


class TestNumericChecks:
    """Tests for numeric parameters."""

    @pytest.mark.parametrize("bpm", [20, 120, 174.5, 300])
    def test_bpm_in_range(self, bpm: float) -> None:
        """Tempos between 20 and 300 pass."""
        validate_bpm(bpm)

    @pytest.mark.parametrize("bpm", [19, 301, -1])
    def test_bpm_out_of_range(self, bpm: float) -> None:
        """Tempos outside 20..300 fail."""
        with pytest.raises(ValueError, match="BPM must be between 20 and 300"):
            validate_bpm(bpm)

    @pytest.mark.parametrize("bad", [True, "120", None, math.nan, math.inf])
    def test_bpm_not_a_number(self, bad: object) -> None:
        """Booleans, strings, NaN and infinity are rejected."""
        with pytest.raises(ValueError, match="BPM must be"):
            validate_bpm(bad)  # type: ignore[arg-type]

    def test_gain(self) -> None:
        """Gain is limited to 0..2.0."""
        validate_gain(0)
        validate_gain(2.0)
        with pytest.raises(ValueError, match="between 0 and 2.0"):
            validate_gain(2.1)
        with pytest.raises(ValueError):
            validate_gain(-0.1)

    def test_normalized_value(self) -> None:
        """Ratios are limited to 0..1."""
        validate_normalized_value(0.5, "Swing")
        with pytest.raises(ValueError, match="Swing must be between 0 and 1.0"):
            validate_normalized_value(1.5, "Swing")

    def test_positive_integer(self) -> None:
        """Counts must be whole numbers of at least 1."""
        validate_positive_integer(4, "Bars")
        validate_positive_integer(4.0, "Bars")
        with pytest.raises(ValueError, match="Bars must be a positive integer"):
            validate_positive_integer(0, "Bars")
        with pytest.raises(ValueError, match="Bars must be an integer"):
            validate_positive_integer(2.5, "Bars")


class TestEuclidean:
    """Tests for validate_euclidean."""

    @pytest.mark.parametrize(("hits", "steps"), [(3, 8), (0, 1), (8, 8), (5, 256)])
    def test_valid(self, hits: int, steps: int) -> None:
        """Hits up to steps, steps up to 256."""
        validate_euclidean(hits, steps)

    def test_hits_exceed_steps(self) -> None:
        """More hits than steps fails."""
        with pytest.raises(ValueError, match=r"Hits \(9\) cannot exceed steps \(8\)"):
            validate_euclidean(9, 8)

    def test_steps_bounds(self) -> None:
        """Steps must be in 1..256."""
        with pytest.raises(ValueError, match="Steps must be a positive integer"):
            validate_euclidean(0, 0)
        with pytest.raises(ValueError, match="cannot exceed 256"):
            validate_euclidean(1, 257)

    def test_negative_hits(self) -> None:
        """Negative hits fail."""
        with pytest.raises(ValueError, match="non-negative"):
            validate_euclidean(-1, 8)


class TestNameChecks:
    """Tests for scale, chord style and root note checks."""

    def test_scale_name(self) -> None:
        """Known scales pass; unknown and blank ones fail."""
        validate_scale_name("dorian")
        with pytest.raises(ValueError, match="Invalid scale name: hypermode"):
            validate_scale_name("hypermode")
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_scale_name("   ")

    def test_chord_style(self) -> None:
        """Known progression styles pass."""
        validate_chord_style("jazz")
        with pytest.raises(ValueError, match="Invalid chord style"):
            validate_chord_style("polka")

    @pytest.mark.parametrize("note", ["C", "f#", "a#", " G "])
    def test_root_note_valid(self, note: str) -> None:
        """Chromatic names pass in any case."""
        validate_root_note(note)

    def test_root_note_invalid(self) -> None:
        """Unknown notes list the valid ones."""
        with pytest.raises(ValueError, match="Valid notes: C, C#"):
            validate_root_note("H")

    def test_non_string_name(self) -> None:
        """Names must be strings."""
        with pytest.raises(ValueError, match="must be a string"):
            validate_scale_name(3)  # type: ignore[arg-type]


class TestStringLength:
    """Tests for validate_string_length."""

    def test_within_limit(self) -> None:
        """Short strings pass, empty ones too by default."""
        validate_string_length("hello", "Title")
        validate_string_length("", "Title")

    def test_too_long(self) -> None:
        """Strings over the limit fail with both lengths."""
        with pytest.raises(ValueError, match=r"Title too long \(max 3 characters, got 5\)"):
            validate_string_length("hello", "Title", max_length=3)

    def test_empty_not_allowed(self) -> None:
        """Blank strings can be refused."""
        with pytest.raises(ValueError, match="Title cannot be empty"):
            validate_string_length("  ", "Title", allow_empty=False)
