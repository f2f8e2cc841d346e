"""
Tests for the safety scanner and the heuristic syntax checks.

Tests cover:
- Gain thresholds (soft warning, hard error)
- Runaway loops and dynamic evaluation
- Missing sound source, unquoted sounds, unknown functions, tempo
"""

import pytest

from chuk_mcp_strudel.validation.heuristics import check_syntax_heuristics
from chuk_mcp_strudel.validation.safety import check_safety, gain_values
from chuk_mcp_strudel.vocabulary import FunctionVocabulary


class TestGainChecks:
    """Tests for gain scanning."""

    def test_normal_gain_is_safe(self) -> None:
        """Gain at or below the soft ceiling produces nothing."""
        report = check_safety('s("bd*4").gain(0.8)')
        assert report.safe is True
        assert report.errors == []
        assert report.warnings == []

    def test_gain_at_soft_ceiling_is_fine(self) -> None:
        """The soft ceiling itself is allowed."""
        assert check_safety('s("bd").gain(2)').warnings == []

    def test_high_gain_warns(self) -> None:
        """Gain above 2.0 warns but stays safe."""
        report = check_safety('s("bd").gain(3)')
        assert report.safe is True
        assert report.warnings == ["High gain value detected: 3 - may be too loud"]

    def test_dangerous_gain_errors(self) -> None:
        """Gain above 5.0 is an error that names the value."""
        report = check_safety('s("bd").gain(8)')
        assert report.safe is False
        assert report.errors == ["Dangerous gain value: 8 - would be clamped to 2.0"]
        assert report.warnings == ["High gain value detected: 8 - may be too loud"]

    def test_decimal_gain(self) -> None:
        """Decimal gain values are parsed."""
        assert gain_values("s(\"bd\").gain(2.5).gain(.5)") == [2.5, 0.5]

    def test_exponent_gain(self) -> None:
        """Gain written with an exponent is judged by its value."""
        report = check_safety('s("bd").gain(1e3)')
        assert report.safe is False
        assert report.errors == ["Dangerous gain value: 1000 - would be clamped to 2.0"]
        assert gain_values("gain(2e-1) gain(1.5E+0)") == [0.2, 1.5]
        assert check_safety('s("bd").gain(2e-1)').warnings == []

    def test_gain_inside_string_ignored(self) -> None:
        """gain(...) inside a string literal is not a call."""
        assert check_safety('s("gain(9)")').safe is True

    def test_custom_ceilings(self) -> None:
        """Ceilings can be configured."""
        report = check_safety('s("bd").gain(1.5)', soft_ceiling=1.0, hard_ceiling=1.2)
        assert report.safe is False
        assert len(report.warnings) == 1


class TestForbiddenConstructs:
    """Tests for loop and eval detection."""

    @pytest.mark.parametrize(
        "text",
        ['while(true) { s("bd") }', "while (1) {}", "for (let i = 0;;) {}"],
    )
    def test_infinite_loops(self, text: str) -> None:
        """Unconditional loops are hard errors."""
        report = check_safety(text)
        assert report.safe is False
        assert "Potential infinite loop detected" in report.errors

    @pytest.mark.parametrize("text", ['eval("s(1)")', 'Function("return 1")()'])
    def test_dynamic_evaluation(self, text: str) -> None:
        """eval() and Function() are hard errors."""
        report = check_safety(text)
        assert report.safe is False
        assert "Use of eval() or Function() is not allowed" in report.errors

    def test_each_kind_reported_once(self) -> None:
        """Several matches of one kind give a single message."""
        report = check_safety('eval("a"); eval("b"); Function("c")')
        assert report.errors == ["Use of eval() or Function() is not allowed"]

    def test_bounded_loops_allowed(self) -> None:
        """Ordinary identifiers containing loop words are not flagged."""
        assert check_safety('s("bd").every(4, fast(2))').safe is True


class TestSyntaxHeuristics:
    """Tests for check_syntax_heuristics."""

    def test_clean_pattern(self) -> None:
        """A known, quoted, tempo-set pattern produces nothing."""
        report = check_syntax_heuristics('setcpm(120)\ns("bd*4").room(0.3)')
        assert report.warnings == []
        assert report.suggestions == []

    def test_missing_sound_source(self) -> None:
        """No s/sound/note/n/stack call warns with an example."""
        report = check_syntax_heuristics("setcpm(120)")
        assert "Pattern may not produce sound - no s(), note(), or stack() found" in report.warnings
        assert any('s("bd*4")' in s for s in report.suggestions)

    @pytest.mark.parametrize("text", ['note("c e g")', 'n("0 2")', 'sound("bd")', "stack()"])
    def test_sources_recognized(self, text: str) -> None:
        """Each member of the source set counts."""
        report = check_syntax_heuristics(text)
        assert not any("may not produce sound" in w for w in report.warnings)

    def test_source_inside_string_does_not_count(self) -> None:
        """A source call quoted inside a string is not a source."""
        report = check_syntax_heuristics('setcpm(120)\nconst x = "s(bd)"')
        assert any("may not produce sound" in w for w in report.warnings)

    def test_unquoted_sound(self) -> None:
        """An unquoted s() argument warns."""
        report = check_syntax_heuristics("s(bd)")
        assert 'Sound patterns should be in quotes: s("bd") not s(bd)' in report.warnings

    def test_unknown_function_named_once(self) -> None:
        """Unknown calls are reported once each, in order of appearance."""
        report = check_syntax_heuristics('s("bd").wobble(1).wobble(2).zap()')
        unknown = [w for w in report.warnings if w.startswith("Unknown function")]
        assert unknown == ["Unknown function: wobble", "Unknown function: zap"]

    def test_lookup_is_case_insensitive(self) -> None:
        """Known names match regardless of case."""
        report = check_syntax_heuristics('S("bd").FAST(2)')
        assert not any(w.startswith("Unknown function") for w in report.warnings)

    def test_mini_notation_is_not_a_call(self) -> None:
        """Euclid syntax inside a string is not an unknown function."""
        report = check_syntax_heuristics('s("bd(3,8)")')
        assert not any(w.startswith("Unknown function") for w in report.warnings)

    def test_missing_tempo_suggested(self) -> None:
        """No setcpm/setcps/setbpm call suggests a tempo call."""
        report = check_syntax_heuristics('s("bd*4")')
        assert "Consider adding setcpm(120) to set tempo" in report.suggestions

    @pytest.mark.parametrize(
        "text", ['s("bd").gain(bpmShift)', 's("bd").cpmOffset(1)', 's("setcpm(90)")']
    )
    def test_tempo_needs_a_call(self, text: str) -> None:
        """Identifiers and strings that merely contain tempo words do not count."""
        report = check_syntax_heuristics(text)
        assert "Consider adding setcpm(120) to set tempo" in report.suggestions

    @pytest.mark.parametrize("text", ["setcpm(90)", "setcps (0.5)", "setbpm(140)"])
    def test_each_tempo_call_counts(self, text: str) -> None:
        """Any of the three tempo calls silences the suggestion."""
        report = check_syntax_heuristics(f'{text}\ns("bd")')
        assert report.suggestions == []

    def test_custom_vocabulary(self) -> None:
        """A vocabulary can be injected."""
        vocab = FunctionVocabulary(name="tiny", categories={"sources": ["s"]})
        report = check_syntax_heuristics('setcps(0.5)\ns("bd").fast(2)', vocab)
        unknown = [w for w in report.warnings if w.startswith("Unknown function")]
        assert unknown == ["Unknown function: setcps", "Unknown function: fast"]
