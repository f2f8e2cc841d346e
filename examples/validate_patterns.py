#!/usr/bin/env python3
"""
Example: Validating and Analyzing Patterns.

This demonstrates the static checks a pattern goes through before it is
sent to a live-coding editor: delimiter and safety checks, heuristics,
auto-fix, and structural analysis.

Usage:
    python examples/validate_patterns.py
"""

from chuk_mcp_strudel.analysis import analyze_pattern
from chuk_mcp_strudel.validation import PatternValidator, auto_fix, suggest

PATTERNS = {
    "basic beat": 'setcpm(120)\ns("bd*4, ~ sd, hh*8")',
    "layered": (
        'stack(s("bd*4").room(0.3), s("hh*8").gain(0.6), note("c2 eb2 g2").s("sawtooth"))'
    ),
    "unclosed": 's("bd*4"',
    "too loud": 's("bd*4").gain(8)',
    "unquoted": "s(bd sd).wobble(2)",
}


def main() -> None:
    """Run every example pattern through validation and analysis."""
    print("Strudel Pattern Validation Demo")
    print("=" * 40)
    print()

    validator = PatternValidator()

    for label, text in PATTERNS.items():
        print(f"{label}: {text!r}")

        verdict = validator.validate(text)
        print(f"  Valid: {'✓' if verdict.valid else '✗'}")
        for error in verdict.errors:
            print(f"    [ERROR] {error}")
        for warning in verdict.warnings:
            print(f"    [WARNING] {warning}")

        fixed = auto_fix(text)
        if fixed.changed:
            print(f"  Auto-fixed: {fixed.text!r}")
            for fix in fixed.fixes:
                print(f"    - {fix}")

        meta = analyze_pattern(fixed.text)
        tempo = f"{meta.bpm:g}" if meta.bpm is not None else "not set"
        print(f"  Tempo: {tempo}, events/cycle: {meta.events_per_cycle}")
        print(f"  Values: {', '.join(sorted(meta.unique_values)) or '-'}")
        print(f"  Functions: {', '.join(meta.functions_used)}")
        print(f"  Complexity: {meta.complexity:.2f}, stack: {meta.is_stack}")

        ideas = suggest(fixed.text)
        if ideas:
            print(f"  Idea: {ideas[0]}")
        print()

    print("Done! Validate before you play.")


if __name__ == "__main__":
    main()
