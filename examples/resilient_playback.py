#!/usr/bin/env python3
"""
Example: Resilient Pattern Playback.

This demonstrates the recovery layer around a flaky editor: retries with
backoff, the simplified-pattern fallback, timeouts and the circuit breaker.
A fake editor stands in for the browser so the demo runs anywhere.

Usage:
    python examples/resilient_playback.py
"""

import asyncio
import logging

from chuk_mcp_strudel.models import RecoveryStrategy
from chuk_mcp_strudel.recovery import (
    CircuitOpenError,
    ErrorRecovery,
    OperationFailedError,
    OperationTimeoutError,
)
from chuk_mcp_strudel.validation import validate_pattern


class FlakyEditor:
    """Rejects patterns with effects, and fails the first write of each."""

    def __init__(self) -> None:
        self.writes = 0

    async def write(self, text: str) -> str:
        self.writes += 1
        await asyncio.sleep(0.01)
        if self.writes == 1 or ".room(" in text:
            raise RuntimeError("editor did not accept the pattern")
        return f"playing {text!r}"


async def main() -> None:
    """Demonstrate the recovery layer."""
    logging.basicConfig(level=logging.WARNING, format="  %(levelname)s %(message)s")

    print("Strudel Recovery Demo")
    print("=" * 40)
    print()

    recovery = ErrorRecovery()
    editor = FlakyEditor()

    # Validate first; only the write is retried
    text = 'setcpm(120)\ns("bd*4, hh*8").room(0.4)'
    verdict = validate_pattern(text)
    print(f"Pattern valid: {verdict.valid}")

    print("Writing with retries and the simplified-pattern fallback:")
    result = await recovery.handle_pattern_write(editor.write, text)
    print(f"  {result}")
    print()

    print("Timeout on a hung render:")

    async def hung_render() -> str:
        await asyncio.sleep(10)
        return "rendered"

    try:
        await recovery.execute_with_timeout(hung_render, 0.1, "render")
    except OperationTimeoutError as e:
        print(f"  {e}")
    print()

    print("Circuit breaker on a dead audio device:")

    async def dead_device() -> str:
        raise RuntimeError("audio device unavailable")

    guarded = recovery.create_circuit_breaker(dead_device, "audio", threshold=3)
    strategy = RecoveryStrategy(max_retries=1, retry_delay=0.05)
    for round_number in range(1, 4):
        try:
            await recovery.execute_with_retry(guarded, "audio", strategy)
        except CircuitOpenError as e:
            print(f"  round {round_number}: {e}")
        except OperationFailedError as e:
            print(f"  round {round_number}: {e}")
    print()

    print("Failure statistics:")
    for name, stats in recovery.get_error_stats().items():
        print(f"  {name}: {stats.count} recent failure(s), last at {stats.last_error}")
    print()

    print("Done!")


if __name__ == "__main__":
    asyncio.run(main())
