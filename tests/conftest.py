"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_strudel.recovery import ErrorRecovery, FailureHistory


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays and returns at once."""

    def __init__(self, clock: FakeClock | None = None):
        self.delays: list[float] = []
        self._clock = clock

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self._clock is not None:
            self._clock.advance(delay)


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock starting at a fixed epoch time."""
    return FakeClock()


@pytest.fixture
def sleep() -> RecordingSleep:
    """A sleep function that never waits."""
    return RecordingSleep()


@pytest.fixture
def history(clock: FakeClock) -> FailureHistory:
    """A failure history driven by the fake clock."""
    return FailureHistory(clock=clock)


@pytest.fixture
def recovery(history: FailureHistory, sleep: RecordingSleep) -> ErrorRecovery:
    """An executor with a fake clock and no real waiting."""
    return ErrorRecovery(history=history, sleep=sleep)
