"""Shared fixtures: scripted random sources, fake clocks, detection factories."""

from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from signalbot.models.detection import Detection
from signalbot.services.signal_generator import RandomSignalGenerator, new_id


class ScriptedRng:
    """Replays queued draws, then falls back to a seeded numpy Generator.

    `ints` are returned verbatim from `integers()` (indexes or scores, in
    call order); `randoms` likewise from `random()`.
    """

    def __init__(self, randoms=(), ints=(), seed: int = 0):
        self.randoms = list(randoms)
        self.ints = list(ints)
        self._fallback = np.random.default_rng(seed)

    def random(self) -> float:
        if self.randoms:
            return self.randoms.pop(0)
        return float(self._fallback.random())

    def integers(self, low, high=None) -> int:
        if self.ints:
            return self.ints.pop(0)
        return int(self._fallback.integers(low, high))


class FakeClock:
    """Strictly increasing clock, one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def generator(clock) -> RandomSignalGenerator:
    return RandomSignalGenerator(np.random.default_rng(1234), clock=clock)


@pytest.fixture
def make_detection():
    def _make(confidence: int = 80, ticker: str = "$SOL", **overrides) -> Detection:
        fields = {
            "id": new_id(),
            "ticker": ticker,
            "handle": "@cobie",
            "post_content": f"{ticker} breakout imminent. NFA.",
            "confidence": confidence,
            "virality": 50,
            "trend": 50,
            "mentions": 1000,
        }
        fields.update(overrides)
        return Detection(**fields)

    return _make
