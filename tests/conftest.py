import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from algorithms import SortOps, CancelToken
from bars import Sequence
from engine import Statistics


class FakeClock:
    """Manually advanced clock for Statistics."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_ops():
    """Build a SortOps over explicit values with fresh stats and token."""

    def _make(values):
        return SortOps(Sequence.from_values(values), Statistics(), CancelToken())

    return _make


@pytest.fixture
def drive():
    """Exhaust a sort generator and return the frames it yielded."""

    def _drive(gen):
        return list(gen)

    return _drive
