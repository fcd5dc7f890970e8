"""
stats.py — Run Statistics
=========================
Comparison / swap counters and the run clock.

Counters only ever go up during a run.  Elapsed time is not a ticking
clock: it is worked out on demand as `now - started_at`, and frozen by
`finish()` once the run ends so the figure shown afterwards stays put.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional


# ---------------------------------------------------------------------------
# Snapshot dataclass — what the Statistics panel renders
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StatsSnapshot:
    comparisons: int   = 0
    swaps:       int   = 0
    elapsed_ms:  float = 0.0


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------
class Statistics:
    """
    Attributes:
        comparisons : Comparisons performed in the current run.
        swaps       : Swaps / element writes performed in the current run.
        started_at  : Clock reading when the run began (None before any run).
        finished_at : Clock reading when the run ended (None while running).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.comparisons: int             = 0
        self.swaps:       int             = 0
        self.started_at:  Optional[float] = None
        self.finished_at: Optional[float] = None

    def reset(self, start: bool = False) -> None:
        """Zero the counters; with `start=True` also stamp a fresh start time."""
        self.comparisons = 0
        self.swaps       = 0
        self.started_at  = self._clock() if start else None
        self.finished_at = None

    def record_comparison(self) -> None:
        self.comparisons += 1

    def record_swap(self) -> None:
        self.swaps += 1

    def finish(self) -> None:
        if self.started_at is not None and self.finished_at is None:
            self.finished_at = self._clock()

    def elapsed_ms(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.finished_at if self.finished_at is not None else self._clock()
        return round((end - self.started_at) * 1000, 2)

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            comparisons=self.comparisons,
            swaps=self.swaps,
            elapsed_ms=self.elapsed_ms(),
        )
